"""
Shared subprocess helpers for hardware detection.

Every helper returns None instead of raising when the command is missing,
times out, or exits non-zero; detectors decide whether that is fatal.
"""

import platform
import re
import subprocess
from typing import List, Optional

from src.config.constants import DEFAULT_PROBE_TIMEOUT
from src.utils.logger import log


def _creation_flags() -> int:
    if platform.system() == "Windows":
        return subprocess.CREATE_NO_WINDOW
    return 0


def run_command(cmd: List[str], timeout: float = DEFAULT_PROBE_TIMEOUT) -> Optional[str]:
    """Run cmd and return stripped stdout, or None on any failure."""
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            creationflags=_creation_flags(),
        )
    except FileNotFoundError:
        log.debug(f"Command not found: {cmd[0]}")
        return None
    except subprocess.TimeoutExpired:
        log.warning(f"Command timed out after {timeout}s: {' '.join(cmd)}")
        return None
    except OSError as e:
        log.debug(f"Command failed to start: {' '.join(cmd)}: {e}")
        return None

    if result.returncode != 0:
        log.debug(f"Command exited {result.returncode}: {' '.join(cmd)}")
        return None
    return result.stdout.strip()


def run_powershell(script: str, timeout: float = DEFAULT_PROBE_TIMEOUT) -> Optional[str]:
    """Run a PowerShell snippet (Windows only)."""
    if platform.system() != "Windows":
        return None
    return run_command(["powershell", "-NoProfile", "-Command", script], timeout=timeout)


def extract_number(output: Optional[str]) -> Optional[float]:
    """First number found in output, e.g. '17179869184\\r\\n' -> 17179869184.0"""
    if not output:
        return None
    match = re.search(r"\d+(?:\.\d+)?", output)
    return float(match.group()) if match else None
