"""
RAM detection.

Reports total system memory. psutil is the primary source, with sysctl and
/proc/meminfo as platform fallbacks when psutil cannot read the value.
Detection fails explicitly rather than assuming a size: a guessed 16 GB
would silently inflate the memory score.
"""

import platform

import psutil

from src.config.constants import BYTES_PER_GB, DEFAULT_PROBE_TIMEOUT
from src.schemas.hardware import RamInfo
from src.services.hardware.base import DetectionFailedError
from src.utils.logger import log
from src.utils.subprocess_utils import run_command, run_powershell, extract_number


def detect_ram(timeout: float = DEFAULT_PROBE_TIMEOUT) -> RamInfo:
    """
    Detect total system RAM.

    Raises:
        DetectionFailedError: If every detection method fails
    """
    return RamInfo(total_gb=round(_get_total_ram(timeout), 2))


def _get_total_ram(timeout: float) -> float:
    try:
        return psutil.virtual_memory().total / BYTES_PER_GB
    except (psutil.Error, OSError) as e:
        log.debug(f"psutil RAM detection failed: {e}")

    system = platform.system()
    if system == "Darwin":
        return _get_total_ram_macos(timeout)
    elif system == "Linux":
        return _get_total_ram_linux()
    elif system == "Windows":
        return _get_total_ram_windows(timeout)

    raise DetectionFailedError(
        component="RAM",
        message="Could not detect system RAM",
        details=f"No fallback for platform {system!r}"
    )


def _get_total_ram_macos(timeout: float) -> float:
    """Total RAM on macOS via sysctl."""
    mem_bytes = extract_number(run_command(["sysctl", "-n", "hw.memsize"], timeout=timeout))
    if mem_bytes:
        return mem_bytes / BYTES_PER_GB

    raise DetectionFailedError(
        component="RAM",
        message="Could not detect RAM on macOS",
        details="sysctl hw.memsize failed"
    )


def _get_total_ram_linux() -> float:
    """Total RAM on Linux via /proc/meminfo."""
    try:
        with open("/proc/meminfo", "r") as f:
            for line in f:
                if line.startswith("MemTotal:"):
                    # Value is in kB
                    kb = int(line.split()[1])
                    return kb / (1024 ** 2)
    except (OSError, ValueError, IndexError) as e:
        log.debug(f"Linux /proc/meminfo RAM detection failed: {e}")

    raise DetectionFailedError(
        component="RAM",
        message="Could not detect RAM on Linux",
        details="/proc/meminfo parsing failed"
    )


def _get_total_ram_windows(timeout: float) -> float:
    """Total RAM on Windows via CIM."""
    mem_bytes = extract_number(run_powershell(
        "(Get-CimInstance Win32_ComputerSystem).TotalPhysicalMemory", timeout=timeout
    ))
    if mem_bytes:
        return mem_bytes / BYTES_PER_GB

    raise DetectionFailedError(
        component="RAM",
        message="Could not detect RAM on Windows",
        details="Win32_ComputerSystem query failed"
    )
