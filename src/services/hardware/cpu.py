"""
CPU detection: physical cores, logical processors, max clock and model name.
"""

import platform
from typing import Optional

import psutil

from src.config.constants import DEFAULT_PROBE_TIMEOUT
from src.schemas.hardware import CpuInfo
from src.services.hardware.base import DetectionFailedError
from src.utils.logger import log
from src.utils.subprocess_utils import run_command, run_powershell, extract_number


def detect_cpu(timeout: float = DEFAULT_PROBE_TIMEOUT) -> CpuInfo:
    """
    Detect CPU facts.

    Raises:
        DetectionFailedError: If core counts cannot be read
    """
    try:
        physical = psutil.cpu_count(logical=False)
        logical = psutil.cpu_count(logical=True)
    except (psutil.Error, OSError) as e:
        raise DetectionFailedError("CPU", "Could not read core counts", str(e)) from e

    if not physical and not logical:
        raise DetectionFailedError("CPU", "Could not read core counts", "psutil returned None")

    # Some VMs report only one of the two counts
    physical = physical or logical
    logical = logical or physical

    clock_ghz = _get_max_clock_ghz(timeout)
    name = _get_cpu_name(timeout)
    log.info(f"CPU detected: {name} ({physical} cores, {logical} threads, {clock_ghz:.2f} GHz)")

    return CpuInfo(
        cores=physical,
        logical_processors=logical,
        max_clock_ghz=clock_ghz,
        name=name,
    )


def _get_max_clock_ghz(timeout: float) -> float:
    """
    Max clock in GHz. psutil reports MHz; max is 0 on some platforms,
    in which case the current frequency is used. 0.0 when unknown.
    """
    try:
        freq = psutil.cpu_freq()
    except (psutil.Error, OSError, NotImplementedError) as e:
        log.debug(f"psutil cpu_freq failed: {e}")
        freq = None

    if freq:
        mhz = freq.max or freq.current
        if mhz:
            return round(mhz / 1000, 2)

    if platform.system() == "Darwin":
        hz = extract_number(run_command(["sysctl", "-n", "hw.cpufrequency_max"], timeout=timeout))
        if hz:
            return round(hz / 1e9, 2)
    elif platform.system() == "Windows":
        mhz = extract_number(run_powershell(
            "(Get-CimInstance Win32_Processor | Select-Object -First 1).MaxClockSpeed", timeout=timeout
        ))
        if mhz:
            return round(mhz / 1000, 2)

    log.warning("CPU clock speed could not be detected; scoring it at the lowest tier")
    return 0.0


def _get_cpu_name(timeout: float) -> str:
    system = platform.system()
    name: Optional[str] = None

    if system == "Linux":
        try:
            with open("/proc/cpuinfo", "r") as f:
                for line in f:
                    if line.startswith("model name"):
                        name = line.split(":", 1)[1].strip()
                        break
        except OSError as e:
            log.debug(f"/proc/cpuinfo read failed: {e}")
    elif system == "Darwin":
        name = run_command(["sysctl", "-n", "machdep.cpu.brand_string"], timeout=timeout)
    elif system == "Windows":
        name = run_powershell(
            "(Get-CimInstance Win32_Processor | Select-Object -First 1).Name", timeout=timeout
        )

    return name or platform.processor() or "Unknown"
