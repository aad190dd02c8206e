"""
GPU detection.

Enumerates every graphics adapter that can be found, in order of preference:
1. nvidia-smi (all NVIDIA GPUs, accurate VRAM)
2. Win32_VideoController via PowerShell (any vendor on Windows)
3. Apple Silicon unified memory (treated as VRAM)

Finding no GPU is not an error: an empty tuple is returned and the
assessment falls back to the CPU-only tier.
"""

import json
import platform
from typing import List, Optional, Tuple

from src.config.constants import BYTES_PER_GB, MIB_PER_GB, DEFAULT_PROBE_TIMEOUT
from src.schemas.hardware import GpuInfo
from src.utils.logger import log
from src.utils.subprocess_utils import run_command, run_powershell, extract_number

# Integrated/virtual adapters that should not count as a dedicated GPU
IGNORED_ADAPTERS = ("microsoft basic display", "remote display", "virtual", "parsec")


def detect_gpus(timeout: float = DEFAULT_PROBE_TIMEOUT) -> Tuple[GpuInfo, ...]:
    gpus = _detect_nvidia(timeout)
    if gpus:
        return gpus

    system = platform.system()
    if system == "Windows":
        gpus = _detect_windows(timeout)
    elif system == "Darwin" and platform.machine() == "arm64":
        gpus = _detect_apple_silicon(timeout)

    if not gpus:
        log.info("No dedicated GPU detected")
    return gpus


def parse_nvidia_smi_output(output: Optional[str]) -> Tuple[GpuInfo, ...]:
    """
    Parse `nvidia-smi --query-gpu=name,memory.total --format=csv,noheader,nounits`.
    One 'name, MiB' line per GPU; unparsable lines are skipped.
    """
    gpus: List[GpuInfo] = []
    if not output:
        return ()
    for line in output.splitlines():
        if not line.strip():
            continue
        name, sep, mem = line.rpartition(",")
        if not sep:
            log.debug(f"Skipping nvidia-smi line without memory column: {line!r}")
            continue
        try:
            vram_gb = round(float(mem.strip()) / MIB_PER_GB, 2)
        except ValueError:
            log.debug(f"Skipping nvidia-smi line with bad memory value: {line!r}")
            continue
        gpus.append(GpuInfo(name=name.strip(), vram_gb=vram_gb))
    return tuple(gpus)


def parse_video_controller_json(output: Optional[str]) -> Tuple[GpuInfo, ...]:
    """
    Parse `Get-CimInstance Win32_VideoController | Select Name, AdapterRAM | ConvertTo-Json`.
    PowerShell emits an object for a single adapter and an array for several.
    """
    if not output:
        return ()
    try:
        data = json.loads(output)
    except ValueError:
        log.debug("Win32_VideoController output is not JSON")
        return ()
    if isinstance(data, dict):
        data = [data]

    gpus: List[GpuInfo] = []
    for entry in data:
        if not isinstance(entry, dict):
            continue
        name = str(entry.get("Name") or "").strip()
        if not name or any(ignored in name.lower() for ignored in IGNORED_ADAPTERS):
            continue
        adapter_ram = entry.get("AdapterRAM") or 0
        try:
            vram_gb = round(abs(float(adapter_ram)) / BYTES_PER_GB, 2)
        except (TypeError, ValueError):
            vram_gb = 0.0
        gpus.append(GpuInfo(name=name, vram_gb=vram_gb))
    return tuple(gpus)


def _detect_nvidia(timeout: float) -> Tuple[GpuInfo, ...]:
    output = run_command(
        ["nvidia-smi", "--query-gpu=name,memory.total", "--format=csv,noheader,nounits"],
        timeout=timeout,
    )
    gpus = parse_nvidia_smi_output(output)
    for gpu in gpus:
        log.info(f"GPU detected via nvidia-smi: {gpu.name} ({gpu.vram_gb:.1f}GB VRAM)")
    return gpus


def _detect_windows(timeout: float) -> Tuple[GpuInfo, ...]:
    # AdapterRAM is a uint32 and saturates at 4 GB; nvidia-smi is preferred for that reason
    output = run_powershell(
        "Get-CimInstance Win32_VideoController | Select-Object Name, AdapterRAM | ConvertTo-Json",
        timeout=timeout,
    )
    gpus = parse_video_controller_json(output)
    for gpu in gpus:
        log.info(f"GPU detected via Win32_VideoController: {gpu.name} ({gpu.vram_gb:.1f}GB VRAM)")
    return gpus


def _detect_apple_silicon(timeout: float) -> Tuple[GpuInfo, ...]:
    mem_bytes = extract_number(run_command(["sysctl", "-n", "hw.memsize"], timeout=timeout))
    if not mem_bytes:
        log.warning("Apple Silicon unified memory size could not be read")
        return ()
    chip = run_command(["sysctl", "-n", "machdep.cpu.brand_string"], timeout=timeout) or "Apple Silicon"
    gpu = GpuInfo(name=f"{chip} (MPS)", vram_gb=round(mem_bytes / BYTES_PER_GB, 2))
    log.info(f"GPU detected: {gpu.name} ({gpu.vram_gb:.1f}GB unified memory)")
    return (gpu,)
