from functools import lru_cache
from typing import Callable, Optional, Tuple, TypeVar

from src.config.constants import DEFAULT_PROBE_TIMEOUT
from src.schemas.hardware import HardwareInventory, CpuInfo, RamInfo, GpuInfo, DiskInfo, InvalidInventory
from src.services.hardware.base import DetectionFailedError
from src.services.hardware.cpu import detect_cpu
from src.services.hardware.disk import detect_disk
from src.services.hardware.gpu import detect_gpus
from src.services.hardware.ram import detect_ram
from src.utils.logger import log

T = TypeVar("T")


class SystemService:
    """
    Hardware probe. Each category is detected independently; a category that
    fails is left empty so the rest of the assessment still runs.
    """

    @staticmethod
    @lru_cache(maxsize=1)
    def get_gpus(timeout: float = DEFAULT_PROBE_TIMEOUT) -> Tuple[GpuInfo, ...]:
        """All detected GPUs. Cached, GPU enumeration shells out."""
        return detect_gpus(timeout)

    @staticmethod
    def get_cpu(timeout: float = DEFAULT_PROBE_TIMEOUT) -> CpuInfo:
        return detect_cpu(timeout)

    @staticmethod
    def get_ram(timeout: float = DEFAULT_PROBE_TIMEOUT) -> RamInfo:
        return detect_ram(timeout)

    @staticmethod
    def get_disk(path: str = ".") -> DiskInfo:
        return detect_disk(path)

    @staticmethod
    def _probe(category: str, detector: Callable[[], T]) -> Optional[T]:
        try:
            return detector()
        except (DetectionFailedError, InvalidInventory, OSError) as e:
            log.warning(f"{category} detection failed, scoring it as absent: {e}")
            return None

    @staticmethod
    def scan_inventory(disk_path: Optional[str] = None, timeout: Optional[float] = None) -> HardwareInventory:
        """
        Probe CPU, RAM, GPUs and disk into a HardwareInventory.
        disk_path and timeout default to the disk_path / probe_timeout_secs config values.
        """
        from src.config.manager import config_manager

        if disk_path is None:
            disk_path = config_manager.get("disk_path", ".")
        if timeout is None:
            timeout = config_manager.get("probe_timeout_secs", DEFAULT_PROBE_TIMEOUT)

        cpu = SystemService._probe("CPU", lambda: SystemService.get_cpu(timeout))
        ram = SystemService._probe("RAM", lambda: SystemService.get_ram(timeout))
        gpus = SystemService._probe("GPU", lambda: SystemService.get_gpus(timeout))
        disk = SystemService._probe("Disk", lambda: SystemService.get_disk(disk_path))

        inventory = HardwareInventory(cpu=cpu, ram=ram, gpus=gpus or (), disk=disk)
        if inventory.missing_categories:
            log.info(f"Inventory incomplete, missing: {', '.join(inventory.missing_categories)}")
        return inventory
