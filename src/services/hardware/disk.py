import os

import psutil

from src.config.constants import BYTES_PER_GB
from src.schemas.hardware import DiskInfo
from src.services.hardware.base import DetectionFailedError


def detect_disk(path: str = ".") -> DiskInfo:
    """
    Free and total space of the volume holding path.

    Raises:
        DetectionFailedError: If the volume cannot be read
    """
    target = os.path.abspath(os.path.expanduser(path))
    try:
        usage = psutil.disk_usage(target)
    except (psutil.Error, OSError) as e:
        raise DetectionFailedError("Disk", f"Could not read disk usage for {target}", str(e)) from e

    return DiskInfo(
        free_gb=round(usage.free / BYTES_PER_GB, 2),
        total_gb=round(usage.total / BYTES_PER_GB, 2),
        path=target,
    )
