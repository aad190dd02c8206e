"""
Hardware inventory schemas.

A HardwareInventory is an immutable snapshot of the facts a probe could gather.
Every category is optional: a category the probe could not read is simply absent
and contributes nothing to the assessment. Values that are present must be sane;
malformed values raise InvalidInventory at construction time.
"""

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple


class InvalidInventory(ValueError):
    """Raised when probe output violates the inventory preconditions."""

    def __init__(self, field_name: str, value, reason: str):
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field_name}={value!r}: {reason}")


def _check_number(field_name: str, value, integer: bool = False):
    # bool is an int subclass; True cores is a probe bug, not 1 core
    if isinstance(value, bool):
        raise InvalidInventory(field_name, value, "expected a number, got bool")
    if integer and not isinstance(value, int):
        raise InvalidInventory(field_name, value, "expected an integer")
    if not isinstance(value, (int, float)):
        raise InvalidInventory(field_name, value, "expected a number")
    if not math.isfinite(value):
        raise InvalidInventory(field_name, value, "must be finite")
    if value < 0:
        raise InvalidInventory(field_name, value, "must not be negative")


@dataclass(frozen=True)
class CpuInfo:
    """Processor facts."""
    cores: int
    logical_processors: int
    max_clock_ghz: float
    name: str = "Unknown"

    def __post_init__(self):
        _check_number("cpu.cores", self.cores, integer=True)
        _check_number("cpu.logical_processors", self.logical_processors, integer=True)
        _check_number("cpu.max_clock_ghz", self.max_clock_ghz)


@dataclass(frozen=True)
class RamInfo:
    """System memory facts."""
    total_gb: float

    def __post_init__(self):
        _check_number("ram.total_gb", self.total_gb)


@dataclass(frozen=True)
class GpuInfo:
    """A single graphics adapter."""
    name: str
    vram_gb: float

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise InvalidInventory("gpu.name", self.name, "expected a string")
        _check_number("gpu.vram_gb", self.vram_gb)


@dataclass(frozen=True)
class DiskInfo:
    """Primary volume facts. total_gb of 0 means the total is unknown."""
    free_gb: float
    total_gb: float = 0.0
    path: str = ""

    def __post_init__(self):
        _check_number("disk.free_gb", self.free_gb)
        _check_number("disk.total_gb", self.total_gb)
        if self.total_gb and self.free_gb > self.total_gb:
            raise InvalidInventory(
                "disk.free_gb", self.free_gb,
                f"exceeds total_gb={self.total_gb}"
            )

    @property
    def free_percent(self) -> Optional[float]:
        """Free space as a percentage. Display only, never scored."""
        if not self.total_gb:
            return None
        return round(self.free_gb / self.total_gb * 100, 1)


@dataclass(frozen=True)
class HardwareInventory:
    """Output of SystemService.scan_inventory()"""
    cpu: Optional[CpuInfo] = None
    ram: Optional[RamInfo] = None
    gpus: Tuple[GpuInfo, ...] = field(default_factory=tuple)
    disk: Optional[DiskInfo] = None

    def __post_init__(self):
        if self.cpu is not None and not isinstance(self.cpu, CpuInfo):
            raise InvalidInventory("cpu", self.cpu, "expected CpuInfo")
        if self.ram is not None and not isinstance(self.ram, RamInfo):
            raise InvalidInventory("ram", self.ram, "expected RamInfo")
        if self.disk is not None and not isinstance(self.disk, DiskInfo):
            raise InvalidInventory("disk", self.disk, "expected DiskInfo")

        gpus = self.gpus if self.gpus is not None else ()
        try:
            gpus = tuple(gpus)
        except TypeError:
            raise InvalidInventory("gpus", self.gpus, "expected a sequence of GpuInfo") from None
        for gpu in gpus:
            if not isinstance(gpu, GpuInfo):
                raise InvalidInventory("gpus", gpu, "expected GpuInfo")
        # Frozen: normalize lists to tuples through object.__setattr__
        object.__setattr__(self, "gpus", gpus)

    @property
    def missing_categories(self) -> Tuple[str, ...]:
        missing = []
        if self.cpu is None:
            missing.append("cpu")
        if self.ram is None:
            missing.append("ram")
        if not self.gpus:
            missing.append("gpu")
        if self.disk is None:
            missing.append("disk")
        return tuple(missing)
