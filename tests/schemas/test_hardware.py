"""
Tests for hardware inventory schemas and InvalidInventory validation.
"""

import math

import pytest

from src.schemas.hardware import (
    HardwareInventory,
    CpuInfo,
    RamInfo,
    GpuInfo,
    DiskInfo,
    InvalidInventory,
)


class TestValidation:

    @pytest.mark.parametrize("factory", [
        lambda: CpuInfo(cores=-1, logical_processors=4, max_clock_ghz=3.0),
        lambda: CpuInfo(cores=4, logical_processors=-8, max_clock_ghz=3.0),
        lambda: CpuInfo(cores=4.5, logical_processors=8, max_clock_ghz=3.0),
        lambda: CpuInfo(cores=True, logical_processors=8, max_clock_ghz=3.0),
        lambda: CpuInfo(cores=4, logical_processors=8, max_clock_ghz=-1.0),
        lambda: CpuInfo(cores=4, logical_processors=8, max_clock_ghz=math.nan),
        lambda: RamInfo(total_gb=-16),
        lambda: RamInfo(total_gb=math.inf),
        lambda: RamInfo(total_gb="16"),
        lambda: GpuInfo(name="RTX 3080", vram_gb=-10),
        lambda: GpuInfo(name=None, vram_gb=10),
        lambda: DiskInfo(free_gb=-1),
        lambda: DiskInfo(free_gb=600, total_gb=500),
    ])
    def test_malformed_values_fail_fast(self, factory):
        with pytest.raises(InvalidInventory):
            factory()

    def test_invalid_inventory_is_value_error(self):
        with pytest.raises(ValueError) as exc_info:
            RamInfo(total_gb=-1)
        assert exc_info.value.field_name == "ram.total_gb"
        assert "must not be negative" in str(exc_info.value)

    def test_non_gpu_entries_rejected(self):
        with pytest.raises(InvalidInventory):
            HardwareInventory(gpus=[{"name": "RTX 3080", "vram_gb": 10}])

    def test_wrong_category_type_rejected(self):
        with pytest.raises(InvalidInventory):
            HardwareInventory(ram=16)

    def test_zero_values_are_valid(self):
        CpuInfo(cores=0, logical_processors=0, max_clock_ghz=0)
        RamInfo(total_gb=0)
        GpuInfo(name="", vram_gb=0)
        DiskInfo(free_gb=0, total_gb=0)


class TestHardwareInventory:

    def test_empty_inventory_is_valid(self):
        inv = HardwareInventory()
        assert inv.gpus == ()
        assert inv.missing_categories == ("cpu", "ram", "gpu", "disk")

    def test_gpu_list_normalized_to_tuple(self):
        gpus = [GpuInfo("A", 4), GpuInfo("B", 8)]
        inv = HardwareInventory(gpus=gpus)
        assert inv.gpus == (GpuInfo("A", 4), GpuInfo("B", 8))
        gpus.append(GpuInfo("C", 16))
        assert len(inv.gpus) == 2

    def test_none_gpus_treated_as_empty(self):
        assert HardwareInventory(gpus=None).gpus == ()

    def test_immutable(self):
        inv = HardwareInventory(ram=RamInfo(16))
        with pytest.raises(AttributeError):
            inv.ram = RamInfo(32)

    def test_missing_categories_partial(self):
        inv = HardwareInventory(cpu=CpuInfo(8, 16, 3.5), disk=DiskInfo(100))
        assert inv.missing_categories == ("ram", "gpu")


class TestDiskInfo:

    def test_free_percent(self):
        assert DiskInfo(free_gb=120, total_gb=500).free_percent == 24.0

    def test_free_percent_unknown_total(self):
        assert DiskInfo(free_gb=15).free_percent is None
