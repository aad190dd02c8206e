"""
Tests for the CLI entry point and its readiness exit codes.
"""

from unittest.mock import patch

from src import main as cli
from src.schemas.hardware import HardwareInventory, CpuInfo, RamInfo, GpuInfo, DiskInfo

STRONG = HardwareInventory(
    cpu=CpuInfo(12, 24, 3.8), ram=RamInfo(32),
    gpus=(GpuInfo("NVIDIA GeForce RTX 3090", 24),), disk=DiskInfo(300, 1000),
)


def config_with(minimum_rating):
    """config_manager.get replacement overriding only minimum_rating."""
    def get(key, default=None):
        if key == "minimum_rating":
            return minimum_rating
        return default
    return get


@patch("src.services.assessment_service.SystemService.scan_inventory", return_value=STRONG)
def test_ready_machine_exits_zero(mock_scan, capsys):
    assert cli.main() == cli.EXIT_READY
    assert "AI HARDWARE READINESS REPORT" in capsys.readouterr().out


@patch("src.services.assessment_service.SystemService.scan_inventory", return_value=HardwareInventory())
def test_weak_machine_exits_one(mock_scan):
    with patch.object(cli.config_manager, "get", side_effect=config_with("FAIR")):
        assert cli.main() == cli.EXIT_NOT_READY


@patch("src.services.assessment_service.SystemService.scan_inventory", return_value=HardwareInventory())
def test_minimum_rating_is_configurable(mock_scan):
    with patch.object(cli.config_manager, "get", side_effect=config_with("poor")):
        assert cli.main() == cli.EXIT_READY


@patch("src.services.assessment_service.SystemService.scan_inventory", side_effect=RuntimeError("boom"))
def test_crash_exits_two(mock_scan):
    assert cli.main() == cli.EXIT_ERROR
