"""
End-to-end tests for AssessmentService (scoring + recommendation) on fixed inventories.
"""

import pytest
from dataclasses import replace
from unittest.mock import patch

from src.schemas.assessment import RatingBand, CompatibilityTier
from src.schemas.hardware import HardwareInventory, CpuInfo, RamInfo, GpuInfo, DiskInfo
from src.services.assessment_service import AssessmentService
from src.services.compatibility_catalog import CompatibilityCatalog
from src.services.recommendation_service import RecommendationMapper, RECOMMENDATIONS


@pytest.fixture(scope="module")
def service() -> AssessmentService:
    return AssessmentService(mapper=RecommendationMapper(CompatibilityCatalog.load()))


class TestAssess:

    def test_high_end_workstation(self, service):
        inv = HardwareInventory(
            cpu=CpuInfo(cores=16, logical_processors=32, max_clock_ghz=4.2),
            ram=RamInfo(total_gb=64),
            gpus=(GpuInfo(name="NVIDIA RTX 4090", vram_gb=24),),
            disk=DiskInfo(free_gb=120, total_gb=500),
        )
        result = service.assess(inv)
        assert result.breakdown.total == 100
        assert result.rating_band is RatingBand.EXCELLENT
        assert result.recommendation_text == RECOMMENDATIONS[RatingBand.EXCELLENT]
        assert result.compatibility.supported_tier is CompatibilityTier.FULL
        assert result.compatibility.struggling_models == frozenset()
        assert result.missing_categories == ()
        assert result.improvements == ()

    def test_budget_laptop_without_gpu(self, service):
        inv = HardwareInventory(
            cpu=CpuInfo(cores=4, logical_processors=8, max_clock_ghz=2.2),
            ram=RamInfo(total_gb=8),
            disk=DiskInfo(free_gb=15),
        )
        result = service.assess(inv)
        assert result.breakdown.total == 18
        assert result.breakdown.gpu_score == 0
        assert result.rating_band is RatingBand.POOR
        assert result.compatibility.cpu_only
        assert result.compatibility.capable_models == frozenset()
        assert result.compatibility.best_gpu_vram_gb is None
        assert result.missing_categories == ("gpu",)
        assert result.improvements

    def test_compatibility_uses_largest_vram_gpu(self, service):
        inv = HardwareInventory(gpus=(
            GpuInfo(name="NVIDIA GeForce GTX 1050", vram_gb=2),
            GpuInfo(name="NVIDIA GeForce RTX 3060", vram_gb=12),
        ))
        result = service.assess(inv)
        assert result.compatibility.best_gpu_vram_gb == 12
        assert result.compatibility.supported_tier is CompatibilityTier.HIGH
        assert result.breakdown.gpu_score == 15 + 12

    def test_empty_inventory(self, service):
        result = service.assess(HardwareInventory())
        assert result.breakdown.total == 0
        assert result.rating_band is RatingBand.POOR
        assert result.compatibility.cpu_only

    def test_deterministic(self, service):
        inv = HardwareInventory(
            cpu=CpuInfo(8, 16, 3.6), ram=RamInfo(32),
            gpus=(GpuInfo("Quadro RTX 5000", 16),), disk=DiskInfo(60, 256),
        )
        assert service.assess(inv) == service.assess(inv)

    def test_mid_range_desktop_is_good(self, service):
        inv = HardwareInventory(
            cpu=CpuInfo(8, 16, 3.6),       # 10 + 8
            ram=RamInfo(32),               # 20
            gpus=(GpuInfo("NVIDIA GeForce RTX 3060", 12),),  # 15 + 12
            disk=DiskInfo(60, 256),        # 8
        )
        result = service.assess(inv)
        assert result.breakdown.total == 73
        assert result.rating_band is RatingBand.GOOD


class TestGate:

    @pytest.mark.parametrize("band,minimum,expected", [
        (RatingBand.GOOD, RatingBand.FAIR, True),
        (RatingBand.FAIR, RatingBand.FAIR, True),
        (RatingBand.POOR, RatingBand.FAIR, False),
        (RatingBand.GOOD, RatingBand.EXCELLENT, False),
    ])
    def test_meets_requirement(self, service, band, minimum, expected):
        result = service.assess(HardwareInventory())
        result = replace(result, rating_band=band)
        assert AssessmentService.meets_requirement(result, minimum) is expected


class TestAssessCurrentSystem:

    @patch("src.services.assessment_service.SystemService.scan_inventory")
    def test_probes_then_assesses(self, mock_scan, service):
        mock_scan.return_value = HardwareInventory(ram=RamInfo(16))
        inventory, result = service.assess_current_system()
        mock_scan.assert_called_once()
        assert inventory.ram.total_gb == 16
        assert result.breakdown.ram_score == 15
        assert result.missing_categories == ("cpu", "gpu", "disk")
