"""
Tests for assessment result schemas.
"""

import pytest

from src.schemas.assessment import (
    AssessmentResult,
    CompatibilityReport,
    CompatibilityTier,
    RatingBand,
    ScoreBreakdown,
)


class TestScoreBreakdown:

    def test_total_is_sum(self):
        b = ScoreBreakdown(cpu_score=18, ram_score=20, gpu_score=27, disk_score=8)
        assert b.total == 73

    @pytest.mark.parametrize("kwargs", [
        {"cpu_score": 26},
        {"ram_score": -1},
        {"gpu_score": 41},
        {"disk_score": 11},
        {"gpu_score": 12.0},
        {"cpu_score": True},
    ])
    def test_out_of_range_rejected(self, kwargs):
        with pytest.raises(ValueError):
            ScoreBreakdown(**kwargs)

    def test_to_dict_includes_total(self):
        assert ScoreBreakdown(cpu_score=1, ram_score=2, gpu_score=3, disk_score=4).to_dict() == {
            "cpu_score": 1, "ram_score": 2, "gpu_score": 3, "disk_score": 4, "total": 10,
        }


class TestRatingBand:

    def test_ordering(self):
        assert RatingBand.EXCELLENT.at_least(RatingBand.GOOD)
        assert RatingBand.FAIR.at_least(RatingBand.FAIR)
        assert not RatingBand.POOR.at_least(RatingBand.FAIR)
        assert RatingBand.POOR.at_least(RatingBand.POOR)

    def test_rank(self):
        assert [b.rank for b in RatingBand] == [3, 2, 1, 0]


class TestAssessmentResult:

    def test_to_dict(self):
        result = AssessmentResult(
            breakdown=ScoreBreakdown(cpu_score=4, ram_score=10, gpu_score=0, disk_score=4),
            rating_band=RatingBand.POOR,
            recommendation_text="Consider cloud.",
            compatibility=CompatibilityReport(
                best_gpu_vram_gb=None,
                supported_tier=CompatibilityTier.CPU_ONLY,
                struggling_models=frozenset({"b", "a"}),
            ),
            missing_categories=("gpu",),
        )
        data = result.to_dict()
        assert data["scores"]["total"] == 18
        assert data["rating_band"] == "POOR"
        assert data["compatibility"]["cpu_only"] is True
        assert data["compatibility"]["struggling_models"] == ["a", "b"]
        assert data["compatibility"]["capable_models"] == []
        assert data["missing_categories"] == ["gpu"]
        assert result.total == 18
