"""
Hardware Assessment Service.

Composes the scoring engine and the recommendation mapper into a single
AssessmentResult. assess() is a pure transform of the inventory it is given;
assess_current_system() additionally runs the hardware probe.
"""

from typing import Optional, Tuple

from src.schemas.assessment import AssessmentResult, RatingBand
from src.schemas.hardware import HardwareInventory
from src.services.recommendation_service import RecommendationMapper
from src.services.scoring_service import ScoringEngine, select_best_gpu
from src.services.system_service import SystemService
from src.utils.logger import log


class AssessmentService:
    """Probe -> ScoringEngine -> RecommendationMapper."""

    def __init__(
        self,
        engine: Optional[ScoringEngine] = None,
        mapper: Optional[RecommendationMapper] = None
    ):
        self.engine = engine or ScoringEngine()
        self.mapper = mapper or RecommendationMapper()

    def assess(self, inventory: HardwareInventory) -> AssessmentResult:
        breakdown = self.engine.score(inventory)

        # Same largest-VRAM rule the engine scored with
        best_gpu = select_best_gpu(inventory.gpus)
        best_vram = best_gpu.vram_gb if best_gpu is not None else None

        band, text, compatibility = self.mapper.classify(breakdown.total, best_vram)

        result = AssessmentResult(
            breakdown=breakdown,
            rating_band=band,
            recommendation_text=text,
            compatibility=compatibility,
            missing_categories=inventory.missing_categories,
            improvements=self.mapper.suggest_improvements(breakdown, inventory),
        )
        log.info(
            f"Hardware assessment: {breakdown.total}/100 ({band.value}), "
            f"compatibility tier: {compatibility.supported_tier.value}"
        )
        return result

    def assess_current_system(self) -> Tuple[HardwareInventory, AssessmentResult]:
        inventory = SystemService.scan_inventory()
        return inventory, self.assess(inventory)

    @staticmethod
    def meets_requirement(result: AssessmentResult, minimum: RatingBand) -> bool:
        """Readiness gate: True when the rating is at or above minimum."""
        return result.rating_band.at_least(minimum)
