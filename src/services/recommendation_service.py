from typing import List, Optional, Tuple

from src.config.constants import (
    RATING_THRESHOLDS,
    RATING_FLOOR,
    TOTAL_SCORE_CAP,
    COMPATIBILITY_TIERS_GB,
    COMPATIBILITY_FLOOR,
    COMPATIBILITY_NO_GPU,
    CPU_SCORE_CAP,
    RAM_SCORE_CAP,
    GPU_SCORE_CAP,
    DISK_SCORE_CAP,
)
from src.schemas.assessment import (
    RatingBand,
    CompatibilityTier,
    CompatibilityReport,
    ScoreBreakdown,
)
from src.schemas.hardware import HardwareInventory
from src.services.compatibility_catalog import CompatibilityCatalog, get_compatibility_catalog
from src.services.scoring_service import (
    CPU_CORES,
    CPU_CLOCK,
    RAM_TOTAL,
    GPU_VRAM,
    DISK_FREE,
    select_best_gpu,
)
from src.utils.logger import get_logger

log = get_logger(__name__)

RECOMMENDATIONS = {
    RatingBand.EXCELLENT: (
        "Excellent for AI development. Your system can handle large models "
        "and intensive training workloads."
    ),
    RatingBand.GOOD: (
        "Good for AI development. Your system can run most medium-sized models effectively."
    ),
    RatingBand.FAIR: (
        "Fair for AI development. Capabilities are limited; consider smaller models "
        "or enabling low-VRAM modes."
    ),
    RatingBand.POOR: (
        "Not well suited for local AI workloads. Consider cloud-based solutions "
        "or hardware upgrades for serious AI work."
    ),
}


def rating_for_total(total: int) -> RatingBand:
    """Inclusive lower bounds, highest first: 80 EXCELLENT, 60 GOOD, 40 FAIR."""
    if isinstance(total, bool) or not isinstance(total, int) or not 0 <= total <= TOTAL_SCORE_CAP:
        raise ValueError(f"total must be an int in [0, {TOTAL_SCORE_CAP}], got {total!r}")
    for band_name, threshold in RATING_THRESHOLDS:
        if total >= threshold:
            return RatingBand[band_name]
    return RatingBand[RATING_FLOOR]


def tier_for_vram(best_gpu_vram_gb: Optional[float]) -> CompatibilityTier:
    """Compatibility tier from best-GPU VRAM; None means no dedicated GPU."""
    if best_gpu_vram_gb is None:
        return CompatibilityTier(COMPATIBILITY_NO_GPU)
    for tier_value, threshold in COMPATIBILITY_TIERS_GB:
        if best_gpu_vram_gb >= threshold:
            return CompatibilityTier(tier_value)
    return CompatibilityTier(COMPATIBILITY_FLOOR)


class RecommendationMapper:
    """
    Turns a total score and the best GPU's VRAM into a rating band,
    advisory text and a model compatibility report.
    The rating and the compatibility tier are derived independently.
    """

    def __init__(self, catalog: Optional[CompatibilityCatalog] = None):
        self.catalog = catalog or get_compatibility_catalog()

    def classify(
        self,
        total: int,
        best_gpu_vram_gb: Optional[float]
    ) -> Tuple[RatingBand, str, CompatibilityReport]:
        band = rating_for_total(total)
        return band, RECOMMENDATIONS[band], self.compatibility(best_gpu_vram_gb)

    def compatibility(self, best_gpu_vram_gb: Optional[float]) -> CompatibilityReport:
        tier = tier_for_vram(best_gpu_vram_gb)
        return CompatibilityReport(
            best_gpu_vram_gb=best_gpu_vram_gb,
            supported_tier=tier,
            capable_models=self.catalog.capable_models(tier),
            struggling_models=self.catalog.struggling_models(tier),
            summary=self.catalog.summary(tier),
        )

    def suggest_improvements(
        self,
        breakdown: ScoreBreakdown,
        inventory: HardwareInventory
    ) -> Tuple[str, ...]:
        """
        One upgrade hint per category scoring under half its cap,
        most heavily weighted category first (GPU, CPU, RAM, Disk).
        """
        hints: List[str] = []

        if breakdown.gpu_score < GPU_SCORE_CAP / 2:
            best = select_best_gpu(inventory.gpus)
            if best is None:
                hints.append("Add a dedicated GPU: AI workloads are GPU-bound and none was detected.")
            else:
                target = GPU_VRAM.next_threshold(best.vram_gb)
                if target is not None:
                    hints.append(
                        f"Upgrade the GPU: {target:g} GB of VRAM or more raises the GPU score "
                        f"(best detected: {best.name}, {best.vram_gb:g} GB)."
                    )

        if breakdown.cpu_score < CPU_SCORE_CAP / 2:
            cpu = inventory.cpu
            if cpu is None:
                hints.append("CPU details could not be detected; the CPU score is 0.")
            else:
                cores = CPU_CORES.next_threshold(cpu.cores)
                clock = CPU_CLOCK.next_threshold(cpu.max_clock_ghz)
                if cores is not None:
                    hints.append(f"Upgrade the CPU: {cores:g} or more cores raises the CPU score.")
                elif clock is not None:
                    hints.append(f"Upgrade the CPU: a {clock:g} GHz or faster clock raises the CPU score.")

        if breakdown.ram_score < RAM_SCORE_CAP / 2:
            if inventory.ram is None:
                hints.append("System memory could not be detected; the RAM score is 0.")
            else:
                target = RAM_TOTAL.next_threshold(inventory.ram.total_gb)
                if target is not None:
                    hints.append(f"Add RAM: {target:g} GB or more raises the memory score.")

        if breakdown.disk_score < DISK_SCORE_CAP / 2:
            if inventory.disk is None:
                hints.append("Disk space could not be detected; the disk score is 0.")
            else:
                target = DISK_FREE.next_threshold(inventory.disk.free_gb)
                if target is not None:
                    hints.append(f"Free up disk space: {target:g} GB or more free raises the disk score.")

        return tuple(hints)
