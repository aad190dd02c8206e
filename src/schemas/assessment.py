from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Tuple

from src.config.constants import (
    CPU_SCORE_CAP,
    RAM_SCORE_CAP,
    GPU_SCORE_CAP,
    DISK_SCORE_CAP,
)


class RatingBand(Enum):
    """Qualitative rating derived from the total score, best first."""
    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"

    @property
    def rank(self) -> int:
        # 3 = EXCELLENT ... 0 = POOR
        return len(RatingBand) - 1 - list(RatingBand).index(self)

    def at_least(self, other: "RatingBand") -> bool:
        return self.rank >= other.rank


class CompatibilityTier(Enum):
    """Which model classes the best GPU can run, keyed on its VRAM."""
    FULL = "full"            # >= 24 GB
    HIGH = "high"            # >= 12 GB
    MEDIUM = "medium"        # >= 8 GB
    ENTRY = "entry"          # >= 6 GB
    MINIMAL = "minimal"      # < 6 GB
    CPU_ONLY = "cpu_only"    # no dedicated GPU


@dataclass(frozen=True)
class ScoreBreakdown:
    """Capped per-category scores. total is derived so it always equals the sum."""
    cpu_score: int = 0
    ram_score: int = 0
    gpu_score: int = 0
    disk_score: int = 0

    CAPS = {
        "cpu_score": CPU_SCORE_CAP,
        "ram_score": RAM_SCORE_CAP,
        "gpu_score": GPU_SCORE_CAP,
        "disk_score": DISK_SCORE_CAP,
    }

    def __post_init__(self):
        for name, cap in self.CAPS.items():
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= cap:
                raise ValueError(f"{name} must be an int in [0, {cap}], got {value!r}")

    @property
    def total(self) -> int:
        return self.cpu_score + self.ram_score + self.gpu_score + self.disk_score

    def to_dict(self) -> Dict[str, int]:
        return {
            "cpu_score": self.cpu_score,
            "ram_score": self.ram_score,
            "gpu_score": self.gpu_score,
            "disk_score": self.disk_score,
            "total": self.total,
        }


@dataclass(frozen=True)
class CompatibilityReport:
    """Model classes the best GPU runs comfortably vs. with difficulty."""
    best_gpu_vram_gb: Optional[float]
    supported_tier: CompatibilityTier
    capable_models: FrozenSet[str] = frozenset()
    struggling_models: FrozenSet[str] = frozenset()
    summary: str = ""

    @property
    def cpu_only(self) -> bool:
        return self.supported_tier is CompatibilityTier.CPU_ONLY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "best_gpu_vram_gb": self.best_gpu_vram_gb,
            "supported_tier": self.supported_tier.value,
            "cpu_only": self.cpu_only,
            "capable_models": sorted(self.capable_models),
            "struggling_models": sorted(self.struggling_models),
            "summary": self.summary,
        }


@dataclass(frozen=True)
class AssessmentResult:
    """Output of AssessmentService.assess()"""
    breakdown: ScoreBreakdown
    rating_band: RatingBand
    recommendation_text: str
    compatibility: CompatibilityReport

    # Derived from the inventory, informational
    missing_categories: Tuple[str, ...] = field(default_factory=tuple)
    improvements: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return self.breakdown.total

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scores": self.breakdown.to_dict(),
            "rating_band": self.rating_band.value,
            "recommendation": self.recommendation_text,
            "compatibility": self.compatibility.to_dict(),
            "missing_categories": list(self.missing_categories),
            "improvements": list(self.improvements),
        }
