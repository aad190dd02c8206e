from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from src.config.constants import (
    CPU_CORE_TIERS,
    CPU_CORE_FLOOR,
    CPU_CLOCK_TIERS_GHZ,
    CPU_CLOCK_FLOOR,
    RAM_TIERS_GB,
    RAM_FLOOR,
    VRAM_TIERS_GB,
    VRAM_FLOOR,
    GPU_FAMILY_WEIGHTS,
    GPU_FAMILY_DEFAULT_WEIGHT,
    DISK_FREE_TIERS_GB,
    DISK_FLOOR,
)
from src.schemas.hardware import HardwareInventory, GpuInfo
from src.schemas.assessment import ScoreBreakdown
from src.utils.logger import get_logger

log = get_logger(__name__)


class ThresholdTable:
    """
    Ordered breakpoint table: (threshold, points) pairs evaluated highest-first.
    The first threshold the value reaches wins; below all of them yields the floor.
    """

    def __init__(self, tiers: Iterable[Tuple[float, int]], floor: int):
        self.tiers = tuple(sorted(tiers, key=lambda t: t[0], reverse=True))
        self.floor = floor

    def lookup(self, value: float) -> int:
        for threshold, points in self.tiers:
            if value >= threshold:
                return points
        return self.floor

    def next_threshold(self, value: float) -> Optional[float]:
        """Smallest threshold above value, i.e. the next step up. None at the top tier."""
        above = [threshold for threshold, _ in self.tiers if threshold > value]
        return min(above) if above else None

    @property
    def max_points(self) -> int:
        return max([points for _, points in self.tiers] + [self.floor])


class GpuFamilyTable:
    """
    Ordered (pattern, weight) pairs matched case-insensitively as substrings of
    the GPU name. Priority is list order, not weight, so "Quadro RTX 4000"
    scores as "rtx 40" while "Quadro RTX 5000" falls through to "quadro".
    Names matching nothing get the default.
    """

    def __init__(self, patterns: Sequence[Tuple[str, int]], default: int):
        self.patterns = tuple((p.lower(), w) for p, w in patterns)
        self.default = default

    def lookup(self, name: str) -> int:
        lowered = (name or "").lower()
        for pattern, weight in self.patterns:
            if pattern in lowered:
                return weight
        return self.default

    @property
    def max_points(self) -> int:
        return max([w for _, w in self.patterns] + [self.default])


CPU_CORES = ThresholdTable(CPU_CORE_TIERS, CPU_CORE_FLOOR)
CPU_CLOCK = ThresholdTable(CPU_CLOCK_TIERS_GHZ, CPU_CLOCK_FLOOR)
RAM_TOTAL = ThresholdTable(RAM_TIERS_GB, RAM_FLOOR)
GPU_VRAM = ThresholdTable(VRAM_TIERS_GB, VRAM_FLOOR)
GPU_FAMILY = GpuFamilyTable(GPU_FAMILY_WEIGHTS, GPU_FAMILY_DEFAULT_WEIGHT)
DISK_FREE = ThresholdTable(DISK_FREE_TIERS_GB, DISK_FLOOR)


def gpu_family_weight(name: str) -> int:
    return GPU_FAMILY.lookup(name)


def select_best_gpu(gpus: Sequence[GpuInfo]) -> Optional[GpuInfo]:
    """
    The GPU with the largest VRAM; only this one is scored.
    Ties go to the higher family weight, then the name, so list order never matters.
    """
    if not gpus:
        return None
    return max(gpus, key=lambda g: (g.vram_gb, gpu_family_weight(g.name), g.name))


# --- Category Scorers ---
# Each takes the full inventory and returns its capped category score.

def score_cpu(inventory: HardwareInventory) -> int:
    cpu = inventory.cpu
    if cpu is None:
        return 0
    return CPU_CORES.lookup(cpu.cores) + CPU_CLOCK.lookup(cpu.max_clock_ghz)


def score_ram(inventory: HardwareInventory) -> int:
    if inventory.ram is None:
        return 0
    return RAM_TOTAL.lookup(inventory.ram.total_gb)


def score_gpu(inventory: HardwareInventory) -> int:
    best = select_best_gpu(inventory.gpus)
    if best is None:
        return 0
    return GPU_VRAM.lookup(best.vram_gb) + GPU_FAMILY.lookup(best.name)


def score_disk(inventory: HardwareInventory) -> int:
    if inventory.disk is None:
        return 0
    return DISK_FREE.lookup(inventory.disk.free_gb)


CategoryScorer = Callable[[HardwareInventory], int]

CATEGORY_SCORERS: List[Tuple[str, CategoryScorer]] = [
    ("cpu_score", score_cpu),
    ("ram_score", score_ram),
    ("gpu_score", score_gpu),
    ("disk_score", score_disk),
]


class ScoringEngine:
    """
    Maps a HardwareInventory to a ScoreBreakdown.

    Caps: GPU 40, CPU 25, RAM 25, Disk 10 (total 100). Absent categories score 0.
    The engine is stateless; the same inventory always yields the same breakdown.
    """

    def __init__(self, scorers: Optional[List[Tuple[str, CategoryScorer]]] = None):
        self.scorers = scorers if scorers is not None else CATEGORY_SCORERS

    def score(self, inventory: HardwareInventory) -> ScoreBreakdown:
        scores = {}
        for category, scorer in self.scorers:
            scores[category] = scorer(inventory)
            log.debug(f"{category}: {scores[category]}")

        # ScoreBreakdown enforces each category range
        return ScoreBreakdown(**scores)
