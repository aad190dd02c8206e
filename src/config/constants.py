"""
Centralized constants for AI Readiness.
Breakpoint tables are (threshold, points) pairs ordered highest threshold first;
the first threshold the value meets wins.
"""

# --- Category Caps (GPU dominates AI workloads) ---
CPU_SCORE_CAP = 25
RAM_SCORE_CAP = 25
GPU_SCORE_CAP = 40
DISK_SCORE_CAP = 10
TOTAL_SCORE_CAP = CPU_SCORE_CAP + RAM_SCORE_CAP + GPU_SCORE_CAP + DISK_SCORE_CAP

# --- CPU ---
CPU_CORE_TIERS = ((16, 15), (12, 12), (8, 10), (6, 8), (4, 5))
CPU_CORE_FLOOR = 2
CPU_CLOCK_TIERS_GHZ = ((4.0, 10), (3.5, 8), (3.0, 6), (2.5, 4))
CPU_CLOCK_FLOOR = 2

# --- RAM ---
RAM_TIERS_GB = ((64, 25), (32, 20), (16, 15), (8, 10), (4, 5))
RAM_FLOOR = 0

# --- GPU ---
VRAM_TIERS_GB = ((24, 25), (16, 20), (12, 15), (8, 12), (6, 8), (4, 5))
VRAM_FLOOR = 2

# Priority order matters: the first pattern found in the lowercased name wins.
GPU_FAMILY_WEIGHTS = (
    ("rtx 40", 15),
    ("rtx 30", 12),
    ("rtx 20", 10),
    ("gtx 16", 8),
    ("gtx 10", 6),
    ("quadro", 10),
    ("tesla", 15),
)
GPU_FAMILY_DEFAULT_WEIGHT = 3

# --- Disk (free space on the primary volume) ---
DISK_FREE_TIERS_GB = ((100, 10), (50, 8), (20, 6), (10, 4))
DISK_FLOOR = 2

# --- Rating Bands (inclusive lower bounds) ---
RATING_THRESHOLDS = (("EXCELLENT", 80), ("GOOD", 60), ("FAIR", 40))
RATING_FLOOR = "POOR"

# --- Compatibility Tiers (best GPU VRAM, inclusive lower bounds) ---
COMPATIBILITY_TIERS_GB = (("full", 24), ("high", 12), ("medium", 8), ("entry", 6))
COMPATIBILITY_FLOOR = "minimal"
COMPATIBILITY_NO_GPU = "cpu_only"

# --- Probe ---
BYTES_PER_GB = 1024 ** 3
MIB_PER_GB = 1024
DEFAULT_PROBE_TIMEOUT = 5  # seconds
