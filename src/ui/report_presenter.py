from typing import List

from src.config.constants import CPU_SCORE_CAP, RAM_SCORE_CAP, GPU_SCORE_CAP, DISK_SCORE_CAP, TOTAL_SCORE_CAP
from src.schemas.assessment import AssessmentResult
from src.schemas.hardware import HardwareInventory


class ReportPresenter:
    """Renders an assessment as plain text for a terminal or a log file."""

    WIDTH = 60

    def render(self, inventory: HardwareInventory, result: AssessmentResult) -> str:
        lines: List[str] = []
        rule = "=" * self.WIDTH

        lines.append(rule)
        lines.append("AI HARDWARE READINESS REPORT")
        lines.append(rule)

        lines.append("")
        lines.append("Hardware")
        lines.extend(self._hardware_lines(inventory))

        b = result.breakdown
        lines.append("")
        lines.append("Scores")
        lines.append(f"  CPU:   {b.cpu_score:>3}/{CPU_SCORE_CAP}")
        lines.append(f"  RAM:   {b.ram_score:>3}/{RAM_SCORE_CAP}")
        lines.append(f"  GPU:   {b.gpu_score:>3}/{GPU_SCORE_CAP}")
        lines.append(f"  Disk:  {b.disk_score:>3}/{DISK_SCORE_CAP}")
        lines.append(f"  Total: {b.total:>3}/{TOTAL_SCORE_CAP}")

        lines.append("")
        lines.append(f"Rating: {result.rating_band.value}")
        lines.append(f"  {result.recommendation_text}")

        compat = result.compatibility
        lines.append("")
        lines.append(f"Model compatibility ({compat.supported_tier.value})")
        if compat.summary:
            lines.append(f"  {compat.summary}")
        lines.append(f"  Capable:    {self._join(compat.capable_models)}")
        lines.append(f"  Struggling: {self._join(compat.struggling_models)}")

        if result.missing_categories:
            lines.append("")
            lines.append(f"Not detected: {', '.join(result.missing_categories)}")

        if result.improvements:
            lines.append("")
            lines.append("Suggested improvements")
            for hint in result.improvements:
                lines.append(f"  - {hint}")

        lines.append(rule)
        return "\n".join(lines)

    @staticmethod
    def _hardware_lines(inventory: HardwareInventory) -> List[str]:
        lines = []
        cpu = inventory.cpu
        if cpu:
            lines.append(
                f"  CPU:  {cpu.name} ({cpu.cores} cores / {cpu.logical_processors} threads, "
                f"{cpu.max_clock_ghz:.2f} GHz)"
            )
        else:
            lines.append("  CPU:  not detected")

        lines.append(f"  RAM:  {inventory.ram.total_gb:.1f} GB" if inventory.ram else "  RAM:  not detected")

        if inventory.gpus:
            for gpu in inventory.gpus:
                lines.append(f"  GPU:  {gpu.name} ({gpu.vram_gb:.1f} GB VRAM)")
        else:
            lines.append("  GPU:  no dedicated GPU")

        disk = inventory.disk
        if disk:
            text = f"  Disk: {disk.free_gb:.1f} GB free"
            if disk.free_percent is not None:
                text += f" of {disk.total_gb:.1f} GB ({disk.free_percent:.1f}%)"
            lines.append(text)
        else:
            lines.append("  Disk: not detected")
        return lines

    @staticmethod
    def _join(names) -> str:
        return ", ".join(sorted(names)) if names else "none"
