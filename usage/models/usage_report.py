"""Usage report data model."""

from dataclasses import dataclass
from typing import List

from usage.models.derived_metrics import DerivedMetrics
from usage.models.resource_usage_snapshot import ResourceUsageSnapshot
from usage.models.timing_sample import TimingSample
from usage.util.cal_utils import kb_to_gb, kb_to_mb


@dataclass(frozen=True)
class UsageReport:
    """
    Everything measured for one run of a command.

    Renders to the fixed, line-oriented report printed on stdout.
    """
    timing: TimingSample
    usage: ResourceUsageSnapshot
    derived: DerivedMetrics

    def format_time_stats(self) -> List[str]:
        """Format CPU and wall time for display."""
        return [
            f"User CPU time (s): {self.usage.user_seconds}",
            f"System CPU time (s): {self.usage.system_seconds}",
            f"Total CPU time (s): {self.usage.total_seconds}",
            f"Total Wall time (s): {self.timing.elapsed:6.2f}",
        ]

    def format_memory_stats(self) -> List[str]:
        """Format peak resident memory for display."""
        kb = self.usage.max_rss_kb
        return [
            f"Maximum memory (KB): {kb}",
            f"Maximum memory (MB): {kb_to_mb(kb)}",
            f"Maximum memory (GB): {kb_to_gb(kb)}",
        ]

    @staticmethod
    def _format_size(label: str, kb: int) -> List[str]:
        return [
            f"Maximum {label} (KB): {kb}",
            f"Maximum {label} (MB): {kb_to_mb(kb)}",
        ]

    def format_io_stats(self) -> List[str]:
        """Format block I/O counts for display."""
        return [
            f"Number of FS Reads : {self.usage.block_input_ops}",
            f"Number of FS Writes: {self.usage.block_output_ops}",
        ]

    def sections(self) -> List[List[str]]:
        return [
            self.format_time_stats(),
            self.format_memory_stats(),
            self._format_size("code", self.derived.code_kb),
            self._format_size("data", self.derived.data_kb),
            self._format_size("stack", self.derived.stack_kb),
            self.format_io_stats(),
        ]

    def render(self) -> str:
        """Sections separated by one blank line, no trailing newline."""
        return "\n\n".join("\n".join(section) for section in self.sections())
