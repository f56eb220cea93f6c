import sys
from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class ResourceUsageSnapshot:
    """
    Accounting for all terminated children, captured once after the wait.

    The three *_integral fields are in KB * clock ticks, exactly as the
    kernel reports them; see DerivedMetrics for the plain KB figures.
    """
    user_cpu_seconds: float
    system_cpu_seconds: float
    max_rss_kb: int

    shared_text_integral: int
    unshared_data_integral: int
    unshared_stack_integral: int

    block_input_ops: int
    block_output_ops: int

    @property
    def user_seconds(self) -> int:
        return int(self.user_cpu_seconds)

    @property
    def system_seconds(self) -> int:
        return int(self.system_cpu_seconds)

    @property
    def total_seconds(self) -> int:
        return self.user_seconds + self.system_seconds

    @classmethod
    def from_rusage(cls, rusage, platform: str = sys.platform) -> 'ResourceUsageSnapshot':
        """Build a snapshot from a resource.struct_rusage."""
        max_rss = int(rusage.ru_maxrss)
        # macOS reports peak RSS in bytes, everyone else in kilobytes
        if platform == 'darwin':
            max_rss //= 1024

        return cls(
            user_cpu_seconds=rusage.ru_utime,
            system_cpu_seconds=rusage.ru_stime,
            max_rss_kb=max_rss,
            shared_text_integral=int(rusage.ru_ixrss),
            unshared_data_integral=int(rusage.ru_idrss),
            unshared_stack_integral=int(rusage.ru_isrss),
            block_input_ops=int(rusage.ru_inblock),
            block_output_ops=int(rusage.ru_oublock),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
