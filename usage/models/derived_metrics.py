from dataclasses import dataclass
from typing import Optional

from usage.consts.CpuDivisor import CpuDivisor
from usage.models.resource_usage_snapshot import ResourceUsageSnapshot
from usage.util.cal_utils import normalize_tick_integral, ticks_per_second, total_cpu_seconds


@dataclass(frozen=True)
class DerivedMetrics:
    """Code, data and stack sizes in KB, averaged over the children's CPU time"""
    code_kb: int
    data_kb: int
    stack_kb: int

    @classmethod
    def from_snapshot(
        cls,
        snapshot: ResourceUsageSnapshot,
        divisor: CpuDivisor = CpuDivisor.SUM,
        ticks: Optional[int] = None,
    ) -> 'DerivedMetrics':
        """
        Normalize the tick-integrated fields of a snapshot.

        Args:
            snapshot: Usage captured after the child terminated
            divisor: How user and system seconds combine into the denominator
            ticks: Clock ticks per second (default: the running system's)

        Returns:
            DerivedMetrics with every size in KB
        """
        if ticks is None:
            ticks = ticks_per_second()
        total = total_cpu_seconds(snapshot.user_seconds, snapshot.system_seconds, divisor)

        return cls(
            code_kb=normalize_tick_integral(snapshot.shared_text_integral, total, ticks),
            data_kb=normalize_tick_integral(snapshot.unshared_data_integral, total, ticks),
            stack_kb=normalize_tick_integral(snapshot.unshared_stack_integral, total, ticks),
        )
