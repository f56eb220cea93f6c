import os

from usage.consts.CpuDivisor import CpuDivisor


def ticks_per_second() -> int:
    """Clock ticks per second, as used by the kernel's rusage integrals."""
    return os.sysconf("SC_CLK_TCK")


def total_cpu_seconds(user_seconds: int, system_seconds: int, divisor: CpuDivisor = CpuDivisor.SUM) -> int:
    """
    CPU seconds used to normalize tick-integrated sizes, floored at 1.

    Args:
        user_seconds: Whole seconds of user CPU time
        system_seconds: Whole seconds of system CPU time
        divisor: SUM (user + system) or DIFFERENCE (user - system)

    Returns:
        int: Denominator that is always >= 1
    """
    if divisor is CpuDivisor.DIFFERENCE:
        total = user_seconds - system_seconds
    else:
        total = user_seconds + system_seconds
    return max(total, 1)


def normalize_tick_integral(raw: int, total_seconds: int, ticks: int) -> int:
    """
    Convert a size expressed in KB * ticks-of-execution into plain KB.

    Args:
        raw: Integral value reported by getrusage()
        total_seconds: CPU seconds the children ran (already clamped to >= 1)
        ticks: Clock ticks per second

    Returns:
        int: Average size in KB
    """
    return raw // ticks // max(total_seconds, 1)


def kb_to_mb(kb: int) -> int:
    return kb // 1024


def kb_to_gb(kb: int) -> int:
    return kb // 1024 // 1024
