from dataclasses import dataclass
from typing import Optional

from usage.consts.CpuDivisor import CpuDivisor


@dataclass
class UsageConfig:
    cpu_divisor: CpuDivisor = CpuDivisor.SUM
    log_level: str = "WARNING"
    log_file: Optional[str] = None
