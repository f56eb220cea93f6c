from enum import Enum


class CpuDivisor(Enum):
    SUM = "sum"
    DIFFERENCE = "difference"
