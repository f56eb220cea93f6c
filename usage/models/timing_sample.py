from dataclasses import dataclass


@dataclass(frozen=True)
class TimingSample:
    """Wall-clock timestamps taken around the child's lifetime"""
    start: float
    end: float

    @property
    def elapsed(self) -> float:
        return self.end - self.start
