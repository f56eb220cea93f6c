from dataclasses import dataclass
from typing import List, Sequence


@dataclass(frozen=True)
class Invocation:
    """Command to measure: argv[0] is the program, the rest its arguments"""
    argv: tuple

    def __post_init__(self):
        if not self.argv:
            raise ValueError("Invocation requires at least a program name")

    @classmethod
    def from_args(cls, command: str, args: Sequence[str]) -> 'Invocation':
        return cls(argv=(command, *args))

    @property
    def program(self) -> str:
        return self.argv[0]

    def to_list(self) -> List[str]:
        return list(self.argv)
