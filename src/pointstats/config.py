from dataclasses import dataclass
from enum import Enum
from typing import Union


class MedianMethod(str, Enum):
    """Alternative geometric median schemes; they share one contract but converge differently."""
    # reciprocal-distance weighted fixed point (Weiszfeld)
    WEISZFELD = "weiszfeld"
    # two points moved along their eccentricity directions, secant style
    TWO_POINT = "two_point"
    # 1-D secant on the magnitude of the eccentricity vector
    SECANT = "secant"


@dataclass
class SolverConfig:
    eps: float = 1e-6
    method: Union[MedianMethod, str] = MedianMethod.WEISZFELD
    max_iterations: int = 1000

    def __post_init__(self):
        if not self.eps > 0:
            raise ValueError(f"eps must be positive, got {self.eps}")
        if int(self.max_iterations) != self.max_iterations:
            raise ValueError(f"max_iterations must be an integer, got {self.max_iterations}")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")
        try:
            self.method = MedianMethod(self.method)
        except ValueError:
            choices = ", ".join(m.value for m in MedianMethod)
            raise ValueError(f"Unknown median method: {self.method}, expected one of {choices}")
