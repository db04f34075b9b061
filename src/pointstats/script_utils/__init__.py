from .args_parser import ArgsParser
from .config_loader import BenchmarkConfig

__all__ = [
    "ArgsParser",
    "BenchmarkConfig",
]
