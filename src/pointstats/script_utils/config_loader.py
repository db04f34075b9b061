from dataclasses import dataclass, asdict, field
from typing import Dict, Any, List, Optional
from datetime import datetime
import uuid
import yaml
from functools import reduce

from ..config import SolverConfig


@dataclass
class BenchmarkConfig:
    """Configuration for timing the geometric median schemes.

    Supports YAML-based config inheritance: a config may list parent files under
    `inherits`, later parents and local values overriding earlier ones. The
    solver parameters live in a nested `solver_config` mapping that is validated
    into one SolverConfig per benchmarked method; everything else stays flat so
    a run can be printed or recorded as a single dict.
    """

    # Experiment metadata
    experiment_name: str
    run_id: str

    # Data
    seed: int
    dimensions: int
    n_points: int
    repeats: int

    # Solvers
    methods: List[str]
    solver_config: Dict[str, Any] = field(default_factory=dict)

    # Optional (with defaults)
    include_centroid: bool = True

    @classmethod
    def from_file(cls, config_path: str, overrides: Optional[Dict[str, Any]] = None) -> 'BenchmarkConfig':
        """Load config with inheritance support
        - apply each inherited config in order
        - later configs override earlier configs
        - local config overrides inherited configs
        - apply overrides last
        - generate run_id if not provided
        """
        config = cls._load_config_dict_with_inheritance(config_path)

        if overrides:
            config = cls._merge_config_dicts(config, overrides)

        if 'run_id' not in config:
            config['run_id'] = f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_{str(uuid.uuid4())[:8]}"

        return cls(**config)

    def __post_init__(self):
        for name in ('dimensions', 'n_points', 'repeats'):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if isinstance(self.methods, str):
            self.methods = [self.methods]
        if not self.methods:
            raise ValueError("methods must name at least one median method")
        if 'method' in self.solver_config:
            raise ValueError("solver_config must not set method, list the schemes under methods instead")

        self.solver_configs = {
            method: SolverConfig(method=method, **self.solver_config) for method in self.methods
        }
        self.flat_config = self._create_flat_config()

    def _create_flat_config(self) -> Dict[str, Any]:
        """Flatten config for printing and recording"""
        flat_config = asdict(self)

        del flat_config['solver_config']
        for key, value in self.solver_config.items():
            flat_config[f"solver_{key}"] = value

        return flat_config

    @staticmethod
    def _merge_config_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Merge configs, deep merging the nested solver_config"""
        result = base.copy()

        for key, value in override.items():
            if key == 'solver_config' and key in result and isinstance(result[key], dict):
                result[key] = {**result[key], **value}
            else:
                result[key] = value

        return result

    @staticmethod
    def _load_config_dict_with_inheritance(config_path: str) -> Dict[str, Any]:
        """Load config as dict, resolving `inherits` recursively"""
        try:
            with open(config_path) as f:
                config = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}")

        if config is None:
            config = {}

        if 'inherits' not in config:
            return config

        inherited_configs = [BenchmarkConfig._load_config_dict_with_inheritance(path)
                             for path in config['inherits']]

        local_config = config.copy()
        local_config.pop('inherits', None)

        return reduce(BenchmarkConfig._merge_config_dicts, inherited_configs + [local_config], {})
