import argparse
from typing import Dict, Any, Optional, List, Tuple


class ArgsParser(argparse.ArgumentParser):
    """ArgumentParser for config driven scripts: a YAML config path plus key=value overrides"""

    def __init__(self, description: str = None, require_config: bool = True, **kwargs):
        super().__init__(description=description, **kwargs)

        self.add_argument('--config', required=require_config,
                          help='Path to YAML config file')
        self.add_argument('--override', action='append', metavar='KEY=VALUE',
                          help='Override a config value. Nested keys use dots: solver_config.eps=1e-9')

        self._require_config = require_config

    def parse_config_args(self, args: Optional[List[str]] = None) -> Tuple[str, Dict[str, Any]]:
        """Parse arguments and return the config path and the overrides dict"""
        parsed_args = self.parse_args(args)

        if not parsed_args.config and self._require_config:
            self.error("Config file is required")

        return parsed_args.config, self._parse_overrides(parsed_args.override)

    def _parse_overrides(self, override_args: Optional[List[str]]) -> Dict[str, Any]:
        if not override_args:
            return {}

        overrides: Dict[str, Any] = {}
        for override in override_args:
            if '=' not in override:
                self.error(f"Invalid override format: {override}. Expected key=value")

            key, value = override.split('=', 1)
            *parents, leaf = key.split('.')
            if not leaf or any(not part for part in parents):
                self.error(f"Invalid override key: {key}")

            target = overrides
            for part in parents:
                target = target.setdefault(part, {})
                if not isinstance(target, dict):
                    self.error(f"Override {key} conflicts with an earlier override")
            target[leaf] = self._infer_type(value)

        return overrides

    def _infer_type(self, value: str) -> Any:
        """Infer bool, None, list, int, float (including 1e-7 style) or str from a string"""
        if value.lower() in ('true', 'false'):
            return value.lower() == 'true'

        if value.lower() in ('none', 'null'):
            return None

        if ',' in value and not value.startswith('"'):
            return [self._infer_type(item.strip()) for item in value.split(',')]

        for cast in (int, float):
            try:
                return cast(value)
            except ValueError:
                pass

        if value.startswith('"') and value.endswith('"'):
            return value[1:-1]

        return value
