"""YAML configuration loader for named usage profiles."""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional

from selector import (
    ConfigError,
    ContainerRecommendation,
    InvalidArgumentError,
    SelectionEngine,
    UsageProfile,
)
from typesafe import set_validation


class ConfigLoader:
    def __init__(self, config_path: Optional[str] = None):
        if config_path:
            self.config_path = Path(config_path)
        else:
            self.config_path = Path(__file__).parent / "profiles.yaml"

        self._config: Dict[str, Any] = {}
        self._profiles: Dict[str, UsageProfile] = {}
        self._validation: Optional[bool] = None

    def load(self) -> "ConfigLoader":
        if not self.config_path.exists():
            print(f"[config] No config file at {self.config_path}, using empty config")
            return self

        try:
            with open(self.config_path, 'r') as f:
                self._config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Cannot parse {self.config_path}: {e}") from e

        if not isinstance(self._config, dict):
            raise ConfigError(f"{self.config_path}: top level must be a mapping")

        self._parse_validation()
        self._parse_profiles()

        return self

    def _parse_validation(self) -> None:
        value = self._config.get('validation')
        if value is None:
            return
        if not isinstance(value, bool):
            raise ConfigError(f"'validation' must be true or false, got {value!r}")
        self._validation = value

    def _parse_profiles(self) -> None:
        profiles = self._config.get('profiles') or {}
        if not isinstance(profiles, dict):
            raise ConfigError("'profiles' must be a mapping of name to profile fields")

        for name, fields in profiles.items():
            if not isinstance(fields, dict):
                raise ConfigError(f"Profile '{name}' must be a mapping")
            try:
                self._profiles[name] = UsageProfile.from_dict(fields)
            except InvalidArgumentError as e:
                raise ConfigError(f"Invalid profile '{name}': {e}") from e

        print(f"[config] Loaded {len(self._profiles)} profiles from {self.config_path.name}")

    @property
    def validation(self) -> Optional[bool]:
        """Validation switch from the file, None when not set."""
        return self._validation

    def apply(self) -> "ConfigLoader":
        """Push the file's validation switch into the typed accessors."""
        if self._validation is not None:
            set_validation(self._validation)
        return self

    def get_profile(self, name: str) -> Optional[UsageProfile]:
        return self._profiles.get(name)

    def get_all_profiles(self) -> Dict[str, UsageProfile]:
        return dict(self._profiles)

    def recommend_all(
        self,
        engine: Optional[SelectionEngine] = None
    ) -> Dict[str, ContainerRecommendation]:
        engine = engine or SelectionEngine()
        return engine.recommend_all(self._profiles)


def load_profiles(config_path: Optional[str] = None) -> ConfigLoader:
    return ConfigLoader(config_path).load()
