"""YAML configuration loading for extraction options.

The packaged defaults (attributify/config/attributify.yaml) are merged
with an optional project file at <project>/.attributify/attributify.yaml.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from attributify.constants import CONFIG_DIR, CONFIG_FILE
from attributify.errors import ConfigurationError
from attributify.options import ExtractionOptions

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config" / CONFIG_FILE


class ConfigLoader:
    """Loader for YAML configs with project overrides."""

    def __init__(self, config_name: str = CONFIG_FILE, system_path: Optional[Path] = None):
        self.config_name = config_name
        self.system_path = system_path or DEFAULT_CONFIG_PATH.parent / config_name
        self._cache: Dict[str, Dict[str, Any]] = {}

    def project_config_path(self, project_path: Path) -> Path:
        return Path(project_path) / CONFIG_DIR / self.config_name

    def load(self, project_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
        """Load config with project overrides."""
        project_path = Path(project_path) if project_path is not None else Path.cwd()
        cache_key = str(project_path)
        if cache_key in self._cache:
            return self._cache[cache_key]

        config = self._load_yaml(self.system_path)

        project_config_path = self.project_config_path(project_path)
        if project_config_path.exists():
            logger.debug(f"Loading project config from {project_config_path}")
            config = self._merge(config, self._load_yaml(project_config_path))

        self._cache[cache_key] = config
        return config

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load config {path}: {e}", cause=e)

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config {path} must be a mapping, got {type(data).__name__}"
            )
        return data

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge override into base.

        Merge semantics:
        - `extends` key: skipped (metadata only)
        - Dicts: recursive deep merge
        - Lists and scalars: replace
        """
        result = dict(base)
        for key, value in override.items():
            if key == "extends":
                continue
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result

    def clear_cache(self):
        self._cache.clear()


_loader = ConfigLoader()


def load_config(project_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Merged config dict for a project (cached per project path)."""
    return _loader.load(project_path)


def load_options(project_path: Optional[Union[str, Path]] = None) -> ExtractionOptions:
    """Extraction options for a project.

    Raises:
        ConfigurationError: If a config file is unreadable or has bad values.
    """
    return ExtractionOptions.from_dict(load_config(project_path))


def clear_config_cache():
    _loader.clear_cache()
