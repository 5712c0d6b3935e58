"""
Configuration loader for custom Quake 3 data mappings.

Allows users to relabel means of death and extend the environmental
classification via YAML configuration files.
"""

import yaml
import logging
from pathlib import Path
from typing import Dict, List, Optional, Any

from . import quake_data

logger = logging.getLogger(__name__)


def default_config_paths() -> List[Path]:
    """Locations searched, in order, when no explicit path is given."""
    return [
        Path("q3log.yaml"),
        Path("config/q3log.yaml"),
        Path.home() / ".q3log" / "q3log.yaml",
        Path("/etc/q3log/q3log.yaml"),
    ]


class ConfigLoader:
    """Loads and applies custom configuration from YAML files."""

    @staticmethod
    def find_config(config_path: Optional[str] = None) -> Optional[Path]:
        """
        Resolve the configuration file to load.

        An explicit path is used as given and never falls back to the
        default locations; a missing explicit file is an error.
        """
        if config_path:
            path = Path(config_path)
            if not path.is_file():
                logger.error(f"Configuration file not found: {path}")
                return None
            return path

        return next((path for path in default_config_paths() if path.is_file()), None)

    @staticmethod
    def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to custom config file. If None, the first existing
                        file from default_config_paths() is used.

        Returns:
            Configuration dictionary (empty when nothing could be loaded)
        """
        path = ConfigLoader.find_config(config_path)
        if path is None:
            logger.debug("No custom configuration file found, using defaults")
            return {}

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load config from {path}: {e}")
            return {}

        logger.info(f"Loaded configuration from {path}")
        return config

    @staticmethod
    def apply_config(config: Dict[str, Any]) -> None:
        """
        Apply custom configuration to the quake_data module.

        Args:
            config: Configuration dictionary from YAML
        """
        if not isinstance(config, dict):
            logger.warning(f"Ignoring configuration of type {type(config).__name__}")
            return

        # Means-of-death labels
        labels = config.get("method_labels") or {}
        if isinstance(labels, dict):
            for token, label in labels.items():
                if not isinstance(token, str) or label is None:
                    logger.warning(f"Invalid method label entry {token!r}: {label!r}")
                    continue
                quake_data.KILL_METHOD_LABELS[token] = str(label)
                logger.debug(f"Added method label: {token} = {label}")
        else:
            logger.warning("method_labels must be a mapping of token to label")

        # Additional environmental means of death
        environmental = config.get("environmental_methods") or []
        if isinstance(environmental, list):
            for token in environmental:
                if not isinstance(token, str):
                    logger.warning(f"Invalid environmental method {token!r}")
                    continue
                quake_data.ENVIRONMENTAL_METHODS.add(token)
                logger.debug(f"Added environmental method: {token}")
        else:
            logger.warning("environmental_methods must be a list of tokens")

        logger.info("Custom configuration applied successfully")


def load_and_apply_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load and apply configuration in one step.

    Args:
        config_path: Optional path to custom config file

    Returns:
        The configuration that was applied (empty when none was found)
    """
    loader = ConfigLoader()
    config = loader.load_config(config_path)
    if config:
        loader.apply_config(config)
    return config
