"""
Configuration management for the analyzer
"""

import copy
import logging
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

logger = logging.getLogger(__name__)


DEFAULT_CONFIG = {
    "titles": {
        "untitled_prefix": "Untitled"
    },
    "trace": {
        "enabled": False
    },
    "logging": {
        "level": "WARNING"
    }
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigManager:
    """Manages configuration for the analyzer"""
    
    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.
        
        Args:
            config_path: Path to YAML config file, if None uses defaults
        """
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        
        if config_path and config_path.exists():
            self.load_config(config_path)
        elif config_path:
            logger.warning(f"Config file not found: {config_path}, using defaults")
    
    def load_config(self, config_path: Path) -> None:
        """Load configuration from YAML file, keeping defaults for rejected keys."""
        try:
            with open(config_path, 'r') as f:
                file_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load config from {config_path}: {e}")
            return

        if not isinstance(file_config, dict):
            logger.error(f"Config file {config_path} does not contain a mapping")
            return

        self.config = self._merge_configs(DEFAULT_CONFIG, file_config)
        for key_path, problem in self.validate():
            logger.error(f"Invalid {key_path} in {config_path}: {problem}")
            self.set(key_path, self.get(key_path, source=DEFAULT_CONFIG))
        logger.info(f"Loaded configuration from {config_path}")
    
    def validate(self) -> list[tuple[str, str]]:
        """Return (key path, problem) pairs for values the analyzer cannot use."""
        problems = []

        prefix = self.get("titles.untitled_prefix")
        if not isinstance(prefix, str) or not prefix.strip():
            problems.append(("titles.untitled_prefix", "must be a non-empty string"))

        if not isinstance(self.get("trace.enabled"), bool):
            problems.append(("trace.enabled", "must be true or false"))

        level = self.get("logging.level")
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            problems.append(("logging.level", f"must be one of {', '.join(LOG_LEVELS)}"))

        return problems
    
    def get(self, key_path: str, default: Any = None, source: Optional[Dict[str, Any]] = None) -> Any:
        """
        Get configuration value using dot notation.
        
        Args:
            key_path: Dot-separated path like 'titles.untitled_prefix'
            default: Default value if key not found
            source: Mapping to read instead of the loaded configuration
            
        Returns:
            Configuration value or default
        """
        value = self.config if source is None else source
        
        try:
            for key in key_path.split('.'):
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default
    
    def set(self, key_path: str, value: Any) -> None:
        """Set configuration value using dot notation, e.g. 'trace.enabled'."""
        keys = key_path.split('.')
        config = self.config
        
        for key in keys[:-1]:
            if not isinstance(config.get(key), dict):
                config[key] = {}
            config = config[key]
        
        config[keys[-1]] = value
    
    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two configuration dictionaries."""
        result = copy.deepcopy(base)
        
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        
        return result
