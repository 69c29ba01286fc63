"""
Configuration loader for the Sector Overlay system.

This module provides the ConfigLoader class that handles loading and validating
the JSON environment configuration for multi-environment deployments.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional
from functools import lru_cache

from ..exceptions import SectorConfigurationError, SectorValidationError
from ..utils import get_logger


REQUIRED_ENVIRONMENT_KEYS = ["store", "map", "logging"]
REQUIRED_STORE_PATHS = ["sectors", "personnel"]


class ConfigLoader:
    """
    Configuration loader and validator for the sector overlay system.
    
    This class handles loading environment-specific configuration from
    ``environment_config.json``, merging the ``shared`` section into each
    environment, validating required sections and providing typed access to
    store paths, map settings and connection settings.
    """
    
    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize the configuration loader.
        
        Args:
            config_dir: Directory containing configuration files (defaults to 'config/')
        """
        self.logger = get_logger(__name__)
        self.config_dir = Path(config_dir) if config_dir else Path("config")
    
    @lru_cache(maxsize=2)
    def load_environment_config(self, environment: str) -> Dict[str, Any]:
        """
        Load configuration for a specific environment.
        
        Args:
            environment: Environment name (development/production)
            
        Returns:
            Dictionary containing environment-specific configuration merged with shared config
            
        Raises:
            SectorConfigurationError: If configuration cannot be loaded or validated
        """
        try:
            env_config_path = self.config_dir / "environment_config.json"
            
            if not env_config_path.exists():
                raise SectorConfigurationError(
                    f"Environment configuration file not found: {env_config_path}"
                )
            
            with open(env_config_path, 'r') as f:
                config_data = json.load(f)
            
            if "environments" not in config_data:
                raise SectorValidationError("Missing 'environments' key in configuration")
            
            if environment not in config_data["environments"]:
                available_envs = list(config_data["environments"].keys())
                raise SectorValidationError(
                    f"Environment '{environment}' not found. Available: {available_envs}"
                )
            
            env_config = self._merge_shared(
                config_data.get("shared", {}),
                config_data["environments"][environment]
            )
            self._validate_environment_config(env_config, environment)
            
            env_config["_validation"] = config_data.get("validation", {})
            
            self.logger.info(f"Loaded configuration for environment: {environment}")
            return env_config
            
        except json.JSONDecodeError as e:
            raise SectorConfigurationError(
                f"Invalid JSON in environment configuration: {str(e)}"
            )
        except SectorConfigurationError:
            raise
        except Exception as e:
            raise SectorConfigurationError(
                f"Failed to load environment configuration: {str(e)}"
            )
    
    def get_store_path(self, collection: str, environment: str = "development") -> str:
        """
        Get the remote store path of a logical collection.
        
        Args:
            collection: Logical collection name ('sectors' or 'personnel')
            environment: Environment name
            
        Returns:
            Store path, e.g. 'sectorDetails'
            
        Raises:
            SectorConfigurationError: If the collection is not configured
        """
        paths = self.load_environment_config(environment)["store"]["paths"]
        
        if collection not in paths:
            raise SectorConfigurationError(
                f"Store path '{collection}' not found in {environment} configuration"
            )
        
        return paths[collection]
    
    def get_marker_icon(self, environment: str = "development") -> Dict[str, Any]:
        """
        Get the marker icon settings used for personnel and marker overlays.
        
        Returns:
            Dictionary with icon_url, icon_size and icon_anchor (empty if not configured)
        """
        return dict(self.load_environment_config(environment)["map"].get("marker_icon", {}))
    
    def get_map_settings(self, environment: str = "development") -> Dict[str, Any]:
        """Get the initial map view settings (center, zoom)."""
        return dict(self.load_environment_config(environment)["map"])
    
    def get_connection_settings(self, environment: str = "development") -> Dict[str, Any]:
        """
        Get store connection bootstrap settings.
        
        Returns:
            Dictionary with at least ``connect_timeout_seconds``
        """
        settings = {"connect_timeout_seconds": 30}
        settings.update(self.load_environment_config(environment)["store"].get("connection", {}))
        return settings
    
    @staticmethod
    def _merge_shared(shared_config: Dict[str, Any], env_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge the shared section into an environment section.
        
        Dictionary sections are merged one level deep with environment values
        winning; any other shared value is only used when the environment does
        not define it.
        """
        merged = {key: (dict(value) if isinstance(value, dict) else value)
                  for key, value in shared_config.items()}
        
        for key, value in env_config.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                section = merged[key]
                for sub_key, sub_value in value.items():
                    if isinstance(sub_value, dict) and isinstance(section.get(sub_key), dict):
                        section[sub_key] = {**section[sub_key], **sub_value}
                    else:
                        section[sub_key] = sub_value
            else:
                merged[key] = value
        
        return merged
    
    def _validate_environment_config(self, env_config: Dict[str, Any], environment: str) -> None:
        """
        Validate a merged environment configuration.
        
        Args:
            env_config: Merged configuration to validate
            environment: Environment name, used in error messages
            
        Raises:
            SectorValidationError: If configuration is invalid
        """
        for key in REQUIRED_ENVIRONMENT_KEYS:
            if key not in env_config:
                raise SectorValidationError(
                    f"Missing required key '{key}' in {environment} configuration"
                )
        
        paths = env_config["store"].get("paths", {})
        missing_paths = [name for name in REQUIRED_STORE_PATHS if name not in paths]
        if missing_paths:
            raise SectorValidationError(
                f"Missing required store paths in {environment} configuration (including shared): {missing_paths}"
            )
    
    def clear_cache(self) -> None:
        """Clear the configuration cache."""
        self.load_environment_config.cache_clear()
        self.logger.info("Configuration cache cleared")
