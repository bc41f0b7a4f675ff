"""
CruiseFit Configuration Management

This module provides configuration management for the CruiseFit analysis.
It includes physical constants, fit/report settings, display colors, and
runtime configuration loaded from YAML files.
"""

import os
from math import pi
from typing import Any, Dict, List, Optional

import yaml

# =============================================================================
# Physical Constants
# =============================================================================


class Constants:
    """Physical constants representing real-world measurements."""

    EARTH_RADIUS_KM: float = 6371.0  # Mean Earth radius
    DEG_TO_RAD: float = pi / 180  # Degrees to radians
    MINUTES_PER_HOUR: int = 60  # Base of each "H:MM:SS" field


# =============================================================================
# Analysis & Report Settings
# =============================================================================


class Settings:
    """Configurable settings for the speed fit and the console report."""

    # --- Fit ---
    COLOR_ERROR_SCALE: float = 2.0  # Error multiplier before color mapping
    DEFAULT_METRICS: List[str] = ["sphere", "ae_map"]  # Batches run by default

    # --- Report ---
    PERCENT_DECIMALS: int = 1  # Decimals in "x.y% off"
    SHOW_ROUTE: bool = True  # Append "(SRC-DST)" to flight names
    USE_COLOR: bool = True  # ANSI truecolor console output


# =============================================================================
# Color Schemes
# =============================================================================


class Colors:
    """Reference colors of the error scale (hex colors)."""

    NO_ERROR: str = "#ffffff"  # White: prediction matches exactly
    TOO_FAR: str = "#0000ff"  # Blue: longer than the fitted speed predicts
    TOO_SHORT: str = "#ff0000"  # Red: shorter than the fitted speed predicts


# =============================================================================
# Runtime Configuration
# =============================================================================


class Config:
    """
    Runtime configuration manager for CruiseFit.

    Loads settings from YAML files or uses sensible defaults.
    Provides property-based access to common settings.

    Example:
        >>> config = Config('cruisefit.yaml')
        >>> print(f"Color scale: {config.color_scale}")
        >>> print(f"Batches: {', '.join(config.metrics)}")
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML configuration file. If None or missing,
                        uses default configuration.
        """
        self.config_path = config_path
        self._config: Dict[str, Any] = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration from YAML file or return defaults.

        Returns:
            Configuration dictionary
        """
        if self.config_path is None or not os.path.exists(self.config_path):
            return self._get_default_config()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
                if self._validate_config(config):
                    return config
                else:
                    print("Warning: Invalid config structure, using defaults")
                    return self._get_default_config()
        except (OSError, yaml.YAMLError) as e:
            print(f"Warning: Could not load config file: {e}")
            return self._get_default_config()

    def _validate_config(self, config: Dict[str, Any]) -> bool:
        """
        Validate configuration structure and required fields.

        Args:
            config: Configuration dictionary to validate

        Returns:
            True if valid, False otherwise
        """
        try:
            # Required: analysis section
            assert "analysis" in config
            assert "color_scale" in config["analysis"]
            assert isinstance(config["analysis"]["color_scale"], (float, int))
            assert not isinstance(config["analysis"]["color_scale"], bool)
            assert config["analysis"]["color_scale"] > 0

            assert "metrics" in config["analysis"]
            assert isinstance(config["analysis"]["metrics"], list)
            assert len(config["analysis"]["metrics"]) > 0
            assert all(isinstance(m, str) for m in config["analysis"]["metrics"])

            # Required: report section
            assert "report" in config
            assert "percent_decimals" in config["report"]
            assert isinstance(config["report"]["percent_decimals"], int)
            assert config["report"]["percent_decimals"] >= 0

            return True
        except (AssertionError, KeyError, TypeError):
            return False

    def _get_default_config(self) -> Dict[str, Any]:
        """
        Get default configuration.

        Returns:
            Default configuration dictionary
        """
        return {
            "analysis": {
                "color_scale": Settings.COLOR_ERROR_SCALE,
                "metrics": list(Settings.DEFAULT_METRICS),
            },
            "report": {
                "percent_decimals": Settings.PERCENT_DECIMALS,
                "show_route": Settings.SHOW_ROUTE,
                "color": Settings.USE_COLOR,
            },
        }

    def save_config(self) -> None:
        """
        Save current configuration to YAML file.

        Raises:
            ValueError: If config_path is not set
        """
        if self.config_path is None:
            raise ValueError("Cannot save config: no config_path specified")

        with open(self.config_path, "w", encoding="utf-8") as f:
            yaml.dump(self._config, f, default_flow_style=False)

    # --- Property Accessors ---

    @property
    def color_scale(self) -> float:
        """Get the factor applied to errors before color mapping."""
        return float(self._config["analysis"]["color_scale"])

    @property
    def metrics(self) -> List[str]:
        """Get the distance metric keys to run, in order."""
        return list(self._config["analysis"]["metrics"])

    @property
    def percent_decimals(self) -> int:
        """Get decimal places for the error percentage."""
        return int(self._config["report"]["percent_decimals"])

    @property
    def show_route(self) -> bool:
        """Get whether report lines include the airport route."""
        return bool(self._config["report"].get("show_route", Settings.SHOW_ROUTE))

    @property
    def use_color(self) -> bool:
        """Get whether console output is colorized."""
        return bool(self._config["report"].get("color", Settings.USE_COLOR))

    # --- Generic Accessors ---

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key: Dot-separated key path (e.g., 'analysis.color_scale')
            default: Default value if key not found

        Returns:
            Configuration value or default

        Example:
            >>> config.get('report.percent_decimals', 1)
            1
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value using dot notation.

        Args:
            key: Dot-separated key path (e.g., 'analysis.color_scale')
            value: Value to set

        Example:
            >>> config.set('analysis.color_scale', 1.0)
        """
        keys = key.split(".")
        config = self._config

        # Navigate to parent of target key
        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value
