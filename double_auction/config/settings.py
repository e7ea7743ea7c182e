"""
Configuration settings for the double auction.

This module provides centralized configuration management
with environment variable support and validation.
"""

import os
from typing import Optional, Dict, Any


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _env_optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    return int(value) if value else None


class Settings:
    """
    Configuration settings for the market and its entry points.

    Supports environment variables and provides sensible defaults.
    """

    def __init__(self):
        """Initialize settings from environment variables."""
        # Logging configuration
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.log_file = os.getenv("LOG_FILE", "logs/double_auction.log")
        self.audit_log_file = os.getenv("AUDIT_LOG_FILE", "logs/audit.log")

        # Order validation, off unless explicitly enabled
        self.validate_orders = _env_flag("VALIDATE_ORDERS", "false")
        self.max_price = _env_optional_int("MAX_PRICE")
        self.max_amount = _env_optional_int("MAX_AMOUNT")

        # Performance monitoring
        self.enable_performance_monitoring = _env_flag("ENABLE_PERFORMANCE_MONITORING", "true")

        # Debug mode
        self.debug = _env_flag("DEBUG", "false")

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "log_level": self.log_level,
            "log_file": self.log_file,
            "audit_log_file": self.audit_log_file,
            "validate_orders": self.validate_orders,
            "max_price": self.max_price,
            "max_amount": self.max_amount,
            "enable_performance_monitoring": self.enable_performance_monitoring,
            "debug": self.debug,
        }

    def validate(self) -> None:
        """Validate configuration settings."""
        errors = []

        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Invalid log level: {self.log_level}")

        if self.max_price is not None and self.max_price <= 0:
            errors.append(f"Max price must be positive: {self.max_price}")

        if self.max_amount is not None and self.max_amount <= 0:
            errors.append(f"Max amount must be positive: {self.max_amount}")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings instance.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.validate()
    return _settings


def reload_settings() -> Settings:
    """
    Reload settings from environment variables.

    Returns:
        New settings instance
    """
    global _settings
    _settings = Settings()
    _settings.validate()
    return _settings
