"""
Configuration management for ledgersign.

Supports configuration via environment variables and .env files.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SigningConfig(BaseSettings):
    """
    Configuration settings for transaction assembly.
    
    All settings can be configured via environment variables with the LEDGERSIGN_ prefix.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="LEDGERSIGN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )
    
    # Multi-signature assembly
    allow_duplicate_signers: bool = Field(
        default=False,
        description="Keep signatures that resolve to the same account instead of rejecting them"
    )
    
    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format"
    )


# Global config instance
_config: Optional[SigningConfig] = None


def get_config() -> SigningConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = SigningConfig()
    return _config


def set_config(config: SigningConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
