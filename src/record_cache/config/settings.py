"""
Record cache settings.

Environment driven configuration for collation, serialization and logging,
loaded with Pydantic settings.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RecordCacheSettings(BaseSettings):
    """Settings for the record cache services."""
    
    model_config = SettingsConfigDict(
        env_prefix="RECORD_CACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Collation
    unicode_normalization_form: str = Field(default="NFC")
    
    # Serialization
    version_attribute: Optional[str] = Field(default="lock_version")
    
    # Logging
    log_verbosity: str = Field(default="NORMAL")
    log_format: str = Field(default="simple")
    
    @field_validator("unicode_normalization_form")
    @classmethod
    def validate_normalization_form(cls, v: str) -> str:
        v = v.upper()
        if v not in ("NFC", "NFD", "NFKC", "NFKD"):
            raise ValueError(f"Unsupported unicode normalization form: {v}")
        return v

    @field_validator("log_verbosity")
    @classmethod
    def validate_log_verbosity(cls, v: str) -> str:
        v = v.upper()
        if v not in ("QUIET", "NORMAL", "VERBOSE", "DEBUG"):
            raise ValueError(f"Unsupported log verbosity: {v}")
        return v


@lru_cache()
def get_settings() -> RecordCacheSettings:
    """Get cached settings instance."""
    return RecordCacheSettings()
