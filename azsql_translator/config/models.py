"""
Configuration models for the translator.

Type-safe configuration using pydantic with validation and defaults.
"""

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class TranslatorConfig(BaseModel):
    """Top-level translator configuration."""

    subscription_id: Optional[str] = Field(
        default=None,
        description="Subscription used to build failover group resource IDs",
    )
    strict_mode: bool = Field(
        default=False,
        description="Reject unknown editions and failover policies instead of defaulting",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = ConfigDict(extra="forbid")  # Reject unknown fields

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)
