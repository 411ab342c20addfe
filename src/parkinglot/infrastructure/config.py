"""
Configuration for the parking lot interpreter

Settings are a validated pydantic model. They are normally read from
environment variables prefixed with PARKINGLOT_, and any variable left
unset falls back to its default.
"""

from enum import Enum
from typing import Mapping, Optional
import logging
import os

from pydantic import BaseModel, ConfigDict, Field, field_validator


ENV_PREFIX = "PARKINGLOT_"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class InvalidCommandPolicy(str, Enum):
    """What the running interpreter does with a line it cannot parse"""
    REPROMPT = "reprompt"
    ABORT = "abort"


class InterpreterSettings(BaseModel):
    """Runtime settings for the interpreter and its logging"""

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    on_invalid_command: InvalidCommandPolicy = Field(
        default=InvalidCommandPolicy.REPROMPT,
        description="reprompt: report and keep going; abort: stop reading input",
    )
    log_level: str = Field(default="WARNING", description="Standard logging level name")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    @field_validator('on_invalid_command', mode='before')
    @classmethod
    def normalize_policy(cls, v):
        """Accept policy names in any case"""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Upper-case and check against the standard level names"""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {v!r}, expected one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator('log_file')
    @classmethod
    def validate_log_file(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'InterpreterSettings':
        """Build settings from PARKINGLOT_* variables (defaults to os.environ)"""
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            key = ENV_PREFIX + name.upper()
            if key in environ:
                values[name] = environ[key]
        return cls(**values)
