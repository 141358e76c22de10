# File: src/parksim/config.py
"""
Application configuration

Settings come from built-in defaults, then PARKSIM_* environment variables,
then command-line flags (applied by `parksim.main`).
"""

from datetime import datetime
from typing import Any, Dict, Mapping, Optional
import logging
import os

from pydantic import BaseModel, ConfigDict, Field, field_validator


ENV_PREFIX = "PARKSIM_"


class AppConfig:
    """Static application metadata"""
    APP_NAME = "Parking Simulator"
    VERSION = "1.0.0"
    DEFAULT_CAPACITY = 20
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Settings(BaseModel):
    """Runtime settings for a simulator instance"""

    model_config = ConfigDict(frozen=True)

    capacity: int = Field(default=AppConfig.DEFAULT_CAPACITY, gt=0, description="Number of parking spots")
    log_level: str = Field(default="WARNING", description="Root logging level name")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")
    start_time: Optional[datetime] = Field(default=None, description="Initial simulation time")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        name = str(v).strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {v}")
        return name

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Build settings from PARKSIM_* environment variables"""
        environ = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for field_name in cls.model_fields:
            raw = environ.get(f"{ENV_PREFIX}{field_name.upper()}")
            if raw is not None and raw.strip():
                values[field_name] = raw.strip()
        return cls(**values)

    def merged_with(self, **overrides: Any) -> 'Settings':
        """Return a copy with the non-None overrides applied and validated"""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return Settings(**data)
