import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

SUPPORTED_BACKENDS = {"openrouter"}
LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class SolverConfig(BaseModel):
    backend: str = "openrouter"
    model: str = "google/gemini-2.0-flash-001"
    base_url: str = "https://openrouter.ai/api/v1/chat/completions"
    api_key: Optional[str] = Field(default_factory=lambda: os.getenv("OPENROUTER_API_KEY"))
    timeout: int = Field(default=60, gt=0, description="Request timeout in seconds")
    temperature: float = Field(default=0.1, ge=0.0, le=2.0)
    max_tokens: int = Field(default=1000, gt=0)
    debug: bool = False

    @field_validator("backend")
    @classmethod
    def check_backend(cls, v):
        v = v.lower()
        if v not in SUPPORTED_BACKENDS:
            raise ValueError(f"Unsupported backend: {v}. Allowed: {SUPPORTED_BACKENDS}")
        return v


class LoggingConfig(BaseModel):
    level: str = "INFO"
    error_log_dir: Optional[str] = None

    @field_validator("level")
    @classmethod
    def check_level(cls, v):
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return v


class AppConfig(BaseModel):
    solver: SolverConfig = Field(default_factory=SolverConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: Union[str, Path]) -> AppConfig:
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return AppConfig(**(raw.get("trackademic") or {}))  # unpack
