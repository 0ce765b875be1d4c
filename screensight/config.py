"""Application configuration from environment variables."""

from __future__ import annotations

import dataclasses
import logging

from pydantic_settings import BaseSettings

from screensight.engine.config import EngineConfig

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # Threshold overrides; None keeps the EngineConfig default
    grid_tolerance: float | None = None
    alignment_tolerance: float | None = None
    min_pattern_confidence: float | None = None
    proximity_threshold: float | None = None
    functional_relationship_threshold: float | None = None

    model_config = {"env_prefix": "screensight_", "env_file": ".env", "env_file_encoding": "utf-8"}

    def engine_config(self, base: EngineConfig | None = None) -> EngineConfig:
        overrides = {
            field.name: getattr(self, field.name)
            for field in dataclasses.fields(EngineConfig)
            if field.name in type(self).model_fields and getattr(self, field.name) is not None
        }
        return dataclasses.replace(base or EngineConfig(), **overrides)


def configure_logging(config: Settings | None = None) -> None:
    config = config or settings
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


settings = Settings()
