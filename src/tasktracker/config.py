"""Runtime settings, read from the environment or a local `.env` file."""

import logging
import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator


logger = logging.getLogger(__name__)

ENV_PREFIX = 'TASKTRACKER_'


class Settings(BaseModel):
    """Server configuration."""

    host: str = '0.0.0.0'
    port: int = Field(default=8080, ge=1, le=65535)
    log_level: str = 'INFO'
    max_create_attempts: int = Field(default=5, ge=1)

    @field_validator('log_level')
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f'Unknown log level: {value}')
        return level

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> 'Settings':
        """Builds settings from `TASKTRACKER_*` environment variables.

        Unset variables keep their defaults. Invalid values raise a pydantic
        `ValidationError`.
        """
        if load_dotenv_file:
            load_dotenv(find_dotenv(usecwd=True))

        values = {}
        for name in cls.model_fields:
            raw = os.environ.get(f'{ENV_PREFIX}{name.upper()}')
            if raw is not None:
                values[name] = raw
        logger.debug('Settings overrides from environment: %s', sorted(values))
        return cls.model_validate(values)
