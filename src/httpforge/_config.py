import os
from typing import Optional

from pydantic import BaseModel

from ._utils.constants import (
    DEFAULT_USER_AGENT,
    ENV_FOLLOW_REDIRECTS,
    ENV_MAX_RETRIES,
    ENV_TIMEOUT,
    ENV_USER_AGENT,
    ENV_VERIFY_SSL,
)


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config(BaseModel):
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 30.0
    follow_redirects: bool = False
    verify_ssl: bool = True
    max_retries: int = 3

    @classmethod
    def from_env(cls, **overrides: Optional[object]) -> "Config":
        """Build a config from ``HTTPFORGE_*`` variables.

        Keyword overrides that are not ``None`` take precedence over the environment.
        """
        values = {
            "user_agent": os.getenv(ENV_USER_AGENT, DEFAULT_USER_AGENT),
            "timeout": os.getenv(ENV_TIMEOUT, 30.0),
            "follow_redirects": _env_flag(ENV_FOLLOW_REDIRECTS, False),
            "verify_ssl": _env_flag(ENV_VERIFY_SSL, True),
            "max_retries": os.getenv(ENV_MAX_RETRIES, 3),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
