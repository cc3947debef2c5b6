import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ._utils.constants import (
    ENV_DEBUG,
    ENV_DEFAULT_RETRIES,
    ENV_DEFAULT_TIMEOUT,
    ENV_FOLLOW_REDIRECTS,
)


def _env_flag(value: str) -> bool:
    return value.strip().lower() not in ("0", "false", "no", "")


class Config(BaseModel):
    """Library wide defaults applied when a request leaves an option unset."""

    default_retries: int = Field(default=0, ge=0)
    default_timeout: Optional[float] = Field(default=None, ge=0)
    follow_redirects: bool = True
    debug: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        retries = os.getenv(ENV_DEFAULT_RETRIES)
        timeout = os.getenv(ENV_DEFAULT_TIMEOUT)
        follow_redirects = os.getenv(ENV_FOLLOW_REDIRECTS)
        debug = os.getenv(ENV_DEBUG)

        values = {}
        if retries:
            values["default_retries"] = int(retries)
        if timeout:
            values["default_timeout"] = float(timeout)
        if follow_redirects:
            values["follow_redirects"] = _env_flag(follow_redirects)
        if debug:
            values["debug"] = _env_flag(debug)
        return cls(**values)
