import math
import os
from datetime import timedelta
from typing import Optional, Union

from pydantic import BaseModel, field_validator

from ._utils.constants import ENV_INCLUDE_USER_AGENT, ENV_TIMEOUT

_FALSY = ("0", "false", "no", "off")


class Config(BaseModel):
    include_user_agent: bool = True
    timeout: Optional[float] = None

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and not (math.isfinite(value) and value > 0):
            raise ValueError("timeout must be a positive, finite number of seconds")
        return value

    @classmethod
    def from_env(cls) -> "Config":
        """Build a config from ``CNCTD_REST_*`` environment variables.

        Unset variables keep the model defaults.
        """
        values: dict[str, object] = {}

        include_user_agent = os.getenv(ENV_INCLUDE_USER_AGENT)
        if include_user_agent is not None:
            values["include_user_agent"] = (
                include_user_agent.strip().lower() not in _FALSY
            )

        timeout = os.getenv(ENV_TIMEOUT)
        if timeout:
            values["timeout"] = timeout

        return cls.model_validate(values)


def to_seconds(timeout: Union[int, float, timedelta, None]) -> Optional[float]:
    if timeout is None:
        return None
    if isinstance(timeout, timedelta):
        return timeout.total_seconds()
    return float(timeout)
