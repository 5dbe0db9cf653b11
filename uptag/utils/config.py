import os
from typing import Annotated

from pydantic import Field, ValidationError
from pydantic.dataclasses import dataclass

DEFAULT_REGISTRY_URL = "https://hub.docker.com"

ENV_VARS = {
    "search_limit": "UPTAG_SEARCH_LIMIT",
    "registry_url": "UPTAG_REGISTRY_URL",
    "page_size": "UPTAG_PAGE_SIZE",
    "max_workers": "UPTAG_MAX_WORKERS",
    "timeout": "UPTAG_TIMEOUT",
}


@dataclass(frozen=True)
class Settings:
    search_limit: Annotated[int, Field(gt=0)] = 100
    registry_url: str = DEFAULT_REGISTRY_URL
    page_size: Annotated[int, Field(gt=0, le=100)] = 25
    max_workers: Annotated[int, Field(gt=0)] = 8
    timeout: Annotated[float, Field(gt=0)] = 10.0

    @classmethod
    def from_env(cls, **overrides) -> "Settings":
        values = {
            field: os.environ[env_var]
            for field, env_var in ENV_VARS.items()
            if os.environ.get(env_var)
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return cls(**values)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration: {e}") from e
