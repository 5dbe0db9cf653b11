from pydantic import ConfigDict
from pydantic.dataclasses import dataclass

IGNORE_EXTRA = ConfigDict(extra="ignore")


@dataclass(frozen=True, config=IGNORE_EXTRA)
class BuildContext:
    context: str = "."
    dockerfile: str = "Dockerfile"


@dataclass(frozen=True, config=IGNORE_EXTRA)
class ComposeService:
    image: str | None = None
    build: str | BuildContext | None = None


@dataclass(frozen=True, config=IGNORE_EXTRA)
class ComposeFile:
    services: dict[str, ComposeService]


@dataclass(frozen=True)
class ComposeServiceEntry:
    """A service as declared in a compose file.

    Either `image` (with the pattern annotating it) or `dockerfile` is set.
    """

    name: str
    image: str | None = None
    pattern: str | None = None
    line: int | None = None
    dockerfile: str | None = None
