from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Generic, TypeVar

K = TypeVar("K")


class Bucket(Enum):
    NO_UPDATES = "no_updates"
    COMPATIBLE_UPDATES = "compatible_updates"
    BREAKING_UPDATES = "breaking_updates"
    FAILURES = "failures"


class UpdateLevel(IntEnum):
    """Severity of a report, doubling as the process exit code."""

    NO_UPDATES = 0
    COMPATIBLE_UPDATE = 1
    BREAKING_UPDATE = 2
    FAILURE = 10


@dataclass
class Report(Generic[K]):
    """Entities grouped by outcome, each bucket in first-seen order.

    An entity can show up in several buckets, e.g. when it has both a
    compatible and a breaking update, or when updates were found but the
    current tag was not encountered.
    """

    no_updates: list[tuple[K, Any]] = field(default_factory=list)
    compatible_updates: list[tuple[K, Any]] = field(default_factory=list)
    breaking_updates: list[tuple[K, Any]] = field(default_factory=list)
    failures: list[tuple[K, Any]] = field(default_factory=list)

    def entries(self, bucket: Bucket) -> list[tuple[K, Any]]:
        return getattr(self, bucket.value)

    def keys(self, bucket: Bucket) -> list[K]:
        return [key for key, _ in self.entries(bucket)]

    def update_level(self) -> UpdateLevel:
        if self.failures:
            return UpdateLevel.FAILURE
        if self.breaking_updates:
            return UpdateLevel.BREAKING_UPDATE
        if self.compatible_updates:
            return UpdateLevel.COMPATIBLE_UPDATE
        return UpdateLevel.NO_UPDATES
