from dataclasses import dataclass
from enum import Enum

from uptag.models.pattern import Pattern


class UpdateType(Enum):
    COMPATIBLE = "compatible"
    BREAKING = "breaking"


@dataclass(frozen=True, order=True)
class Version:
    """Numeric version parts in the order their slots appear in the pattern.

    Versions compare lexicographically, so only versions extracted with the
    same pattern are meaningfully comparable.
    """

    parts: tuple[int, ...]

    def __post_init__(self):
        if not self.parts:
            raise ValueError("A version needs at least one part")
        if any(part < 0 for part in self.parts):
            raise ValueError(f"Version parts must be non-negative: {self.parts}")

    def __str__(self) -> str:
        return ".".join(str(part) for part in self.parts)


def extract_from(pattern: Pattern, tag: str) -> Version | None:
    match = pattern.regex.fullmatch(tag)
    if match is None:
        return None
    try:
        parts = tuple(int(group) for group in match.groups())
    except (TypeError, ValueError):
        return None
    if not parts:
        return None
    return Version(parts)


def sameness_degree(a: Version, b: Version) -> int:
    degree = 0
    for left, right in zip(a.parts, b.parts):
        if left != right:
            break
        degree += 1
    return degree


def classify(current: Version, candidate: Version, breaking_degree: int) -> UpdateType:
    if not candidate > current:
        raise ValueError(f"{candidate} is not newer than {current}")
    if sameness_degree(current, candidate) < breaking_degree:
        return UpdateType.BREAKING
    return UpdateType.COMPATIBLE
