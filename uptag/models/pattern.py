"""Version patterns.

A pattern describes the shape of an image tag and marks the numeric parts
that make up its version. Literal text is matched verbatim, ``<!>`` marks a
version part whose change is breaking and ``<>`` marks a version part whose
change is compatible. All breaking parts must come before the compatible
ones, e.g. ``<!>.<>.<>`` for semantic versioning or ``debian-<>-beta`` for a
single sequence number wrapped in literal text.
"""
import re
from dataclasses import dataclass, field
from enum import Enum

from uptag.models.errors import PatternSyntaxError

BREAKING_TOKEN = "<!>"
COMPATIBLE_TOKEN = "<>"
VERSION_PART_REGEX = "([0-9]+)"
LITERAL_SYMBOLS = "_.-"


class SlotKind(Enum):
    BREAKING = "breaking"
    COMPATIBLE = "compatible"

    @property
    def token(self) -> str:
        return BREAKING_TOKEN if self is SlotKind.BREAKING else COMPATIBLE_TOKEN


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Slot:
    kind: SlotKind


Part = Literal | Slot


def is_literal_char(c: str) -> bool:
    return c.isascii() and (c.isalnum() or c in LITERAL_SYMBOLS)


@dataclass(frozen=True)
class Pattern:
    parts: tuple[Part, ...]
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        seen_compatible = False
        for part in self.parts:
            if isinstance(part, Slot):
                if part.kind is SlotKind.BREAKING and seen_compatible:
                    raise ValueError("Breaking version parts must precede compatible ones")
                seen_compatible = seen_compatible or part.kind is SlotKind.COMPATIBLE
        object.__setattr__(self, "regex", re.compile(self._regex_source()))

    @classmethod
    def parse(cls, text: str) -> "Pattern":
        return cls(PatternParser(text).parse())

    @property
    def breaking_degree(self) -> int:
        return sum(1 for part in self.parts if part == Slot(SlotKind.BREAKING))

    @property
    def slot_count(self) -> int:
        return sum(1 for part in self.parts if isinstance(part, Slot))

    def matches(self, tag: str) -> bool:
        return self.regex.fullmatch(tag) is not None

    def _regex_source(self) -> str:
        inner = "".join(
            re.escape(part.text) if isinstance(part, Literal) else VERSION_PART_REGEX
            for part in self.parts
        )
        return rf"\A{inner}\Z"

    def __str__(self) -> str:
        # slots are rendered by position so the first `breaking_degree` are always `<!>`
        rendered: list[str] = []
        slot_index = 0
        for part in self.parts:
            if isinstance(part, Literal):
                rendered.append(part.text)
                continue
            slot_index += 1
            rendered.append(BREAKING_TOKEN if slot_index <= self.breaking_degree else COMPATIBLE_TOKEN)
        return "".join(rendered)


class PatternParser:
    """Single pass parser for the pattern grammar.

    pattern    := breaking compatible
    breaking   := (literal | "<!>")*
    compatible := (literal | "<>")*
    literal    := [A-Za-z0-9_.-]+
    """

    def __init__(self, text: str):
        self.text: str = text
        self.position: int = 0
        self.parts: list[Part] = []

    def parse(self) -> tuple[Part, ...]:
        self._parse_section(SlotKind.BREAKING)
        self._parse_section(SlotKind.COMPATIBLE)
        if self.position < len(self.text):
            self._fail()
        return tuple(self.parts)

    def _parse_section(self, kind: SlotKind) -> None:
        while self.position < len(self.text):
            if self._parse_literal():
                continue
            if self.text.startswith(kind.token, self.position):
                self.parts.append(Slot(kind))
                self.position += len(kind.token)
                continue
            return

    def _parse_literal(self) -> bool:
        end = self.position
        while end < len(self.text) and is_literal_char(self.text[end]):
            end += 1
        if end == self.position:
            return False
        self.parts.append(Literal(self.text[self.position:end]))
        self.position = end
        return True

    def _fail(self) -> None:
        if self.text.startswith(BREAKING_TOKEN, self.position):
            reason = f"breaking version part `{BREAKING_TOKEN}` follows a compatible version part"
        elif self.text[self.position] == "<":
            reason = f"unknown version part, expected `{BREAKING_TOKEN}` or `{COMPATIBLE_TOKEN}`"
        else:
            reason = f"illegal character `{self.text[self.position]}`"
        raise PatternSyntaxError(self.text, self.position, reason)
