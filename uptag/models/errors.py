class UptagError(Exception):
    """Base class of all errors raised by uptag."""


class CheckError(UptagError):
    """An error scoped to a single image; sibling images are still checked."""


class PatternSyntaxError(CheckError):
    def __init__(self, pattern: str, position: int, reason: str):
        self.pattern: str = pattern
        self.position: int = position
        self.reason: str = reason
        super().__init__(f"{reason} at position {position} in pattern `{pattern}`")

    def pointer(self) -> str:
        """The pattern with a caret underneath the offending position."""
        return f"{self.pattern}\n{' ' * self.position}^"


class UnspecifiedPatternError(CheckError):
    def __init__(self):
        super().__init__("Failed to find version pattern")


class InvalidCurrentTagError(CheckError):
    def __init__(self, tag: str, pattern: str):
        self.tag: str = tag
        self.pattern: str = pattern
        super().__init__(f"The current tag `{tag}` does not match the required pattern `{pattern}`")


class FetchError(CheckError):
    def __init__(self, image_name: str, reason: str = "Failed to fetch tags"):
        self.image_name: str = image_name
        super().__init__(f"{reason} for `{image_name}`")


class CurrentTagNotEncounteredError(CheckError):
    def __init__(self, searched_amount: int):
        self.searched_amount: int = searched_amount
        super().__init__(
            f"The current tag was not among the {searched_amount} newest tags, "
            "there may be newer versions that were not considered"
        )


class ServiceError(UptagError):
    """An error that prevents a whole compose service from being checked."""

    def __init__(self, service: str, reason: str):
        self.service: str = service
        self.reason: str = reason
        super().__init__(reason)


class DockerfileReadError(UptagError):
    def __init__(self, path: str):
        self.path: str = path
        super().__init__(f"Failed to read Dockerfile `{path}`")
