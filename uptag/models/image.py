import re

from pydantic.dataclasses import dataclass

OFFICIAL_NAMESPACE = "library"
NAME_REGEX = re.compile(r"^(?:(?P<namespace>[\w.-]+)/)?(?P<repository>[\w.-]+)$")
REFERENCE_REGEX = re.compile(r"^(?P<name>[^:\s]+):(?P<tag>\w[\w.-]{0,127})$")


@dataclass(frozen=True)
class ImageName:
    repository: str
    namespace: str | None = None

    @classmethod
    def parse(cls, raw: str) -> "ImageName":
        match = NAME_REGEX.match(raw)
        if not match:
            raise ValueError(f"`{raw}` is not a valid image name of the form `<image>` or `<user>/<image>`")
        return cls(repository=match["repository"], namespace=match["namespace"])

    @property
    def registry_path(self) -> str:
        return f"{self.namespace or OFFICIAL_NAMESPACE}/{self.repository}"

    def __str__(self) -> str:
        if self.namespace:
            return f"{self.namespace}/{self.repository}"
        return self.repository


@dataclass(frozen=True)
class Image:
    name: ImageName
    tag: str

    @classmethod
    def parse(cls, reference: str) -> "Image":
        match = REFERENCE_REGEX.match(reference)
        if not match:
            raise ValueError(f"`{reference}` is not an image reference of the form `<name>:<tag>`")
        return cls(name=ImageName.parse(match["name"]), tag=match["tag"])

    def with_tag(self, tag: str) -> str:
        return f"{self.name}:{tag}"

    def __str__(self) -> str:
        return self.with_tag(self.tag)


@dataclass(frozen=True)
class FromStatement:
    """An image reference together with the raw pattern annotating it, if any."""

    image: Image
    pattern: str | None = None
    line: int | None = None
