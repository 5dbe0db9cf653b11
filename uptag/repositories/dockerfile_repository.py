import logging
import re

from uptag.models.errors import DockerfileReadError
from uptag.models.image import FromStatement, Image
from uptag.repositories.annotation import find_annotation

logger = logging.getLogger(__name__)

FROM_REGEX = re.compile(
    r"^\s*FROM\s+(?:--platform=\S+\s+)?(?P<reference>[^\s@]+)(?:\s+AS\s+\S+)?\s*$",
    re.IGNORECASE,
)


class DockerfileRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path

    def find_all(self) -> list[FromStatement]:
        try:
            with open(self.file_path, "r") as f:
                text = f.read()
        except OSError as e:
            raise DockerfileReadError(str(self.file_path)) from e
        return self.parse(text)

    @staticmethod
    def parse(text: str) -> list[FromStatement]:
        statements: list[FromStatement] = []
        previous: str | None = None
        for number, line in enumerate(text.splitlines(), start=1):
            match = FROM_REGEX.match(line)
            if match:
                try:
                    image = Image.parse(match["reference"])
                    statements.append(FromStatement(image=image, pattern=find_annotation(previous), line=number))
                except ValueError as e:
                    logger.debug(f"Ignoring line {number}: {e}")
            previous = line
        return statements
