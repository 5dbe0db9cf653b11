import logging
from concurrent.futures import ThreadPoolExecutor

from uptag.clients.docker_hub_client import DockerHubClient
from uptag.models import FromStatement, Image, Pattern, Resolution
from uptag.models.errors import CheckError, UnspecifiedPatternError
from uptag.services.report_builder import ImageResult
from uptag.services.update_resolver import find_update
from uptag.utils.logging import setup_logger


class ImageChecker:
    def __init__(self, registry: DockerHubClient, search_limit: int, max_workers: int = 8):
        self.registry: DockerHubClient = registry
        self.search_limit: int = search_limit
        self.max_workers: int = max_workers
        self.logger: logging.Logger = setup_logger("ImageChecker")

    def check(self, statement: FromStatement) -> Resolution:
        if statement.pattern is None:
            raise UnspecifiedPatternError()
        pattern = Pattern.parse(statement.pattern)
        image = statement.image
        self.logger.info(f"Searching updates for {image} with pattern `{pattern}`")
        return find_update(
            str(image.name),
            image.tag,
            pattern,
            self.registry.tags(image.name),
            self.search_limit,
        )

    def check_all(self, statements: list[FromStatement]) -> list[tuple[Image, ImageResult]]:
        """Check every statement on its own worker, keeping the input order."""
        if not statements:
            return []
        results: list[tuple[Image, ImageResult]] = []
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(statements))) as executor:
            futures = [executor.submit(self.check, statement) for statement in statements]
            for statement, future in zip(statements, futures):
                try:
                    result: ImageResult = future.result()
                except CheckError as e:
                    self.logger.warning(f"Failed to check {statement.image}: {e}")
                    result = e
                results.append((statement.image, result))
        return results
