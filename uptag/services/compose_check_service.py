import logging
from typing import override

from uptag.clients.docker_hub_client import DockerHubClient
from uptag.models import ComposeServiceEntry, FromStatement, Image, Report
from uptag.models.errors import DockerfileReadError, ServiceError
from uptag.repositories import ComposeRepository, DockerfileRepository
from uptag.services.image_checker import ImageChecker
from uptag.services.report_builder import ServiceResult, build_service_report
from uptag.services.service import Service
from uptag.utils.config import Settings
from uptag.utils.logging import setup_logger


class ComposeCheckService(Service):
    def __init__(self, file_path: str, settings: Settings | None = None):
        self.settings: Settings = settings or Settings.from_env()
        self.repository: ComposeRepository = ComposeRepository(file_path)
        self.registry: DockerHubClient = DockerHubClient(
            self.settings.registry_url, self.settings.page_size, self.settings.timeout
        )
        self.checker: ImageChecker = ImageChecker(self.registry, self.settings.search_limit, self.settings.max_workers)
        self.logger: logging.Logger = setup_logger("ComposeCheckService")

    @override
    def run(self) -> Report[str]:
        entries = self.repository.find_all()
        self.logger.info(f"Found {len(entries)} services in {self.repository.file_path}")
        return build_service_report((entry.name, self.check_service(entry)) for entry in entries)

    def check_service(self, entry: ComposeServiceEntry) -> ServiceResult:
        try:
            statements = self.statements_of(entry)
        except ServiceError as e:
            self.logger.warning(f"Skipping service {entry.name}: {e}")
            return e
        return self.checker.check_all(statements)

    def statements_of(self, entry: ComposeServiceEntry) -> list[FromStatement]:
        if entry.dockerfile is not None:
            try:
                return DockerfileRepository(entry.dockerfile).find_all()
            except DockerfileReadError as e:
                raise ServiceError(entry.name, f"Could not read the Dockerfile of service `{entry.name}`") from e
        if entry.image is not None:
            try:
                image = Image.parse(entry.image)
            except ValueError as e:
                self.logger.debug(f"Ignoring image of service {entry.name}: {e}")
                return []
            return [FromStatement(image=image, pattern=entry.pattern, line=entry.line)]
        raise ServiceError(entry.name, f"Service `{entry.name}` declares neither `image` nor `build`")
