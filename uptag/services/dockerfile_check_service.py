import logging
from typing import override

from uptag.clients.docker_hub_client import DockerHubClient
from uptag.models import Image, Report
from uptag.repositories import DockerfileRepository
from uptag.services.image_checker import ImageChecker
from uptag.services.report_builder import build_image_report
from uptag.services.service import Service
from uptag.utils.config import Settings
from uptag.utils.logging import setup_logger


class DockerfileCheckService(Service):
    def __init__(self, file_path: str, settings: Settings | None = None):
        self.settings: Settings = settings or Settings.from_env()
        self.repository: DockerfileRepository = DockerfileRepository(file_path)
        self.registry: DockerHubClient = DockerHubClient(
            self.settings.registry_url, self.settings.page_size, self.settings.timeout
        )
        self.checker: ImageChecker = ImageChecker(self.registry, self.settings.search_limit, self.settings.max_workers)
        self.logger: logging.Logger = setup_logger("DockerfileCheckService")

    @override
    def run(self) -> Report[Image]:
        statements = self.repository.find_all()
        self.logger.info(f"Found {len(statements)} images in {self.repository.file_path}")
        return build_image_report(self.checker.check_all(statements))
