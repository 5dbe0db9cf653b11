import logging
from collections.abc import Iterator

import requests

from uptag.models.errors import FetchError
from uptag.models.image import ImageName
from uptag.utils.config import DEFAULT_REGISTRY_URL

logger = logging.getLogger(__name__)


class DockerHubClient:
    def __init__(self, registry_url: str = DEFAULT_REGISTRY_URL, page_size: int = 25, timeout: float = 10.0):
        self.registry_url: str = registry_url.rstrip("/")
        self.page_size: int = page_size
        self.timeout: float = timeout

    def tags(self, name: ImageName) -> Iterator[str]:
        """Yield the tags of an image, most recently updated first.

        Pages are requested lazily, one at a time, as the caller advances.
        """
        url: str | None = f"{self.registry_url}/v2/repositories/{name.registry_path}/tags/"
        params: dict | None = {"page_size": self.page_size, "ordering": "last_updated"}
        while url:
            tags, url = self._fetch_page(name, url, params)
            # the `next` link already carries the query
            params = None
            yield from tags

    def _fetch_page(self, name: ImageName, url: str, params: dict | None) -> tuple[list[str], str | None]:
        logger.info(f"Fetching {url}")
        headers = {"Accept": "application/json"}
        try:
            response = requests.get(url=url, params=params, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            page = response.json()
            return [result["name"] for result in page["results"]], page.get("next")
        except requests.RequestException as e:
            logger.error(f"Error fetching tags of {name}: {e}")
            raise FetchError(str(name)) from e
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Malformed tag list for {name}: {e}")
            raise FetchError(str(name), "Received a malformed tag list") from e
