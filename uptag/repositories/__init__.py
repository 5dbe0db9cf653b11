from .compose_repository import ComposeRepository
from .dockerfile_repository import DockerfileRepository

__all__ = [
    'ComposeRepository',
    'DockerfileRepository'
]
