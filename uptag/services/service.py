from abc import ABC, abstractmethod

from uptag.models import Report


class Service(ABC):
    @abstractmethod
    def run(self) -> Report:
        pass
