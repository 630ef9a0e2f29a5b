from abc import ABC, abstractmethod

from quickestimate.common.logging import get_logger


class BaseIntegration(ABC):
    """Base class for collaborators outside the request/database path.

    Gives each client a named logger and a health check the app can call
    at startup.
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = get_logger(f"integrations.{name}")

    @abstractmethod
    async def health_check(self) -> bool:
        """Return True when the integration is usable."""
        ...
