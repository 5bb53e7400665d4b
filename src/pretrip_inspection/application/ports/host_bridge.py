"""Port interface for the embedding host environment."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict


class Feedback(Enum):
    """Discrete feedback categories the host can render (e.g. haptics)."""

    LIGHT = "light"
    SUCCESS = "success"
    ERROR = "error"


class HostBridge(ABC):
    """Notification sink provided by the host that embeds the inspection form."""

    @abstractmethod
    def notify(self, feedback: Feedback) -> None:
        """Signal a user-facing milestone."""
        raise NotImplementedError

    @abstractmethod
    def send_result(self, data: Dict[str, Any]) -> None:
        """Deliver the final submission result to the host."""
        raise NotImplementedError
