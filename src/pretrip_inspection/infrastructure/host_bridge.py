"""Host bridge implementations."""

from collections import deque
from datetime import datetime
from typing import Any, Deque, Dict, List

from ..application.ports.host_bridge import Feedback, HostBridge
from .logging import get_logger


logger = get_logger(__name__)


class NullHostBridge(HostBridge):
    """Fallback used when no host environment is present; only logs."""

    def notify(self, feedback: Feedback) -> None:
        logger.debug(f"Host feedback (no host): {feedback.value}")

    def send_result(self, data: Dict[str, Any]) -> None:
        logger.info("Send data fallback", extra={"host_result": data})


class QueuedHostBridge(HostBridge):
    """Buffers host events until the embedding page collects them."""

    def __init__(self, max_events: int = 100):
        self._events: Deque[Dict[str, Any]] = deque(maxlen=max_events)
        self._results: List[Dict[str, Any]] = []

    def notify(self, feedback: Feedback) -> None:
        self._events.append({
            "type": "feedback",
            "feedback": feedback.value,
            "at": datetime.utcnow().isoformat() + "Z",
        })

    def send_result(self, data: Dict[str, Any]) -> None:
        self._results.append(dict(data))
        self._events.append({
            "type": "result",
            "data": dict(data),
            "at": datetime.utcnow().isoformat() + "Z",
        })
        logger.info("Inspection result queued for host", extra={"host_result": data})

    @property
    def results(self) -> List[Dict[str, Any]]:
        """Every result delivered so far."""
        return list(self._results)

    def drain(self) -> List[Dict[str, Any]]:
        """Return and forget the pending events."""
        events = list(self._events)
        self._events.clear()
        return events
