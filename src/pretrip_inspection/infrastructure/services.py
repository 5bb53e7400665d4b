"""Dependency wiring and the in-memory session store."""

from dataclasses import dataclass
from typing import Dict, List, Optional
from uuid import UUID

from ..application.ports.inspection_gateway import InspectionGateway
from ..application.services.workflow_controller import WorkflowController
from ..domain.catalog import DEFAULT_CATALOG, RequirementCatalog
from ..domain.entities.inspection_session import InspectionSession
from ..domain.value_objects.draft_form import Requester
from .host_bridge import QueuedHostBridge
from .http_gateway import HttpInspectionGateway
from .logging import get_logger
from .previews import InMemoryPreviewAllocator


logger = get_logger(__name__)


@dataclass
class SessionContext:
    """Everything that belongs to one open inspection session."""

    controller: WorkflowController
    host_bridge: QueuedHostBridge
    previews: InMemoryPreviewAllocator

    @property
    def session(self) -> InspectionSession:
        return self.controller.session


class ServiceFactory:
    """Creates sessions wired to a shared gateway and keeps them in memory."""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        gateway: Optional[InspectionGateway] = None,
        catalog: RequirementCatalog = DEFAULT_CATALOG
    ):
        self._base_url = base_url
        self._timeout = timeout
        self._gateway = gateway
        self._owns_gateway = gateway is None
        self._catalog = catalog
        self._sessions: Dict[UUID, SessionContext] = {}

    @property
    def catalog(self) -> RequirementCatalog:
        return self._catalog

    @property
    def gateway(self) -> InspectionGateway:
        if self._gateway is None:
            self._gateway = HttpInspectionGateway(self._base_url, timeout=self._timeout)
        return self._gateway

    async def initialize(self) -> None:
        """Initialize the service factory."""
        logger.info(f"Using inspection service at {self._base_url}")

    async def shutdown(self) -> None:
        """Close every session and the gateway."""
        for session_id in list(self._sessions):
            self.close_session(session_id)
        if self._owns_gateway and isinstance(self._gateway, HttpInspectionGateway):
            await self._gateway.close()
            self._gateway = None

    def open_session(self, requester: Optional[Requester] = None) -> SessionContext:
        """Create a new inspection session."""
        previews = InMemoryPreviewAllocator()
        host_bridge = QueuedHostBridge()
        session = InspectionSession(previews, requester=requester, catalog=self._catalog)
        context = SessionContext(
            controller=WorkflowController(session, self.gateway, host_bridge),
            host_bridge=host_bridge,
            previews=previews
        )
        self._sessions[session.id] = context
        logger.info("Inspection session opened", extra={"session_id": str(session.id)})
        return context

    def get_session(self, session_id: UUID) -> Optional[SessionContext]:
        return self._sessions.get(session_id)

    def list_sessions(self) -> List[SessionContext]:
        return list(self._sessions.values())

    def close_session(self, session_id: UUID) -> bool:
        """Close a session, releasing its previews."""
        context = self._sessions.pop(session_id, None)
        if context is None:
            return False
        context.session.close()
        logger.info("Inspection session closed", extra={"session_id": str(session_id)})
        return True


# Global service factory instance
_service_factory: Optional[ServiceFactory] = None


def get_service_factory() -> ServiceFactory:
    """Get the global service factory instance."""
    global _service_factory

    if _service_factory is None:
        from ..presentation.api.config import get_settings

        settings = get_settings()
        _service_factory = ServiceFactory(settings.inspection_api_url, timeout=settings.http_timeout_seconds)

    return _service_factory


def set_service_factory(factory: Optional[ServiceFactory]) -> None:
    """Replace the global service factory (used by tests)."""
    global _service_factory
    _service_factory = factory


async def initialize_services() -> None:
    """Initialize application services."""
    await get_service_factory().initialize()


async def shutdown_services() -> None:
    """Shutdown application services."""
    await get_service_factory().shutdown()
