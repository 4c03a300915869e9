"""Construction of the full selection cascade in canonical subscription order."""

from __future__ import annotations

from dataclasses import dataclass

from packages.explorer_shared.config import ExplorerSettings
from packages.explorer_shared.logging import get_logger
from packages.explorer_shared.notifications import (
    DeferredTaskQueue,
    Notification,
    NotificationChannel,
    Scheduler,
)
from resources.adapters.credentials import CredentialHolder
from resources.adapters.service_documents import ServiceFactory
from services.action.service_loader import CachingServiceLoader
from services.selection.auth_state import (
    AuthStateCoordinator,
    AuthStateDisplay,
    resolve_auth_state_settings,
)
from services.selection.method_selector import (
    MethodSelectionCoordinator,
    MethodSelectorDisplay,
)
from services.selection.service_selector import (
    ServiceSelectionCoordinator,
    ServiceSelectorDisplay,
    resolve_service_selector_settings,
)
from services.selection.version_selector import (
    VersionSelectionCoordinator,
    VersionSelectorDisplay,
)
from services.state.app_state import ChannelAppState
from services.state.directory_state import InMemoryDirectoryState

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class ExplorerDisplays:
    """One display per coordinator, supplied by the host UI."""

    service: ServiceSelectorDisplay
    version: VersionSelectorDisplay
    method: MethodSelectorDisplay
    auth: AuthStateDisplay


@dataclass(frozen=True)
class Explorer:
    """Every wired component of one explorer instance."""

    channel: NotificationChannel
    scheduler: Scheduler
    directory: InMemoryDirectoryState
    app_state: ChannelAppState
    services: ServiceSelectionCoordinator
    versions: VersionSelectionCoordinator
    methods: MethodSelectionCoordinator
    auth: AuthStateCoordinator
    loader: CachingServiceLoader

    def publish(self, notification: Notification) -> None:
        """Deliver an externally triggered notification as a top-level publish."""
        self.channel.publish(notification)

    def settle(self) -> int:
        """Run deferred rounds until the cascade is quiet; return rounds run.

        Only a manually driven ``DeferredTaskQueue`` can be settled here; an
        event-loop scheduler drains on its own and this returns ``0``.
        """
        if isinstance(self.scheduler, DeferredTaskQueue):
            return self.scheduler.flush()
        return 0


def build_explorer(
    *,
    settings: ExplorerSettings,
    displays: ExplorerDisplays,
    credentials: CredentialHolder,
    service_factory: ServiceFactory,
    scheduler: Scheduler | None = None,
) -> Explorer:
    """Wire every component onto one channel.

    Subscription order is App State, Service, Version, Method, Auth, then the
    Service Loader. App State must see ``ServiceLoaded`` before the Method
    Selection Coordinator so user picks resolve against the new service.
    """
    channel = NotificationChannel(reentrancy_policy=settings.channel.reentrancy_policy)
    if scheduler is None:
        scheduler = DeferredTaskQueue(max_rounds=settings.channel.max_deferred_rounds)
    directory = InMemoryDirectoryState()

    app_state = ChannelAppState(channel)
    services = ServiceSelectionCoordinator(
        channel=channel,
        display=displays.service,
        settings=resolve_service_selector_settings(settings),
    )
    versions = VersionSelectionCoordinator(
        channel=channel,
        scheduler=scheduler,
        directory=directory,
        display=displays.version,
    )
    methods = MethodSelectionCoordinator(
        channel=channel,
        scheduler=scheduler,
        app_state=app_state,
        display=displays.method,
    )
    auth = AuthStateCoordinator(
        channel=channel,
        credentials=credentials,
        display=displays.auth,
        settings=resolve_auth_state_settings(settings),
    )
    loader = CachingServiceLoader(
        channel=channel,
        scheduler=scheduler,
        factory=service_factory,
    )
    _LOGGER.info(
        "explorer wired: reentrancy_policy=%s scheduler=%s",
        settings.channel.reentrancy_policy.value,
        type(scheduler).__name__,
    )
    return Explorer(
        channel=channel,
        scheduler=scheduler,
        directory=directory,
        app_state=app_state,
        services=services,
        versions=versions,
        methods=methods,
        auth=auth,
        loader=loader,
    )
