"""
Dependency container injection module - Main Layer

Wires the channels, state stores, registry gateway and pipeline services
together and manages their lifecycle.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from meshbridge.application.services import (
    ClaimOrchestrator,
    CommandTranslator,
    EventIngest,
)
from meshbridge.application.use_cases import (
    ClaimDeviceUseCase,
    GetClaimStatusUseCase,
    GetDisplaySettingsUseCase,
    GetHealthStatusUseCase,
    SubmitEventUseCase,
    UpdateDisplaySettingsUseCase,
)
from meshbridge.infrastructure.gateways import HttpRegistryGateway
from meshbridge.infrastructure.messaging import BroadcastChannel
from meshbridge.infrastructure.state import ClaimStateStore, DisplayStateStore
from meshbridge.shared import EnumChannel, get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Channels
    event_stream = providers.Singleton(
        BroadcastChannel, name=EnumChannel.EVENT_STREAM.value
    )
    display_changes = providers.Singleton(
        BroadcastChannel, name=EnumChannel.DISPLAY_CHANGES.value
    )
    device_commands = providers.Singleton(
        BroadcastChannel, name=EnumChannel.DEVICE_COMMANDS.value
    )
    gateway_commands = providers.Singleton(
        BroadcastChannel, name=EnumChannel.GATEWAY_COMMANDS.value
    )
    claim_status_changes = providers.Singleton(
        BroadcastChannel, name=EnumChannel.CLAIM_STATUS.value
    )

    channels = providers.List(
        event_stream,
        display_changes,
        device_commands,
        gateway_commands,
        claim_status_changes,
    )

    # State
    display_state_store = providers.Singleton(
        DisplayStateStore,
        channel=display_changes,
    )

    claim_state_store = providers.Singleton(
        ClaimStateStore,
        channel=claim_status_changes,
    )

    # Gateways
    registry_gateway = providers.Singleton(
        HttpRegistryGateway,
        registry_url=config.registry.url,
        token=config.registry.token,
        timeout=config.registry.timeout,
    )

    # Pipeline services
    command_translator = providers.Singleton(
        CommandTranslator,
        display_channel=display_changes,
        command_channel=device_commands,
    )

    event_ingest = providers.Singleton(
        EventIngest,
        event_stream=event_stream,
        command_channel=device_commands,
    )

    claim_orchestrator = providers.Singleton(
        ClaimOrchestrator,
        registry_gateway=registry_gateway,
        provisioning_channel=gateway_commands,
        claim_state=claim_state_store,
        application=config.registry.application,
        address=config.claim.address,
        gateway_labels=config.registry.gateway_labels,
    )

    # Application (use cases)
    update_display_settings_use_case = providers.Factory(
        UpdateDisplaySettingsUseCase,
        display_state_store=display_state_store,
    )

    get_display_settings_use_case = providers.Factory(
        GetDisplaySettingsUseCase,
        display_state_store=display_state_store,
    )

    claim_device_use_case = providers.Factory(
        ClaimDeviceUseCase,
        claim_orchestrator=claim_orchestrator,
    )

    get_claim_status_use_case = providers.Factory(
        GetClaimStatusUseCase,
        claim_state_store=claim_state_store,
    )

    submit_event_use_case = providers.Factory(
        SubmitEventUseCase,
        event_stream=event_stream,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        channels=channels,
        application=config.registry.application,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Start the pipeline subscriptions and tear the channels down on exit.

    Subscriptions start consumer tasks, so this must run inside the
    application's event loop.
    """
    container = get_container()

    command_translator = container.command_translator()
    event_ingest = container.event_ingest()

    try:
        command_translator.start()
        event_ingest.start()

        logger.info("container.pipeline.started")
        yield container

    finally:
        await command_translator.stop()
        await event_ingest.stop()

        for channel in container.channels():
            await channel.close()

        logger.info("container.pipeline.shutdown")
