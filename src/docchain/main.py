"""Application entry point and composition root."""

import argparse
from collections.abc import Sequence

from falcon.asgi import App

from docchain import __version__
from docchain.application.services.version_navigator import VersionNavigator
from docchain.application.use_cases.document.create_document import CreateDocumentUseCase
from docchain.application.use_cases.document.delete_document import DeleteDocumentUseCase
from docchain.application.use_cases.document.get_document import GetDocumentUseCase
from docchain.application.use_cases.version.create_version import CreateVersionUseCase
from docchain.application.use_cases.version.get_version import GetVersionUseCase
from docchain.application.use_cases.version.list_versions import ListVersionsUseCase
from docchain.application.use_cases.version.restore_version import RestoreVersionUseCase
from docchain.config import Settings, get_settings
from docchain.infrastructure.cache.version_cache import InMemoryVersionCache
from docchain.infrastructure.clients.http_client import HttpVersionStoreClient
from docchain.infrastructure.events.event_bus import InMemoryEventBus
from docchain.infrastructure.persistence.memory import (
    MemoryDatabase,
    create_memory_uow_factory,
)
from docchain.infrastructure.persistence.postgres.connection import create_pool
from docchain.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from docchain.interfaces.api.app import create_app
from docchain.interfaces.api.middleware import (
    CORSMiddleware,
    LifespanMiddleware,
    RequestContextMiddleware,
)
from docchain.interfaces.api.resources.documents import DocumentResource, DocumentsResource
from docchain.interfaces.api.resources.health import HealthResource
from docchain.interfaces.api.resources.versions import (
    VersionResource,
    VersionRestoreResource,
    VersionsResource,
)
from docchain.logging import configure_logging


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(prog="docchain")
    parser.add_argument("command", nargs="?", choices=("version", "serve"), default="version")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    if args.command == "serve":
        run_server(host=args.host, port=args.port)
        return
    print(f"docchain v{__version__}")


def create_docchain_app(settings: Settings | None = None) -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, json_output=settings.log_json)

    pool = None
    if settings.storage_backend == "postgres":
        pool = create_pool(
            settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
        )
        uow_factory = create_uow_factory(pool)
    else:
        uow_factory = create_memory_uow_factory(MemoryDatabase())

    create_document = CreateDocumentUseCase(unit_of_work_factory=uow_factory)
    get_document = GetDocumentUseCase(unit_of_work_factory=uow_factory)
    delete_document = DeleteDocumentUseCase(unit_of_work_factory=uow_factory)
    create_version = CreateVersionUseCase(
        unit_of_work_factory=uow_factory,
        max_chain_depth=settings.max_chain_depth,
    )
    list_versions = ListVersionsUseCase(unit_of_work_factory=uow_factory)
    get_version = GetVersionUseCase(unit_of_work_factory=uow_factory)
    restore_version = RestoreVersionUseCase(unit_of_work_factory=uow_factory)

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    return create_app(
        documents_resource=DocumentsResource(create_document),
        document_resource=DocumentResource(get_document, delete_document),
        versions_resource=VersionsResource(list_versions, create_version),
        version_resource=VersionResource(get_version),
        version_restore_resource=VersionRestoreResource(restore_version),
        health_resource=HealthResource(pool),
        middleware=[
            CORSMiddleware(cors_origins),
            LifespanMiddleware(pool),
            RequestContextMiddleware(),
        ],
    )


def create_version_navigator(
    settings: Settings | None = None,
    client: HttpVersionStoreClient | None = None,
) -> tuple[VersionNavigator, InMemoryEventBus]:
    """Session-side wiring: HTTP client, owned cache and event bus."""
    settings = settings or get_settings()
    client = client or HttpVersionStoreClient(
        settings.api_url, timeout=settings.store_timeout_seconds
    )
    events = InMemoryEventBus()
    navigator = VersionNavigator(
        client=client,
        cache=InMemoryVersionCache(client.list_versions),
        publisher=events,
        timeout=settings.store_timeout_seconds,
    )
    return navigator, events


def run_server(host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run uvicorn server."""
    import uvicorn

    uvicorn.run(create_docchain_app(), host=host, port=port)
