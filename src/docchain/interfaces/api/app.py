"""Falcon ASGI application."""

from collections.abc import Sequence

import falcon.asgi
from falcon.asgi import App

from docchain.interfaces.api.resources.documents import DocumentResource, DocumentsResource
from docchain.interfaces.api.resources.errors import handle_unexpected
from docchain.interfaces.api.resources.health import HealthResource
from docchain.interfaces.api.resources.versions import (
    VersionResource,
    VersionRestoreResource,
    VersionsResource,
)


def create_app(
    documents_resource: DocumentsResource,
    document_resource: DocumentResource,
    versions_resource: VersionsResource,
    version_resource: VersionResource,
    version_restore_resource: VersionRestoreResource,
    health_resource: HealthResource,
    middleware: Sequence[object] = (),
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=list(middleware))
    app.add_error_handler(Exception, handle_unexpected)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/documents", documents_resource)
    app.add_route("/v1/documents/{document_id}", document_resource)
    app.add_route("/v1/documents/{document_id}/versions", versions_resource)
    app.add_route("/v1/documents/{document_id}/versions/{version_id}", version_resource)
    app.add_route(
        "/v1/documents/{document_id}/versions/{version_id}/restore",
        version_restore_resource,
    )
    return app
