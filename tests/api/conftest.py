"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from docchain.application.use_cases.document.create_document import CreateDocumentUseCase
from docchain.application.use_cases.document.delete_document import DeleteDocumentUseCase
from docchain.application.use_cases.document.get_document import GetDocumentUseCase
from docchain.application.use_cases.version.create_version import CreateVersionUseCase
from docchain.application.use_cases.version.get_version import GetVersionUseCase
from docchain.application.use_cases.version.list_versions import ListVersionsUseCase
from docchain.application.use_cases.version.restore_version import RestoreVersionUseCase
from docchain.interfaces.api.app import create_app
from docchain.interfaces.api.middleware import CORSMiddleware, RequestContextMiddleware
from docchain.interfaces.api.resources.documents import DocumentResource, DocumentsResource
from docchain.interfaces.api.resources.health import HealthResource
from docchain.interfaces.api.resources.versions import (
    VersionResource,
    VersionRestoreResource,
    VersionsResource,
)

ALLOWED_ORIGIN = "http://localhost:3000"


def build_app(uow_factory, get_document=None):
    """Falcon ASGI app over the memory store."""
    get_document = get_document or GetDocumentUseCase(unit_of_work_factory=uow_factory)
    return create_app(
        documents_resource=DocumentsResource(
            CreateDocumentUseCase(unit_of_work_factory=uow_factory)
        ),
        document_resource=DocumentResource(
            get_document, DeleteDocumentUseCase(unit_of_work_factory=uow_factory)
        ),
        versions_resource=VersionsResource(
            ListVersionsUseCase(unit_of_work_factory=uow_factory),
            CreateVersionUseCase(unit_of_work_factory=uow_factory),
        ),
        version_resource=VersionResource(GetVersionUseCase(unit_of_work_factory=uow_factory)),
        version_restore_resource=VersionRestoreResource(
            RestoreVersionUseCase(unit_of_work_factory=uow_factory)
        ),
        health_resource=HealthResource(),
        middleware=[CORSMiddleware([ALLOWED_ORIGIN]), RequestContextMiddleware()],
    )


@pytest.fixture
def app(uow_factory):
    return build_app(uow_factory)


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app, headers={"X-User-Id": "user-1"})


@pytest.fixture
def document_id(client: TestClient) -> str:
    """Id of a freshly created document."""
    result = client.simulate_post(
        "/v1/documents", json={"title": "Draft", "content": "first draft"}
    )
    assert result.status_code == 201
    return result.json["id"]
