"""Unit tests for the entry point and composition root."""

from falcon.testing import TestClient

from docchain import __version__
from docchain.config import Settings
from docchain.main import create_docchain_app, create_version_navigator, main


def test_main_prints_version(capsys) -> None:
    main([])
    assert capsys.readouterr().out.strip() == f"docchain v{__version__}"


def test_memory_app_serves_documents(restore_logging) -> None:
    app = create_docchain_app(Settings(_env_file=None, storage_backend="memory"))
    client = TestClient(app)

    created = client.simulate_post("/v1/documents", json={"title": "Doc"})
    assert created.status_code == 201
    document_id = created.json["id"]

    client.simulate_post(f"/v1/documents/{document_id}/versions", json={"content": "a"})
    listed = client.simulate_get(f"/v1/documents/{document_id}/versions")
    assert [v["version"] for v in listed.json["items"]] == [1]
    assert client.simulate_get("/v1/health/ready").json["status"] == "ready"


def test_create_version_navigator_wires_events(fake_client) -> None:
    navigator, events = create_version_navigator(
        Settings(_env_file=None, store_timeout_seconds=2.5), client=fake_client
    )
    assert navigator._timeout == 2.5
    assert events.subscribe(lambda event: None) is not None
