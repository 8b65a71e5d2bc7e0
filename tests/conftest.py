from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.services.media_gateway import MediaGateway, get_media_gateway
from app.services.page_cache import PageCache


class FakeMediaStore:
    """In-memory stand-in for the remote media API."""

    def __init__(self, events: list[str]) -> None:
        self.events = events
        self.resources_by_id: dict[str, dict[str, Any]] = {}
        self.upload_calls: list[dict[str, Any]] = []
        self.resources_calls: list[dict[str, Any]] = []
        self.destroy_calls: list[str] = []
        self.upload_error: Exception | None = None
        self.destroy_error: Exception | None = None
        self.resources_error: Exception | None = None

    async def upload(self, file_uri: str, **options: Any) -> dict[str, Any]:
        self.upload_calls.append({"file_uri": file_uri, **options})
        if self.upload_error is not None:
            raise self.upload_error
        public_id = options.get("public_id") or f"generated{len(self.upload_calls)}"
        if options.get("folder"):
            public_id = f"{options['folder']}/{public_id}"
        resource = {"public_id": public_id, "format": "png", "width": options["width"]}
        self.resources_by_id[public_id] = resource
        self.events.append("upload")
        return resource

    async def resources(self, **query: Any) -> dict[str, Any]:
        self.resources_calls.append(query)
        if self.resources_error is not None:
            raise self.resources_error
        matching = [r for pid, r in self.resources_by_id.items() if pid.startswith(query.get("prefix", ""))]
        return {"resources": matching[: query.get("max_results", 10)]}

    async def destroy(self, public_id: str) -> dict[str, Any]:
        self.destroy_calls.append(public_id)
        if self.destroy_error is not None:
            raise self.destroy_error
        self.events.append("destroy")
        if self.resources_by_id.pop(public_id, None) is None:
            return {"result": "not found"}
        return {"result": "ok"}


class RecordingPageCache(PageCache):
    def __init__(self, events: list[str]) -> None:
        super().__init__()
        self.events = events
        self.revalidated: list[str] = []

    def revalidate_path(self, path: str) -> None:
        self.revalidated.append(path)
        self.events.append(f"revalidate:{path}")
        super().revalidate_path(path)


@pytest.fixture()
def events() -> list[str]:
    return []


@pytest.fixture()
def store(events) -> FakeMediaStore:
    return FakeMediaStore(events)


@pytest.fixture()
def page_cache(events) -> RecordingPageCache:
    return RecordingPageCache(events)


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture()
def gateway(store, page_cache, settings) -> MediaGateway:
    return MediaGateway(store, page_cache, settings)


@pytest.fixture()
def client(gateway):
    from app.main import app

    app.dependency_overrides[get_media_gateway] = lambda: gateway
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
