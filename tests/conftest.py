"""Pytest shared fixtures for DevOps API client tests."""
import itertools
import json
import pathlib
import sys
from typing import Dict, List, Optional
from urllib.parse import urlparse

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from app.config.settings import DevOpsConfig
from app.core.devops import DevOpsClient
from app.core.provider import provider_from_config

BASE_URL = "http://devops.test"

_ID_PREFIXES = {
    "engineers": "eng",
    "developers": "dev",
    "operations": "ops",
    "devops": "devops",
}


def make_response(status_code: int, content: bytes = b"", url: str = BASE_URL) -> requests.Response:
    """Build a real requests.Response with a fixed status and body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = content
    resp.url = url
    return resp


class FakeDevOpsAPI:
    """In-memory stand-in for the DevOps API, served through requests.request.

    Collections keep insertion order. ``engineer_item_get=False`` emulates a
    deployment without GET /engineers/{id} (answers 405).
    """

    def __init__(self, engineer_item_get: bool = True):
        self.engineer_item_get = engineer_item_get
        self.collections: Dict[str, Dict[str, dict]] = {name: {} for name in _ID_PREFIXES}
        self.calls: List[dict] = []
        self._counter = itertools.count(1)

    def seed(self, collection: str, item: dict) -> dict:
        item = dict(item)
        item.setdefault("id", f"{_ID_PREFIXES[collection]}-{next(self._counter)}")
        self.collections[collection][item["id"]] = item
        return item

    def __call__(self, method, url, data=None, headers=None, timeout=None, **kwargs):
        self.calls.append({"method": method, "url": url, "data": data, "headers": headers or {}, "timeout": timeout})
        segments = [segment for segment in urlparse(url).path.split("/") if segment]
        if not segments or segments[0] not in self.collections:
            return self._json(404, {"error": "unknown path"}, url)

        name = segments[0]
        items = self.collections[name]
        item_id: Optional[str] = segments[1] if len(segments) > 1 else None

        if item_id is None:
            if method == "GET":
                return self._json(200, list(items.values()), url)
            if method == "POST":
                payload = json.loads(data)
                payload.pop("id", None)
                return self._json(201, self.seed(name, payload), url)
            return self._json(405, {"error": "method not allowed"}, url)

        if method == "GET" and name == "engineers" and not self.engineer_item_get:
            return self._json(405, {"error": "method not allowed"}, url)
        if item_id not in items:
            return self._json(404, {"error": f"{name[:-1]} not found"}, url)
        if method == "GET":
            return self._json(200, items[item_id], url)
        if method == "PUT":
            payload = json.loads(data)
            payload["id"] = item_id
            items[item_id] = payload
            return self._json(200, payload, url)
        if method == "DELETE":
            del items[item_id]
            return make_response(204, b"", url)
        return self._json(405, {"error": "method not allowed"}, url)

    @staticmethod
    def _json(status_code: int, payload, url: str) -> requests.Response:
        return make_response(status_code, json.dumps(payload).encode("utf-8"), url)


@pytest.fixture(autouse=True)
def _clean_devops_env(monkeypatch):
    """Tests must not pick up a developer's real DEVOPS_* settings."""
    for var in ("DEVOPS_ENDPOINT", "DEVOPS_TIMEOUT", "DEVOPS_ENGINEER_ITEM_LOOKUP"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def fake_api(monkeypatch):
    api = FakeDevOpsAPI()
    monkeypatch.setattr(requests, "request", api)
    return api


@pytest.fixture
def client(fake_api):
    return DevOpsClient(BASE_URL)


@pytest.fixture
def provider(fake_api):
    return provider_from_config(DevOpsConfig(endpoint=BASE_URL))


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture(name="make_response")
def make_response_fixture():
    return make_response
