import json
import threading

import pytest
import requests

from anymc.model import GameVersion
from anymc.model.loader import QuiltLoader
from anymc.model.quilt import QuiltVersion


class FakeResponse:
    def __init__(self, url: str, status_code: int = 200, content: bytes = b""):
        self.url = url
        self.status_code = status_code
        self.content = content
        self.closed = False

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} for url: {self.url}", response=self)

    def json(self):
        return json.loads(self.content)

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i:i + chunk_size]

    def close(self):
        self.closed = True


class FakeSession:
    """
        Stands in for requests.Session. Routes map a url to bytes, a JSON-able object,
        an (status, bytes) tuple, or an exception to raise. Unknown urls answer 404.
    """

    def __init__(self, routes=None, delay=None):
        self.routes = dict(routes or {})
        self.delay = delay
        self.calls = []
        self._lock = threading.Lock()

    def get(self, url, **kwargs):
        with self._lock:
            self.calls.append(url)
        if self.delay is not None:
            self.delay(url)

        route = self.routes.get(url)
        if route is None:
            return FakeResponse(url, 404)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, tuple):
            status, content = route
            return FakeResponse(url, status, content)
        if isinstance(route, bytes):
            return FakeResponse(url, 200, route)
        return FakeResponse(url, 200, json.dumps(route).encode("utf-8"))


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def minecraft():
    return GameVersion(version="1.19.4", stable=True)


@pytest.fixture
def quilt_version():
    return QuiltVersion(separator=".", build=1, maven="org.quiltmc:quilt-loader:0.19.1", version="0.19.1")


@pytest.fixture
def quilt_loader(quilt_version):
    return QuiltLoader(version=quilt_version)


def _profile_libraries():
    return [
        {"name": "org.quiltmc:hashed:1.19.4", "url": "https://maven.quiltmc.org/repository/release/"},
        {"name": "net.fabricmc:intermediary:1.19.4", "url": "https://maven.fabricmc.net/"},
        {"name": "org.ow2.asm:asm:9.4", "url": "https://maven.fabricmc.net/"},
        {"name": "org.quiltmc:quilt-loader:0.19.1", "url": "https://maven.quiltmc.org/repository/release/"},
    ]


@pytest.fixture
def client_profile_json():
    return {
        "id": "quilt-loader-0.19.1-1.19.4",
        "inheritsFrom": "1.19.4",
        "releaseTime": "2023-04-19T17:45:00+0000",
        "time": "2023-04-19T17:45:00+0000",
        "type": "release",
        "mainClass": "org.quiltmc.loader.impl.launch.knot.KnotClient",
        "arguments": {"game": [], "jvm": ["-Dloader.disable_beacon=true"]},
        "libraries": _profile_libraries(),
    }


@pytest.fixture
def server_profile_json():
    return {
        "id": "quilt-loader-0.19.1-1.19.4",
        "inheritsFrom": "1.19.4",
        "releaseTime": "2023-04-19T17:45:00+0000",
        "time": "2023-04-19T17:45:00+0000",
        "type": "release",
        "mainClass": "org.quiltmc.loader.impl.launch.knot.KnotServer",
        "launcherMainClass": "net.minecraft.server.Main",
        "arguments": {"game": []},
        "libraries": _profile_libraries(),
    }


@pytest.fixture
def launcher_profiles_json():
    return {
        "profiles": {
            "abc123": {
                "created": "2022-01-01T00:00:00.000Z",
                "icon": "Grass",
                "lastUsed": "2022-01-02T00:00:00.000Z",
                "lastVersionId": "latest-release",
                "name": "",
                "type": "latest-release",
            },
            "def456": {
                "icon": "Furnace",
                "lastVersionId": "1.18.2",
                "name": "Old",
                "type": "custom",
            },
        },
        "settings": {"crashAssistance": True, "enableAdvanced": False},
        "version": 3,
    }
