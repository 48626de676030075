import httpx
import pytest

from ava_cloudflare import cf
from ava_cloudflare.models.keyring_config import KeyringConfig
from ava_cloudflare.models.settings import EnvSettings
from ava_cloudflare.utils.cf_cache import CachePurgeClient


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it was sent."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def make_transport():
    def factory(status_code=200, json=None, content=None, exc=None, headers=None):
        def handler(request):
            if exc is not None:
                raise exc("timed out", request=request)
            if json is not None:
                return httpx.Response(status_code, json=json)
            return httpx.Response(status_code, headers=headers, content=content or b"")

        return RecordingTransport(handler)

    return factory


@pytest.fixture
def settings(tmp_path):
    return EnvSettings(
        enabled=True,
        zone_id="0123456789abcdef",
        api_token="secret-token-9876",
        storage_path=tmp_path / "storage",
    )


@pytest.fixture
def no_keyring(monkeypatch):
    monkeypatch.setattr(KeyringConfig, "load_from_keyring", classmethod(lambda cls: cls()))


@pytest.fixture
def cli_env(monkeypatch, no_keyring):
    """Point the CLI at the given settings and transport."""

    def apply(settings, transport=None):
        monkeypatch.setattr(cf, "env", settings)
        monkeypatch.setattr(cf, "get_client", lambda: CachePurgeClient(transport=transport))

    return apply
