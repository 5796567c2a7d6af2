import pytest

from blockcall import livekit_auth
from main import create_app

API_KEY = "devkey"
API_SECRET = "secret-for-tests-0123456789abcdef"
LIVEKIT_URL = "wss://livekit.example.test"


@pytest.fixture
def livekit_env(monkeypatch):
    monkeypatch.setattr(livekit_auth, "LIVEKIT_API_KEY", API_KEY)
    monkeypatch.setattr(livekit_auth, "LIVEKIT_API_SECRET", API_SECRET)
    monkeypatch.setattr(livekit_auth, "LIVEKIT_URL", LIVEKIT_URL)


@pytest.fixture
def no_livekit_env(monkeypatch):
    monkeypatch.setattr(livekit_auth, "LIVEKIT_API_KEY", "")
    monkeypatch.setattr(livekit_auth, "LIVEKIT_API_SECRET", "")
    monkeypatch.setattr(livekit_auth, "LIVEKIT_URL", None)


@pytest.fixture
async def client(aiohttp_client, livekit_env):
    return await aiohttp_client(create_app())
