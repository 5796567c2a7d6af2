import json
import time

import jwt
import pytest

from blockcall import livekit_auth
from blockcall.livekit_auth import LiveKitConfigError, is_livekit_configured, mint_livekit_token


def decode(token):
    return jwt.decode(token, livekit_auth.LIVEKIT_API_SECRET, algorithms=["HS256"])


def test_token_claims(livekit_env):
    metadata = {"walletAddress": "0xAlice1234", "isHost": True, "callType": "group"}
    claims = decode(mint_livekit_token("meeting-ABC", "0xAlice1234", metadata))

    assert claims["iss"] == livekit_auth.LIVEKIT_API_KEY
    assert claims["sub"] == "0xAlice1234"
    assert claims["name"] == "0xAlice1"
    assert json.loads(claims["metadata"]) == metadata
    assert claims["video"] == {
        "room": "meeting-ABC",
        "roomJoin": True,
        "canPublish": True,
        "canSubscribe": True,
        "canPublishData": True,
    }
    assert claims["exp"] - int(time.time()) <= livekit_auth.DEFAULT_TTL_SECONDS


def test_display_name_from_metadata(livekit_env):
    claims = decode(mint_livekit_token("room", "0xAlice1234", {"displayName": "Alice"}))
    assert claims["name"] == "Alice"


def test_short_identity_is_used_whole(livekit_env):
    claims = decode(mint_livekit_token("room", "0xA"))
    assert claims["name"] == "0xA"
    assert json.loads(claims["metadata"]) == {}


def test_missing_credentials(no_livekit_env):
    assert is_livekit_configured() is False
    with pytest.raises(LiveKitConfigError):
        mint_livekit_token("room", "0xAlice1234")


def test_configured(livekit_env):
    assert is_livekit_configured() is True
