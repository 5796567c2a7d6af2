"""
LiveKit JWT token generation
"""
import json
import os
import time
from typing import Optional

import jwt


# Environment variables for LiveKit configuration
LIVEKIT_URL = os.environ.get("LIVEKIT_URL")
LIVEKIT_API_KEY = os.environ.get("LIVEKIT_API_KEY", "")
LIVEKIT_API_SECRET = os.environ.get("LIVEKIT_API_SECRET", "")

# Same default lifetime the LiveKit server SDKs use
DEFAULT_TTL_SECONDS = 6 * 60 * 60


class LiveKitConfigError(RuntimeError):
    pass


def mint_livekit_token(room: str, identity: str, metadata: Optional[dict] = None) -> str:
    """
    Mint a LiveKit access token for a participant

    Args:
        room: LiveKit room name
        identity: Unique participant identifier (wallet address)
        metadata: Attached to the participant as a JSON string.
            ``displayName`` overrides the default display name.

    Returns:
        JWT token string

    Every token may join, publish, subscribe and publish data.
    """
    if not (LIVEKIT_API_KEY and LIVEKIT_API_SECRET):
        raise LiveKitConfigError("api-key and api-secret must be set")

    metadata = metadata or {}
    now = int(time.time())

    grants = {
        "room": room,
        "roomJoin": True,
        "canPublish": True,
        "canSubscribe": True,
        "canPublishData": True,
    }

    payload = {
        "iss": LIVEKIT_API_KEY,
        "sub": identity,
        "jti": identity,
        "name": metadata.get("displayName") or identity[:8],
        "metadata": json.dumps(metadata),
        "nbf": now - 5,  # Not before (with 5s clock skew tolerance)
        "exp": now + DEFAULT_TTL_SECONDS,
        "video": grants,
    }

    return jwt.encode(payload, LIVEKIT_API_SECRET, algorithm="HS256")


def is_livekit_configured() -> bool:
    """Check if the LiveKit API credentials are set"""
    return bool(LIVEKIT_API_KEY and LIVEKIT_API_SECRET)
