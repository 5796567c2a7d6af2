"""
HTTP API handlers for BlockCall
Group meetings (registry backed) + wallet-to-wallet calls (stateless)
"""
import json
import logging
import os
from datetime import datetime, timezone

from aiohttp import web

from . import livekit_auth
from .errors import ApiError, NotFoundError, ValidationError
from .livekit_auth import is_livekit_configured, mint_livekit_token
from .state import RoomRegistry
from .utils import meeting_room_name, p2p_room_name

logger = logging.getLogger("blockcall")

VERSION = "2.0.0"
CORS_ALLOW_ORIGIN = os.environ.get("CORS_ALLOW_ORIGIN", "*")

rooms_key = web.AppKey("rooms", RoomRegistry)

# ============================================================
# MIDDLEWARE
# ============================================================

@web.middleware
async def error_middleware(request, handler):
    """Turn every failure into an {"error": message} JSON body"""
    try:
        return await handler(request)
    except ApiError as e:
        return web.json_response({"error": e.message}, status=e.status)
    except web.HTTPException as e:
        if e.status < 400:
            raise
        return web.json_response({"error": e.reason}, status=e.status)
    except Exception as e:
        logger.exception("❌ %s %s failed", request.method, request.path)
        return web.json_response({"error": str(e)}, status=500)


@web.middleware
async def cors_middleware(request, handler):
    """Allow browser front-ends on other origins to call the API"""
    if request.method == "OPTIONS":
        response = web.Response(status=204)
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = request.headers.get(
            "Access-Control-Request-Headers", "Content-Type"
        )
    else:
        response = await handler(request)
    response.headers["Access-Control-Allow-Origin"] = CORS_ALLOW_ORIGIN
    return response

# ============================================================
# HELPERS
# ============================================================

async def read_json(request: web.Request) -> dict:
    """
    Read the request body as a JSON object.
    Empty bodies and arrays read as {} (no named fields to pick from).
    """
    if not request.can_read_body:
        return {}
    raw = await request.text()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        raise ValidationError("Invalid JSON body") from None
    if isinstance(data, list):
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Invalid JSON body")
    return data


def livekit_url():
    return livekit_auth.LIVEKIT_URL


def utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

# ============================================================
# HEALTH
# ============================================================

async def health(request: web.Request) -> web.Response:
    return web.json_response({
        "status": "✅ BlockCall LiveKit Server Running",
        "version": VERSION,
        "timestamp": utc_timestamp(),
        "activeRooms": len(request.app[rooms_key]),
        "livekitConnected": is_livekit_configured(),
    })

# ============================================================
# GROUP MEETINGS
# ============================================================

async def api_create_room(request: web.Request) -> web.Response:
    """Create a group meeting hosted by the caller"""
    data = await read_json(request)
    wallet = data.get("walletAddress")

    if not wallet:
        raise ValidationError("Wallet address required")

    # The room stays registered even if minting the host token fails
    room = request.app[rooms_key].create(wallet)
    room_id = room["id"]

    token = mint_livekit_token(meeting_room_name(room_id), wallet, {
        "walletAddress": wallet,
        "isHost": True,
        "callType": "group",
    })

    logger.info("✅ Room created: %s by %s", room_id, wallet)

    return web.json_response({
        "success": True,
        "roomId": room_id,
        "token": token,
        "livekitUrl": livekit_url(),
    })


async def api_join_room(request: web.Request) -> web.Response:
    """Join an existing group meeting"""
    data = await read_json(request)
    room_id = data.get("roomId")
    wallet = data.get("walletAddress")

    if not room_id or not wallet:
        raise ValidationError("Room ID and wallet address required")

    room = request.app[rooms_key].join(room_id, wallet)

    token = mint_livekit_token(meeting_room_name(room_id), wallet, {
        "walletAddress": wallet,
        "isHost": False,
        "callType": "group",
    })

    logger.info("👥 User joined room: %s %s", room_id, wallet)

    return web.json_response({
        "success": True,
        "token": token,
        "livekitUrl": livekit_url(),
        "room": {
            "id": room["id"],
            "host": room["host"],
            "participantCount": len(room["participants"]),
        },
    })


async def api_leave_room(request: web.Request) -> web.Response:
    """Leave a group meeting. Always succeeds."""
    data = await read_json(request)
    room_id = data.get("roomId")
    wallet = data.get("walletAddress")

    if request.app[rooms_key].leave(room_id, wallet):
        logger.info("🗑️ Room deleted: %s", room_id)

    logger.info("👋 User left room: %s %s", room_id, wallet)

    return web.json_response({"success": True})


async def api_room_info(request: web.Request) -> web.Response:
    room_id = request.match_info["room_id"]
    room = request.app[rooms_key].get(room_id)

    if room is None:
        raise NotFoundError("Room not found")

    return web.json_response({
        "success": True,
        "room": {
            "id": room["id"],
            "host": room["host"],
            "participantCount": len(room["participants"]),
            "created": room["created"],
        },
    })

# ============================================================
# WALLET-TO-WALLET CALLS
# ============================================================

async def _call_token(request: web.Request, is_caller: bool) -> web.Response:
    data = await read_json(request)
    caller = data.get("callerWallet")
    callee = data.get("calleeWallet")

    if not caller or not callee:
        raise ValidationError("Both wallet addresses required")

    room_name = p2p_room_name(caller, callee)
    wallet = caller if is_caller else callee

    token = mint_livekit_token(room_name, wallet, {
        "walletAddress": wallet,
        "isCaller": is_caller,
        "callType": "p2p",
    })

    if is_caller:
        logger.info("📞 Call started: %s → %s", caller, callee)
    else:
        logger.info("✅ Call answered: %s ← %s", callee, caller)

    return web.json_response({
        "success": True,
        "token": token,
        "roomName": room_name,
        "livekitUrl": livekit_url(),
    })


async def api_start_call(request: web.Request) -> web.Response:
    """Issue the caller's token for a wallet-to-wallet call"""
    return await _call_token(request, is_caller=True)


async def api_answer_call(request: web.Request) -> web.Response:
    """Issue the callee's token; the room name matches the caller's"""
    return await _call_token(request, is_caller=False)
