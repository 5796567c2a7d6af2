#!/usr/bin/env python3
"""
BlockCall LiveKit Server - Entry Point
Group meetings + wallet-to-wallet calls on top of LiveKit
"""
import logging
import os

from aiohttp import web

from blockcall import livekit_auth
from blockcall.api import (
    VERSION, cors_middleware, error_middleware, rooms_key, health,
    api_create_room, api_join_room, api_leave_room, api_room_info,
    api_start_call, api_answer_call
)
from blockcall.state import RoomRegistry

logger = logging.getLogger("blockcall")


def create_app() -> web.Application:
    """Create and configure the aiohttp application"""
    app = web.Application(middlewares=[cors_middleware, error_middleware])
    app[rooms_key] = RoomRegistry()

    app.router.add_get("/", health)

    # Group meetings
    app.router.add_post("/api/create-room", api_create_room)
    app.router.add_post("/api/join-room", api_join_room)
    app.router.add_post("/api/leave-room", api_leave_room)
    app.router.add_get("/api/room/{room_id}", api_room_info)

    # Wallet-to-wallet calls
    app.router.add_post("/api/start-call", api_start_call)
    app.router.add_post("/api/answer-call", api_answer_call)

    return app


def main():
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    app = create_app()
    port = int(os.environ.get("PORT", 3001))
    host = os.environ.get("SERVER_HOST", "0.0.0.0")

    logger.info("🚀 BlockCall LiveKit Server v%s", VERSION)
    logger.info("✅ Running on %s:%s", host, port)
    if livekit_auth.LIVEKIT_URL:
        logger.info("🌐 LiveKit: %s", livekit_auth.LIVEKIT_URL)
    else:
        logger.warning("🌐 LiveKit: ❌ Not configured (LIVEKIT_URL unset)")
    if not livekit_auth.is_livekit_configured():
        logger.warning("🔑 LIVEKIT_API_KEY / LIVEKIT_API_SECRET missing, token requests will fail")

    web.run_app(app, host=host, port=port, print=None)


if __name__ == "__main__":
    main()
