"""
In-memory room registry for group meetings.
P2P calls never touch it: their room name is derived from the two wallets.
"""
import time
from typing import Dict, Optional

from .errors import NotFoundError
from .utils import generate_room_id


class RoomRegistry:
    """
    Active group rooms keyed by room code.

    Room: {id, host, participants:list, created:int (epoch ms)}

    Mutations contain no await, so each one is atomic on the event loop.
    """

    def __init__(self):
        self._rooms: Dict[str, dict] = {}

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, room_id) -> bool:
        return self._lookup(room_id) is not None

    def _lookup(self, room_id) -> Optional[dict]:
        # ids come straight from JSON; unhashable ones never match a room
        try:
            return self._rooms.get(room_id)
        except TypeError:
            return None

    def create(self, host: str) -> dict:
        """Register a new room with the host as its only participant"""
        room_id = generate_room_id()
        room = {
            "id": room_id,
            "host": host,
            "participants": [host],
            "created": int(time.time() * 1000),
        }
        self._rooms[room_id] = room
        return room

    def get(self, room_id: str) -> Optional[dict]:
        return self._lookup(room_id)

    def join(self, room_id: str, participant: str) -> dict:
        """Add a participant (once) and return the updated room"""
        room = self._lookup(room_id)
        if room is None:
            raise NotFoundError("Room not found")

        if participant not in room["participants"]:
            room["participants"].append(participant)
        return room

    def leave(self, room_id: str, participant: str) -> bool:
        """
        Remove a participant. Unknown rooms and participants are ignored.
        Returns True when the room was deleted because it became empty.
        """
        room = self._lookup(room_id)
        if room is None:
            return False

        room["participants"] = [p for p in room["participants"] if p != participant]
        if not room["participants"]:
            del self._rooms[room_id]
            return True
        return False
