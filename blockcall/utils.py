"""
Utility functions for room code and room name generation
"""
import random
import string

ROOM_ID_ALPHABET = string.ascii_uppercase + string.digits
P2P_PREFIX = "call"
MEETING_PREFIX = "meeting"


def generate_room_id(length: int = 10) -> str:
    """Generate a random group room code (uppercase base-36)"""
    return "".join(random.choice(ROOM_ID_ALPHABET) for _ in range(length))


def p2p_room_name(wallet1: str, wallet2: str) -> str:
    """
    Derive the shared room name for a wallet-to-wallet call.

    Both wallets are lower-cased and sorted, so caller and callee arrive at
    the same name without talking to each other first. Only the first 8
    characters of each wallet are kept.
    """
    first, second = sorted([wallet1.lower(), wallet2.lower()])
    return f"{P2P_PREFIX}-{first[:8]}-{second[:8]}"


def meeting_room_name(room_id: str) -> str:
    return f"{MEETING_PREFIX}-{room_id}"
