import re

from blockcall.utils import generate_room_id, meeting_room_name, p2p_room_name


def test_room_id_is_ten_uppercase_alphanumerics():
    for _ in range(50):
        assert re.fullmatch(r"[A-Z0-9]{10}", generate_room_id())


def test_room_ids_differ():
    ids = {generate_room_id() for _ in range(200)}
    assert len(ids) == 200


def test_p2p_name_is_order_independent():
    assert p2p_room_name("0xAlice1234", "0xBob5678") == p2p_room_name("0xBob5678", "0xAlice1234")


def test_p2p_name_format():
    assert p2p_room_name("0xBob5678", "0xAlice1234") == "call-0xalice1-0xbob567"


def test_p2p_name_ignores_case():
    assert p2p_room_name("0xABCDEF99", "0x12345678") == p2p_room_name("0xabcdef99", "0x12345678")


def test_p2p_name_self_call():
    assert p2p_room_name("0xAAA1", "0xAAA1") == "call-0xaaa1-0xaaa1"


def test_p2p_name_collides_on_shared_prefix():
    # only the first 8 characters of each wallet are used
    assert p2p_room_name("0x123456aa", "0xffff") == p2p_room_name("0x123456bb", "0xffff")


def test_meeting_room_name():
    assert meeting_room_name("ABC123XYZ0") == "meeting-ABC123XYZ0"
