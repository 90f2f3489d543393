import pytest

from sidez.sidid import SidId

CONFIG = """\
GoatTracker_V2.x
A9 00 8D ?? D4 END
Rob_Hubbard
BD AND 60 END
Rob_Hubbard_Alt
EE ?? ?? END
"""


@pytest.fixture
def sidid():
    ident = SidId()
    assert ident.load_config_text(CONFIG) is True
    return ident


def test_nothing_loaded_finds_nothing():
    assert SidId().find_player_routines(b"\xa9\x00\x8d\x18\xd4") == []


def test_empty_data_finds_nothing(sidid):
    assert sidid.find_player_routines(b"") == []


def test_exact_signature_with_wildcard(sidid):
    data = bytes([0x01, 0x02, 0xA9, 0x00, 0x8D, 0x18, 0xD4, 0x03])
    assert sidid.find_player_routines(data) == ["GoatTracker_V2.x"]


def test_wildcard_accepts_any_byte(sidid):
    first = sidid.find_player_routines(bytes([0xA9, 0x00, 0x8D, 0x00, 0xD4]))
    second = sidid.find_player_routines(bytes([0xA9, 0x00, 0x8D, 0xFF, 0xD4]))
    assert first == second == ["GoatTracker_V2.x"]


def test_mismatch_is_not_found(sidid):
    data = bytes([0xA9, 0x00, 0x8E, 0x18, 0xD4])
    assert sidid.find_player_routines(data) == []


def test_and_allows_gap(sidid):
    data = bytes([0x00, 0xBD, 0x11, 0x22, 0x33, 0x60])
    assert sidid.find_player_routines(data) == ["Rob_Hubbard"]


def test_and_requires_second_part(sidid):
    data = bytes([0x00, 0xBD, 0x11, 0x22, 0x33])
    assert sidid.find_player_routines(data) == []


def test_restart_after_partial_match(sidid):
    data = bytes([0xA9, 0xA9, 0x00, 0x8D, 0x01, 0xD4])
    assert sidid.find_player_routines(data) == ["GoatTracker_V2.x"]


def test_results_follow_config_order(sidid):
    data = bytes([0xBD, 0x60, 0xA9, 0x00, 0x8D, 0x00, 0xD4])
    assert sidid.find_player_routines(data) == ["GoatTracker_V2.x", "Rob_Hubbard"]


def test_name_listed_once_for_several_signatures():
    ident = SidId()
    ident.load_config_text("Player\n01 02\n03 04\n")
    assert ident.find_player_routines(bytes([1, 2, 3, 4])) == ["Player"]


def test_case_insensitive_keywords():
    ident = SidId()
    ident.load_config_text("Player\n01 and 02 end\n")
    assert ident.find_player_routines(bytes([1, 9, 9, 2])) == ["Player"]


def test_empty_text_keeps_previous(sidid):
    assert sidid.load_config_text("") is False
    assert sidid.find_player_routines(bytes([0xBD, 0x60])) == ["Rob_Hubbard"]


def test_names_without_signatures_load_nothing():
    ident = SidId()
    assert ident.load_config_text("OnlyName\nAnotherName\n") is False
    assert ident.find_player_routines(b"OnlyName") == []


def test_reload_replaces_signatures(sidid):
    assert sidid.load_config_text("Other\n10 20\n") is True
    assert sidid.find_player_routines(bytes([0xBD, 0x60])) == []
    assert sidid.find_player_routines(bytes([0x10, 0x20])) == ["Other"]


def test_load_config_from_file(tmp_path):
    path = tmp_path / "sidid.cfg"
    path.write_text(CONFIG)
    ident = SidId()
    assert ident.load_config(path) is True
    assert ident.find_player_routines(bytes([0xBD, 0x60])) == ["Rob_Hubbard"]


def test_load_config_missing_file(tmp_path):
    with pytest.raises(OSError):
        SidId().load_config(tmp_path / "missing.cfg")