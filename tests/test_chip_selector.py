import pytest

from sidez.chip_selector import (
    DEFAULT_PROFILES,
    ChipSelector,
    ChipSettings,
    CombinedWaveformStrength,
)


@pytest.fixture
def selector():
    return ChipSelector()


def test_outside_musicians_folder_gets_defaults(selector):
    name, settings = selector.get_chip_profile("/hvsc/GAMES/A-F/", "Commando.sid")
    assert name == ""
    assert settings == ChipSettings()


def test_default_settings_values():
    settings = ChipSettings()
    assert settings.flt_cox == 0.5
    assert settings.flt0_dac == 0.4
    assert settings.flt_gain == 0.92
    assert settings.digi == 1.0
    assert settings.cws_level is CombinedWaveformStrength.STRONG
    assert settings.cws_threshold == 0.8


def test_unknown_author_gets_defaults(selector):
    name, settings = selector.get_chip_profile("/hvsc/MUSICIANS/X/Nobody/", "a.sid")
    assert (name, settings) == ("", ChipSettings())


def test_author_by_folder(selector):
    name, settings = selector.get_chip_profile(
        "/hvsc/MUSICIANS/H/Hubbard_Rob/", "Commando.sid"
    )
    assert name == "Rob Hubbard"
    assert settings == DEFAULT_PROFILES["Rob Hubbard"]
    assert settings.flt_cox == 0.35


def test_backslashes_are_normalised(selector):
    name, _ = selector.get_chip_profile(
        "C:\\hvsc\\MUSICIANS\\G\\Galway_Martin\\", "Wizball.sid"
    )
    assert name == "Martin Galway"


def test_longest_folder_wins(selector):
    mitch, _ = selector.get_chip_profile(
        "/hvsc/MUSICIANS/M/Mitch_and_Dane/Mitch/", "x.sid"
    )
    duo, duo_settings = selector.get_chip_profile(
        "/hvsc/MUSICIANS/M/Mitch_and_Dane/", "x.sid"
    )
    assert mitch == "Michael Nilsson-Vonderburgh (Mitch)"
    assert duo == "Mitch & Dane"
    assert duo_settings.cws_threshold == 0.5


def test_similar_prefix_not_confused(selector):
    name, settings = selector.get_chip_profile(
        "/hvsc/MUSICIANS/T/Tel_Jeroen_2/", "Outrun_Europa.sid"
    )
    assert name == "Jeroen Tel (Outrun Europa)"
    assert settings.digi == 0.55


def test_exception_by_filename(selector):
    name, settings = selector.get_chip_profile(
        "/hvsc/MUSICIANS/D/Daglish_Ben/", "Last_Ninja.sid"
    )
    assert name == "Anthony Lees"
    assert settings == DEFAULT_PROFILES["Anthony Lees"]


def test_non_exception_file_keeps_author(selector):
    name, _ = selector.get_chip_profile("/hvsc/MUSICIANS/D/Daglish_Ben/", "Trap.sid")
    assert name == "Ben Daglish"


def test_exception_needs_extension(selector):
    with pytest.raises(ValueError):
        selector.get_chip_profile("/hvsc/MUSICIANS/D/Daglish_Ben/", "ab")


def test_custom_profiles():
    custom = {
        "Someone": ChipSettings(folder="/MUSICIANS/S/Someone/", flt_cox=0.9),
        "Guest": ChipSettings(folder="/MUSICIANS/G/Guest/"),
    }
    selector = ChipSelector(custom)
    assert selector.get_chip_profile("/x/MUSICIANS/S/Someone/", "t.sid") == (
        "Someone",
        custom["Someone"],
    )
    assert selector.get_chip_profile("/x/MUSICIANS/H/Hubbard_Rob/", "t.sid")[0] == ""


def test_set_profiles_replaces_table(selector):
    selector.set_profiles(
        {
            "Host": ChipSettings(
                folder="/MUSICIANS/H/Host/", exceptions={"Tune": "Visitor"}
            ),
            "Visitor": ChipSettings(folder="/MUSICIANS/V/Visitor/", digi=0.5),
        }
    )
    name, settings = selector.get_chip_profile("/a/MUSICIANS/H/Host/", "Tune.sid")
    assert name == "Visitor"
    assert settings.digi == 0.5
    assert selector.get_chip_profile("/a/MUSICIANS/H/Hubbard_Rob/", "t.sid")[0] == ""


def test_every_default_exception_points_to_a_profile():
    for settings in DEFAULT_PROFILES.values():
        for target in settings.exceptions.values():
            assert target in DEFAULT_PROFILES


def test_every_default_folder_is_under_root():
    for settings in DEFAULT_PROFILES.values():
        assert settings.folder.startswith("/MUSICIANS/")
        assert settings.folder.endswith("/")