"""Per-author chip profiles chosen from a tune's collection folder."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum


class CombinedWaveformStrength(IntEnum):
    """Strength of combined waveforms on the emulated chip."""

    WEAK = 0
    AVERAGE = 1
    STRONG = 2


@dataclass(frozen=True)
class ChipSettings:
    """Filter, digi and waveform adjustments for one author's chip."""

    folder: str = ""
    flt_cox: float = 0.5
    flt0_dac: float = 0.4
    flt_gain: float = 0.92
    digi: float = 1.0
    cws_level: CombinedWaveformStrength = CombinedWaveformStrength.STRONG
    cws_threshold: float = 0.8
    exceptions: Mapping[str, str] = field(default_factory=dict)


def _p(folder: str, **kwargs) -> ChipSettings:
    return ChipSettings(folder=folder, **kwargs)


DEFAULT_PROFILES: dict[str, ChipSettings] = {
    "20th Century Composers": _p("/MUSICIANS/0-9/20CC/", flt_cox=0.4),
    "Anthony Lees": _p("/MUSICIANS/L/Lees_Anthony/", flt_cox=1.3),
    "Antony Crowther (Ratt)": _p("/MUSICIANS/C/Crowther_Antony/", flt_cox=1.1),
    "Barry Leitch (The Jackal)": _p("/MUSICIANS/L/Leitch_Barry/", flt_cox=0.3),
    "Ben Daglish": _p(
        "/MUSICIANS/D/Daglish_Ben/",
        flt_cox=0.6,
        exceptions={"Last_Ninja": "Anthony Lees"},
    ),
    "Carsten Berggreen (Scarzix)": _p("/MUSICIANS/S/Scarzix/", flt_cox=0.7),
    "Charles Deenen": _p("/MUSICIANS/D/Deenen_Charles/", flt_cox=0.2),
    "Chris Hülsbeck": _p("/MUSICIANS/H/Huelsbeck_Chris/", flt_cox=0.9, flt0_dac=0.2),
    "Clever Music": _p("/MUSICIANS/C/Clever_Music/", flt_cox=0.25),
    "David Dunn": _p("/MUSICIANS/D/Dunn_David/", flt_cox=0.015, flt0_dac=1.5, digi=0.8),
    "David Whittaker": _p("/MUSICIANS/W/Whittaker_David/", flt_cox=0.05, flt0_dac=1.2),
    "Edwin van Santen": _p("/MUSICIANS/0-9/20CC/van_Santen_Edwin/", flt_cox=0.3),
    "Falco Paul": _p("/MUSICIANS/0-9/20CC/Paul_Falco/", flt_cox=0.15),
    "Figge Wasberger (Fegolhuzz)": _p("/MUSICIANS/F/Fegolhuzz/", flt_cox=0.25),
    "Fred Gray": _p("/MUSICIANS/G/Gray_Fred/", flt_cox=0.8, flt0_dac=1.5, flt_gain=1.5),
    "Geir Tjelta": _p("/MUSICIANS/T/Tjelta_Geir/", flt_cox=0.5),
    "Georg Feil": _p("/MUSICIANS/F/Feil_Georg/", flt_cox=0.2),
    "Glenn Gallefoos": _p(
        "/MUSICIANS/B/Blues_Muz/Gallefoss_Glenn/", flt_cox=1.3, flt0_dac=0.5, flt_gain=0.85
    ),
    "Jason C. Brooke": _p("/MUSICIANS/B/Brooke_Jason/", flt_cox=0.1, flt0_dac=0.8),
    "Jason Page": _p("/MUSICIANS/P/Page_Jason/", flt_cox=0.35),
    "Jeroen Tel": _p(
        "/MUSICIANS/T/Tel_Jeroen/",
        flt_cox=0.35,
        flt_gain=0.85,
        exceptions={"Outrun_Europa": "Jeroen Tel (Outrun Europa)"},
    ),
    "Jeroen Tel (Outrun Europa)": _p(
        "/MUSICIANS/T/Tel_Jeroen_2/", flt_cox=0.35, flt_gain=0.85, digi=0.55
    ),
    "Johannes Bjerregaard": _p(
        "/MUSICIANS/B/Bjerregaard_Johannes/",
        flt_cox=0.35,
        exceptions={"Stormlord": "Jeroen Tel"},
    ),
    "Jonathan Dunn": _p("/MUSICIANS/D/Dunn_Jonathan/", flt_cox=0.4, flt_gain=0.8),
    "Jori Olkkonen (Yip)": _p("/MUSICIANS/Y/Yip/", flt_cox=0.35, flt0_dac=0.6),
    "Jouni Ikonen (Mixer)": _p("/MUSICIANS/M/Mixer/", flt_cox=0.5, flt_gain=0.85),
    "Kim Christensen (Future Freak)": _p("/MUSICIANS/F/Future_Freak/", flt_cox=0.35),
    "Laxity": _p("/MUSICIANS/L/Laxity/", flt_cox=0.3),
    "Linus Åkesson (lft)": _p("/MUSICIANS/L/Lft/", flt_cox=0.3),
    "Mark Cooksey": _p("/MUSICIANS/C/Cooksey_Mark/", flt_cox=0.4, flt0_dac=0.7),
    "Mark Wilson": _p("/MUSICIANS/W/Wilson_Mark/", flt_cox=0.2),
    "Markus Klein (LMan)": _p("/MUSICIANS/L/LMan/", flt_cox=0.4, flt_gain=0.7),
    "Markus Müller": _p("/MUSICIANS/M/Mueller_Markus/", flt_cox=0.5, flt0_dac=0.3),
    "Martin Galway": _p("/MUSICIANS/G/Galway_Martin/", flt_cox=0.65, flt0_dac=0.6),
    "Martin Walker": _p("/MUSICIANS/W/Walker_Martin/", flt_cox=0.15),
    "Matt Gray": _p("/MUSICIANS/G/Gray_Matt/", flt_cox=0.3, flt_gain=1.0, digi=0.8),
    "Michael Hendriks": _p(
        "/MUSICIANS/F/FAME/Hendriks_Michael/", flt_cox=0.35, flt0_dac=0.7, digi=0.3
    ),
    "Michael Nilsson-Vonderburgh (Mitch)": _p(
        "/MUSICIANS/M/Mitch_and_Dane/Mitch/", flt_cox=0.3, flt0_dac=0.2
    ),
    "Mitch & Dane": _p(
        "/MUSICIANS/M/Mitch_and_Dane/", flt_cox=0.85, flt0_dac=0.3, cws_threshold=0.5
    ),
    "Neil Brennan": _p("/MUSICIANS/B/Brennan_Neil/", flt_cox=0.25),
    "Nigel Grieve": _p("/MUSICIANS/G/Grieve_Nigel/", flt_cox=1.0, flt_gain=1.5),
    "Paul Hannay (Feekzoid)": _p("/MUSICIANS/F/Feekzoid/"),
    "Peter Clarke": _p("/MUSICIANS/C/Clarke_Peter/", flt_cox=0.2),
    "Pex Tufvesson": _p("/MUSICIANS/M/Mahoney/", flt_cox=0.35),
    "Ramiro Vaca": _p("/MUSICIANS/V/Vaca_Ramiro/", flt_cox=0.7),
    "Reyn Ouwehand": _p("/MUSICIANS/O/Ouwehand_Reyn/", flt_cox=0.8, flt0_dac=0.2),
    "Richard Joseph": _p("/MUSICIANS/J/Joseph_Richard/", flt_cox=0.3),
    "Rob Hubbard": _p(
        "/MUSICIANS/H/Hubbard_Rob/", flt_cox=0.35, flt0_dac=0.6, flt_gain=0.8, digi=0.9
    ),
    "Russell Lieblich": _p("/MUSICIANS/L/Lieblich_Russell/", flt_cox=0.25, flt0_dac=0.7),
    "Shaun Southern": _p("/MUSICIANS/S/Southern_Shaun/", flt_cox=0.1, flt0_dac=0.9),
    "Stellan Andersson (Dane)": _p(
        "/MUSICIANS/M/Mitch_and_Dane/Dane/", flt_cox=0.85, flt0_dac=0.3
    ),
    "Steve Barrett": _p("/MUSICIANS/B/Barrett_Steve/", digi=0.55),
    "Steve Turner": _p(
        "/MUSICIANS/T/Turner_Steve/",
        flt_cox=0.6,
        exceptions={"Bushido": "Jason Page"},
    ),
    "Thomas Mogensen (DRAX)": _p("/MUSICIANS/D/DRAX/", flt_cox=0.3),
    "Tim Follin": _p("/MUSICIANS/F/Follin_Tim/", flt_cox=0.7),
    "Geoff Follin": _p("/MUSICIANS/F/Follin_Geoff/", flt_cox=0.7),
    "Zoci-Joe": _p("/MUSICIANS/Z/Zoci-Joe/", flt_cox=0.3),
    "Matthew Cannon": _p("/MUSICIANS/C/Cannon_Matthew/", flt_cox=0.4, flt_gain=0.8),
    "Keith Tinman": _p("/MUSICIANS/T/Tinman_Keith/", flt_cox=0.4, flt_gain=0.7),
    "Gerard Gourley": _p(
        "/MUSICIANS/S/Sonic_Graffiti/Gourley_Gerard/",
        flt_cox=0.1,
        flt0_dac=1.5,
        flt_gain=0.8,
    ),
    "Frederik Segerfalk": _p("/MUSICIANS/M/Moppe/", flt_cox=0.9),
    "David Sturgeon (Abynx)": _p(
        "/MUSICIANS/A/Abynx/", flt_cox=0.1, flt0_dac=0.3, flt_gain=0.8
    ),
}

_ROOT = "/MUSICIANS/"


class ChipSelector:
    """Chooses a chip profile from the folder a tune is stored in."""

    def __init__(self, profiles: Mapping[str, ChipSettings] | None = None) -> None:
        self._profiles: dict[str, ChipSettings] = dict(
            DEFAULT_PROFILES if profiles is None else profiles
        )

    def set_profiles(self, profiles: Mapping[str, ChipSettings]) -> None:
        """Replace the profile table."""
        self._profiles = dict(profiles)

    def get_chip_profile(self, path: str, filename: str) -> tuple[str, ChipSettings]:
        """Return the profile name and settings for a tune.

        ``path`` is the tune's directory and ``filename`` its file name with
        a three-letter extension. Tunes outside a MUSICIANS folder, or with
        no matching author, get an empty name and default settings.
        """
        normalized = path.replace("\\", "/")
        pos = normalized.rfind(_ROOT)
        if pos < 0:
            return "", ChipSettings()
        normalized = normalized[pos:]

        best_folder = ""
        best_name = ""
        for name, settings in self._profiles.items():
            if not normalized.startswith(settings.folder):
                continue
            if len(settings.folder) < len(best_folder):
                continue
            best_folder = settings.folder
            best_name = name

        if not best_name:
            return "", ChipSettings()

        settings = self._profiles[best_name]
        if not settings.exceptions:
            return best_name, settings

        if len(filename) < 4:
            raise ValueError(f"file name too short to carry an extension: {filename!r}")
        stem = filename[:-4]

        replacement = settings.exceptions.get(stem)
        if replacement is not None:
            return replacement, self._profiles[replacement]

        return best_name, settings