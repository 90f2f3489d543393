"""Descriptive information about a loaded tune."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SidTuneInfo:
    """Tune metadata; all text is stored as Unicode strings."""

    filename: str = ""

    title: str = ""
    author: str = ""
    released: str = ""

    # "6581" or "8580", one entry per chip
    model: list[str] = field(default_factory=list)

    # "PAL" or "NTSC"
    clock: str = ""

    # e.g. "CIA (PAL)", "50 Hz VBI (PAL)"
    speed: str = ""

    # e.g. "Martin_Galway_Digi", "Rob_Hubbard"
    playroutine_ids: list[str] = field(default_factory=list)

    # e.g. "Martin Galway", "Rob Hubbard"
    chip_profile: str = ""

    current_song: int = 0
    num_songs: int = 0
    start_song: int = 0
    md5: str = ""

    c64_load_address: int = 0
    c64_init_address: int = 0
    c64_play_address: int = 0
    c64_data_length: int = 0