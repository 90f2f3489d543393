"""Building blocks of a SID tune player: a 6510 CPU core, player-routine identification, chip profiles and MD5 fingerprints."""

__version__ = "0.1.0"