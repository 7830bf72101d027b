"""Level layout, monsters, the pack, rings, key decoding and scores for a terminal dungeon crawler."""

__version__ = "0.1.0"

__all__ = [
    "keys",
    "level",
    "misc",
    "monsters",
    "pack",
    "rings",
    "rip",
    "system",
]