"""A tile-based arcade game: map loading and checking, game rules, a pygame window, and small text helpers."""

__version__ = "0.1.0"