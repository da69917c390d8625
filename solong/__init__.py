"""A tile-based coin-collecting game with map validation, optional enemies and a pygame window."""

__version__ = "1.0.0"
__all__ = ["app", "enemies", "game", "mapfile", "render"]