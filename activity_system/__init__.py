"""Programming Activity System: menu-driven console exercises."""

__version__ = "0.1.0"
