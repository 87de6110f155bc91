"""rocket-tui: command language for a gesture-driven app launcher."""

__version__ = "0.1.0"
