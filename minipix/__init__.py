"""String, memory and list helpers, line reading, colours, pixel images and XPM loading."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "colors",
    "image",
    "lines",
    "linked",
    "memory",
    "output",
    "text",
    "xpm",
]