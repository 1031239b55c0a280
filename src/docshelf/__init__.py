"""DocShelf - a local notes corpus server."""

__version__ = "0.1.0"
