"""Todo list server (Flask + MongoDB) and client."""

__version__ = "1.0.0"
