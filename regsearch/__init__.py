"""regsearch — search a container image registry from the command line."""

__version__ = "0.1.0"
