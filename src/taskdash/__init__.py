"""taskdash - interactive console task dashboard."""

__version__ = "0.1.0"
