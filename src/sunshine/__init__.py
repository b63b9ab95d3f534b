"""Sunshine Workshop registration app: intake form, PIN-gated admin panel, JSON/CSV export."""

__version__ = "0.1.0"
