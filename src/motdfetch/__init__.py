"""Terminal system-info dashboard with a daily quote."""

__version__ = "0.1.0"
