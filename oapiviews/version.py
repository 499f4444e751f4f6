"""Version information for oapiviews."""

__version__ = "0.1.0"
