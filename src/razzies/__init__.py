"""Golden Raspberry Awards catalogue and producer award-interval service."""

__version__ = "0.1.0"
