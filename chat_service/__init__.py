"""Chat service backend: channels, messages, user profiles and bearer sessions."""

__version__ = "1.0.0"
