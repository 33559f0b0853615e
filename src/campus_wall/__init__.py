"""Engagement and moderation core for the anonymous campus wall."""

__version__ = "0.1.0"
