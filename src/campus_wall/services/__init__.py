# src/campus_wall/services/__init__.py
"""Service layer for the wall's engagement and moderation rules."""
