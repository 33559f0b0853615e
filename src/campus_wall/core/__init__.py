"""Core configuration, errors and shared domain types."""
