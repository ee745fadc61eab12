"""Configuration API module."""
