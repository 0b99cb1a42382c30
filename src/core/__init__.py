"""Configuration and authentication."""
