"""Core layer: domain models and protocol interfaces."""
