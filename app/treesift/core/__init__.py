"""Core infrastructure: XDG paths and CLI theme."""
