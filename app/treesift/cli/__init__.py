"""Command-line interface for treesift."""
