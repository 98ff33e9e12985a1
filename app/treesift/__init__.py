"""treesift - find files and directories with composable filters."""

__version__ = "0.1.0"
