"""finditem - recursive filesystem search with composable filters."""

__version__ = "0.1.0"
