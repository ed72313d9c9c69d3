"""Icon dataset sources and the remote dataset fetcher."""
