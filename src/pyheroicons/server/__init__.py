"""Demo web server."""
