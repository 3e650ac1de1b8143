"""Core utilities: exceptions and version information."""
