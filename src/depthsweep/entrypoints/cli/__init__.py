"""Command-line entrypoint for DEPTHSWEEP."""
