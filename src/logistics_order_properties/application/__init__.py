"""Application layer: project configuration and command-line interface."""
