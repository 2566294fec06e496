"""Configuration, workflow and command-line entry point."""
