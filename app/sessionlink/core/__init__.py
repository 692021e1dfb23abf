"""Core application infrastructure: paths, configuration and theme."""
