"""Core infrastructure: configuration, logging, errors and extensions."""
