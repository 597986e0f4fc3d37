"""Core: configuration, domain, errors and services."""
