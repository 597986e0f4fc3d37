"""Infrastructure adapters: HTTP transport and content sources."""
