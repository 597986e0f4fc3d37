"""Services that orchestrate the domain and the adapters."""
