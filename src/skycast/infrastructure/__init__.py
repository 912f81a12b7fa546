"""Infrastructure adapters: HTTP client, cache store and orchestrators."""
