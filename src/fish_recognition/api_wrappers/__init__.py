"""Low-level wrappers around the provider's HTTP APIs."""
