"""Infrastructure: HTTP transport, API clients and logging."""
