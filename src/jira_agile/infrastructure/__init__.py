"""Infrastructure layer: HTTP transport and request/response handling."""
