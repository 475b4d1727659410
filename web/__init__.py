"""Web layer - HTTP API and dashboard."""
