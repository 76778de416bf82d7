"""FastAPI HTTP API."""
