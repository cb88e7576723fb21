"""Todo FastAPI application."""
