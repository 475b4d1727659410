"""HTTP API - FastAPI routers, schemas and error handlers."""
