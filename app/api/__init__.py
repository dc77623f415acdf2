"""
REST API layer: FastAPI application, routers, schemas and dependencies.
"""
