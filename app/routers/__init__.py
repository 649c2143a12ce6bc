"""API route handlers.

This module contains FastAPI routers for:
- The hello endpoint
- API documentation (OpenAPI document, Swagger UI, root redirect)
"""
