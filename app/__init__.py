"""Hello OpenAPI Service Application Package.

This package contains the core application components:
- models: Pydantic models for request validation
- routers: API route handlers
- services: Greeting logic and API documentation publishing
"""

__version__ = "0.1.0"
