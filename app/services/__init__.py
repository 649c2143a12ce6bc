"""Business logic services.

This module contains:
- Greeting formatting
- OpenAPI description construction and verification
- Swagger UI asset resolution
"""
