"""Pydantic models for request validation.

This module contains data models used for:
- API request validation
- OpenAPI schema generation
"""

from app.models.hello import InputParams

__all__ = ["InputParams"]
