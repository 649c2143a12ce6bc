"""Greeting generation."""

from app.models.hello import InputParams


def format_greeting(params: InputParams) -> str:
    """Build the greeting text from already validated input."""
    return f"Hello {params.name}, age : {params.age}!"
