"""Request payload for the hello endpoint."""

from pydantic import BaseModel, ConfigDict, Field


class InputParams(BaseModel):
    """Name and age of the person to greet."""

    # "30", 30.5 and true are not accepted as an age
    model_config = ConfigDict(
        strict=True,
        json_schema_extra={"example": {"name": "John", "age": 30}},
    )

    name: str = Field(..., description="Name of the person to greet")
    age: int = Field(..., ge=0, le=255, description="Age, from 0 to 255")
