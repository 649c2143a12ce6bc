"""Hello endpoint: greets a person by name and age."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.models.hello import InputParams
from app.services.greeting import format_greeting

router = APIRouter(tags=["JsonData - Hello handlers"])


@router.post(
    "/hello",
    response_class=PlainTextResponse,
    summary="Say hello",
    responses={
        200: {
            "description": "Hello response for given value",
            "content": {"text/plain": {"example": "Hello John, age : 30!"}},
        },
        404: {"description": "resource missing"},
        "5XX": {"description": "server error"},
        500: {"description": "internal server error"},
        418: {"description": "happy easter"},
    },
    openapi_extra={
        "requestBody": {"description": "Say hello by value"},
        "security": [
            {},
            {"my_auth": ["read:items", "edit:items"]},
            {"token_jwt": []},
        ],
    },
)
async def hello(params: InputParams) -> str:
    """Greet the person described in the request body."""
    return format_greeting(params)
