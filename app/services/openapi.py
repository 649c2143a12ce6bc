"""OpenAPI description document construction.

The document is generated once from the registered routes, extended with
the security schemes the API advertises, then checked against the route
table so a drift between the two is caught at startup rather than by a
client reading stale documentation.

None of the security schemes are enforced; they are documentation only.
"""

import copy
import logging
from typing import Any, Sequence

from fastapi import APIRouter, FastAPI
from fastapi.openapi.utils import get_openapi
from fastapi.routing import APIRoute

logger = logging.getLogger(__name__)

ITEM_SCOPES = ["read:items", "edit:items"]

SECURITY_SCHEMES: dict[str, dict[str, Any]] = {
    "my_auth": {
        "type": "apiKey",
        "in": "header",
        "name": "x-api-key",
    },
    "token_jwt": {
        "type": "http",
        "scheme": "bearer",
        "bearerFormat": "JWT",
    },
    "api_oauth2_flow": {
        "type": "oauth2",
        "flows": {
            "password": {
                "tokenUrl": "https://localhost/oauth/token",
                "refreshUrl": "https://localhost/refresh/token",
                "scopes": {
                    "edit:items": "edit my items",
                    "read:items": "read my items",
                },
            },
            "authorizationCode": {
                "authorizationUrl": "https://accounts.google.com/o/oauth2/auth",
                "tokenUrl": "https://oauth2.googleapis.com/token",
                "scopes": {
                    "https://www.googleapis.com/auth/cloud-platform": "Cloud platform access",
                    "https://www.googleapis.com/auth/userinfo.email": "User email access",
                    "https://www.googleapis.com/auth/userinfo.profile": "User profile access",
                    "openid": "OpenID, required to generate an openId Jwt token",
                },
            },
        },
    },
}

# An empty requirement marks anonymous access as allowed.
GLOBAL_SECURITY: list[dict[str, list[str]]] = [
    {},
    {"my_auth": ITEM_SCOPES},
    {"api_oauth2_flow": ["edit:items", "read:items"]},
]


class ApiDescriptionError(RuntimeError):
    """Raised when the description document disagrees with the route table."""


def build_api_description(
    app: FastAPI,
    routers: Sequence[APIRouter],
    *,
    title: str,
    version: str,
    description: str | None = None,
) -> dict[str, Any]:
    """Generate the OpenAPI document for every schema-visible route of ``app``.

    ``routers`` are the routers registered on ``app`` (including
    ``app.router`` itself), against which the document is verified.
    """
    document = get_openapi(
        title=title,
        version=version,
        description=description,
        routes=app.routes,
    )

    components = document.setdefault("components", {})
    components["securitySchemes"] = copy.deepcopy(SECURITY_SCHEMES)
    document["security"] = copy.deepcopy(GLOBAL_SECURITY)

    verify_api_description(routers, document)
    logger.debug("Built API description with paths: %s", sorted(document["paths"]))
    return document


def documented_routes(routers: Sequence[APIRouter]) -> set[tuple[str, str]]:
    """Return (path, method) pairs of the routes meant to appear in the document.

    Only routes declared directly on each router are read, so the routers must
    be included without a prefix.
    """
    pairs = set()
    for router in routers:
        for route in router.routes:
            if isinstance(route, APIRoute) and route.include_in_schema:
                for method in route.methods:
                    pairs.add((route.path_format, method.lower()))
    return pairs


def verify_api_description(routers: Sequence[APIRouter], document: dict[str, Any]) -> None:
    """Check that ``document`` describes exactly the routes declared on ``routers``.

    Raises:
        ApiDescriptionError: If a route is missing from the document, the
            document lists an operation with no route behind it, or a
            security requirement names a scheme that is not declared.
    """
    described = {
        (path, method)
        for path, operations in document.get("paths", {}).items()
        for method in operations
    }
    registered = documented_routes(routers)

    if described != registered:
        missing = sorted(registered - described)
        unknown = sorted(described - registered)
        raise ApiDescriptionError(
            f"API description out of sync with routes (missing: {missing}, unknown: {unknown})"
        )

    declared = set(document.get("components", {}).get("securitySchemes", {}))
    requirements = list(document.get("security", []))
    for operations in document["paths"].values():
        for operation in operations.values():
            requirements.extend(operation.get("security", []))

    for requirement in requirements:
        undeclared = set(requirement) - declared
        if undeclared:
            raise ApiDescriptionError(
                f"Security requirement references undeclared schemes: {sorted(undeclared)}"
            )
