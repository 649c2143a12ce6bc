"""Self-hosted Swagger UI assets.

Static files come from the ``swagger-ui-bundle`` distribution. The index
page is generated so that it points at this service's OpenAPI document and
loads its scripts and styles from the explorer mount instead of a CDN.
"""

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path

from fastapi.openapi.docs import get_swagger_ui_html
from swagger_ui_bundle import swagger_ui_path

logger = logging.getLogger(__name__)

INDEX_NAMES = ("", "index.html")


@dataclass(frozen=True)
class Asset:
    """A resolved explorer file."""

    content: bytes
    content_type: str


class AssetResolutionError(Exception):
    """Raised when an existing asset cannot be read."""


class SwaggerAssets:
    """Resolves explorer sub-paths to asset bytes.

    Args:
        openapi_url: URL of the OpenAPI document the explorer renders.
        mount_path: URL prefix the assets are served under.
        title: Page title of the explorer.
        root: Directory holding the Swagger UI distribution files.
    """

    def __init__(
        self,
        openapi_url: str,
        mount_path: str,
        title: str,
        root: str | Path = swagger_ui_path,
    ):
        self.openapi_url = openapi_url
        self.mount_path = mount_path.rstrip("/")
        self.root = Path(root).resolve()
        self._index = Asset(
            content=self._render_index(title),
            content_type="text/html; charset=utf-8",
        )

    def _render_index(self, title: str) -> bytes:
        page = get_swagger_ui_html(
            openapi_url=self.openapi_url,
            title=title,
            swagger_js_url=f"{self.mount_path}/swagger-ui-bundle.js",
            swagger_css_url=f"{self.mount_path}/swagger-ui.css",
            swagger_favicon_url=f"{self.mount_path}/favicon-32x32.png",
            oauth2_redirect_url=f"{self.mount_path}/oauth2-redirect.html",
        )
        return bytes(page.body)

    def resolve(self, tail: str) -> Asset | None:
        """Return the asset for ``tail``, or ``None`` when there is no such asset.

        Raises:
            AssetResolutionError: If the asset exists but reading it fails.
        """
        if tail in INDEX_NAMES:
            return self._index

        # A name the filesystem cannot represent (NUL byte, over-long) is no asset.
        try:
            candidate = (self.root / tail).resolve()
            if not candidate.is_relative_to(self.root) or not candidate.is_file():
                return None
        except (ValueError, OSError):
            logger.debug("Rejected swagger asset path %r", tail)
            return None

        try:
            content = candidate.read_bytes()
        except OSError as exc:
            logger.exception("Failed to read swagger asset %s", tail)
            raise AssetResolutionError(f"Failed to read asset '{tail}': {exc}") from exc

        content_type, _ = mimetypes.guess_type(candidate.name)
        return Asset(content=content, content_type=content_type or "application/octet-stream")
