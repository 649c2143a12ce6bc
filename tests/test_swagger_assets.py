"""
Unit tests for Swagger UI asset resolution.
"""

from pathlib import Path

import pytest

from app.services.swagger_assets import AssetResolutionError, SwaggerAssets


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    root = tmp_path / "dist"
    (root / "css").mkdir(parents=True)
    (root / "css" / "theme.css").write_text("body {}")
    (root / "swagger-ui-bundle.js").write_text("// bundle")
    (tmp_path / "secret.txt").write_text("do not serve")
    return root


@pytest.fixture
def assets(asset_root: Path) -> SwaggerAssets:
    return SwaggerAssets(
        openapi_url="/api-docs/openapi.json",
        mount_path="/swagger/",
        title="Test UI",
        root=asset_root,
    )


class TestSwaggerAssets:
    """Tests for SwaggerAssets.resolve."""

    def test_index_points_at_document(self, assets):
        asset = assets.resolve("index.html")

        assert asset.content_type.startswith("text/html")
        assert b"/api-docs/openapi.json" in asset.content
        assert b"/swagger/swagger-ui.css" in asset.content
        assert b"/swagger/oauth2-redirect.html" in asset.content
        assert b"Test UI" in asset.content

    def test_empty_path_is_index(self, assets):
        assert assets.resolve("") is assets.resolve("index.html")

    def test_nested_file(self, assets):
        asset = assets.resolve("css/theme.css")

        assert asset.content == b"body {}"
        assert asset.content_type == "text/css"

    def test_missing_file(self, assets):
        assert assets.resolve("missing.js") is None

    @pytest.mark.parametrize("tail", ["a" * 300, "abc\x00def"])
    def test_unrepresentable_name(self, assets, tail):
        assert assets.resolve(tail) is None

    def test_directory_is_not_an_asset(self, assets):
        assert assets.resolve("css") is None

    @pytest.mark.parametrize("tail", ["../secret.txt", "css/../../secret.txt"])
    def test_path_outside_root(self, assets, tail):
        assert assets.resolve(tail) is None

    def test_unknown_extension(self, asset_root, assets):
        (asset_root / "blob.zzunknown").write_bytes(b"\x00\x01")

        assert assets.resolve("blob.zzunknown").content_type == "application/octet-stream"

    def test_read_error(self, assets, monkeypatch):
        def fail(self):
            raise PermissionError("permission denied")

        monkeypatch.setattr(Path, "read_bytes", fail)

        with pytest.raises(AssetResolutionError, match="permission denied"):
            assets.resolve("swagger-ui-bundle.js")

    def test_default_root_ships_swagger_ui(self):
        assets = SwaggerAssets(
            openapi_url="/openapi.json",
            mount_path="/swagger",
            title="Default",
        )

        assert assets.resolve("swagger-ui-bundle.js") is not None
