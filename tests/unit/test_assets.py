"""
Unit tests for loading the bundled leader image
"""

import hashlib
import io
import os
import sys

import pytest
from PIL import Image

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.append(project_root)

from metadata_server.assets import DEFAULT_ASSET_PATH, AssetError, load_image_asset


def _image_bytes(fmt: str) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (8, 8), (200, 30, 30)).save(buf, format=fmt)
    return buf.getvalue()


class TestLoadImageAsset:

    def test_bundled_asset_loads(self):
        asset = load_image_asset()
        assert asset.path == DEFAULT_ASSET_PATH
        assert asset.media_type == "image/jpeg"
        assert asset.data == DEFAULT_ASSET_PATH.read_bytes()
        assert asset.data[:2] == b"\xff\xd8"

    def test_custom_jpeg(self, tmp_path):
        p = tmp_path / "leader.jpeg"
        p.write_bytes(_image_bytes("JPEG"))
        asset = load_image_asset(str(p))
        assert asset.size == p.stat().st_size
        assert asset.sha256 == hashlib.sha256(p.read_bytes()).hexdigest()
        assert asset.describe() == {"path": str(p), "bytes": asset.size, "sha256": asset.sha256}

    def test_missing_file(self, tmp_path):
        with pytest.raises(AssetError, match="not readable"):
            load_image_asset(tmp_path / "nope.jpeg")

    def test_empty_file(self, tmp_path):
        p = tmp_path / "empty.jpeg"
        p.write_bytes(b"")
        with pytest.raises(AssetError, match="empty"):
            load_image_asset(p)

    def test_not_an_image(self, tmp_path):
        p = tmp_path / "junk.jpeg"
        p.write_bytes(b"definitely not a jpeg")
        with pytest.raises(AssetError):
            load_image_asset(p)

    def test_wrong_format(self, tmp_path):
        p = tmp_path / "leader.jpeg"
        p.write_bytes(_image_bytes("PNG"))
        with pytest.raises(AssetError, match="expected JPEG"):
            load_image_asset(p)

    def test_asset_is_immutable(self):
        asset = load_image_asset()
        with pytest.raises(AttributeError):
            asset.data = b""  # type: ignore[misc]
