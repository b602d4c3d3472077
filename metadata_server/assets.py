from __future__ import annotations

import hashlib
import io
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

from PIL import Image, UnidentifiedImageError

from common.logging_setup import get_logger

log = get_logger(__name__)

DEFAULT_ASSET_PATH = Path(__file__).resolve().parent / "assets" / "leader.jpeg"


class AssetError(RuntimeError):
    """Bundled image is missing or unusable; raised at startup, never per request."""


@dataclass(frozen=True)
class ImageAsset:
    """Image bytes read once at startup and shared read-only by all requests."""
    path: Path
    data: bytes
    media_type: str = "image/jpeg"

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def sha256(self) -> str:
        return hashlib.sha256(self.data).hexdigest()

    def describe(self) -> Dict:
        return {"path": str(self.path), "bytes": self.size, "sha256": self.sha256}


def _check_jpeg(data: bytes, path: Path) -> None:
    try:
        with Image.open(io.BytesIO(data)) as img:
            fmt = img.format
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise AssetError(f"{path} is not a readable image: {e}") from e
    if fmt != "JPEG":
        raise AssetError(f"{path} is {fmt}, expected JPEG")


def load_image_asset(path: Optional[Union[str, Path]] = None) -> ImageAsset:
    """
    Read and validate the leader image.

    Raises AssetError if the file is absent, empty or not a JPEG, so a bad
    build fails at startup instead of serving a broken endpoint.
    """
    p = Path(path) if path else DEFAULT_ASSET_PATH
    try:
        data = p.read_bytes()
    except OSError as e:
        raise AssetError(f"image asset not readable: {p} ({e})") from e
    if not data:
        raise AssetError(f"image asset is empty: {p}")
    _check_jpeg(data, p)

    asset = ImageAsset(path=p, data=data)
    log.info("image asset loaded", extra={"extra": asset.describe()})
    return asset
