"""Image loading, saving and verification utilities for photo strips."""

import os
from enum import Enum
from importlib import resources

from PIL import Image, ImageOps

from photo_strip import STRIP_WIDTH

LOGO_RESOURCE = "logo.png"


class VerifyResult(Enum):
    """Result of QR scannability verification."""
    SCANNABLE = "scannable"
    NOT_SCANNABLE = "not_scannable"
    SKIPPED = "skipped"  # pyzbar not installed


def load_photo(
    path: str,
    size: int = STRIP_WIDTH,
    crop: bool = True,
) -> Image.Image:
    """Load a photo from disk as a size x size strip panel photo.

    Booth cameras shoot landscape frames, while the strip holds square
    photos. By default the centre of the frame is kept and the sides are
    cropped away; with crop=False the frame is squashed to fit instead.

    Raises:
        FileNotFoundError: If the photo doesn't exist.
        ValueError: If the file is not a readable image.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Image not found: {path}")

    try:
        with Image.open(path) as img:
            photo = img.convert("RGB")
    except (OSError, SyntaxError) as e:
        raise ValueError(f"Could not open image '{path}': {e}")

    if crop:
        return ImageOps.fit(photo, (size, size), method=Image.Resampling.LANCZOS)
    return photo.resize((size, size), Image.Resampling.LANCZOS)


def load_logo(path: str | None = None) -> Image.Image:
    """Load the strip logo as RGBA, defaulting to the bundled asset."""
    if path is None:
        asset = resources.files("photo_strip") / "assets" / LOGO_RESOURCE
        with asset.open("rb") as fp:
            img = Image.open(fp)
            img.load()
        return img.convert("RGBA")

    if not os.path.exists(path):
        raise FileNotFoundError(f"Logo not found: {path}")
    try:
        with Image.open(path) as img:
            return img.convert("RGBA")
    except (OSError, SyntaxError) as e:
        raise ValueError(f"Could not open logo '{path}': {e}")


def save_output(img: Image.Image, output_path: str) -> str:
    """Save the rendered strip, creating parent directories as needed.

    Formats without an alpha channel (e.g. .jpg) get an RGB copy.

    Returns:
        The output path where the image was saved.
    """
    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)

    ext = os.path.splitext(output_path)[1].lower()
    if ext in (".jpg", ".jpeg", ".bmp"):
        img = img.convert("RGB")
    img.save(output_path)
    return output_path


def verify_qr_scannable(img: Image.Image) -> tuple[VerifyResult, list[str]]:
    """Attempt to decode every QR code on a rendered strip.

    Uses pyzbar if available, otherwise returns SKIPPED.

    Returns:
        Tuple of (VerifyResult, decoded payloads in scan order).
    """
    try:
        from pyzbar.pyzbar import decode as pyzbar_decode
    except ImportError:
        return VerifyResult.SKIPPED, []

    try:
        results = pyzbar_decode(img.convert("RGB"))
        decoded = [r.data.decode("utf-8") for r in results]
    except Exception:
        return VerifyResult.NOT_SCANNABLE, []
    if decoded:
        return VerifyResult.SCANNABLE, decoded
    return VerifyResult.NOT_SCANNABLE, []
