"""Generate the QR codes that link a strip to its hosted photos."""

import logging

import qrcode
from qrcode.exceptions import DataOverflowError
from PIL import Image, ImageDraw

log = logging.getLogger(__name__)

QUIET_ZONE = 4  # Modules of white border required around a QR symbol


def generate_qr_code(data: str, size: int) -> Image.Image | None:
    """Generate a square black/white QR code image of the given size.

    Uses error correction level H (30% redundancy) so a printed strip stays
    scannable when creased or smudged. Every module is drawn as a solid
    block of whole pixels with no anti-aliasing, and the symbol is centred
    in the square with white padding.

    Args:
        data: The text or URL to encode. May be empty.
        size: Output image size in pixels (square).

    Returns:
        RGB PIL Image of the QR code, or None if the data exceeds the
        symbol capacity at error correction level H.

    Raises:
        ValueError: If size is not positive.
    """
    if size <= 0:
        raise ValueError(f"QR size must be positive, got {size}.")

    qr = qrcode.QRCode(
        error_correction=qrcode.constants.ERROR_CORRECT_H,
        border=QUIET_ZONE,
    )
    qr.add_data(data)
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError):
        # qrcode 8 reports overflow as an invalid version (41)
        log.error("QR encoding failed: %d chars exceed capacity at level H", len(data))
        return None

    return _render_matrix(qr.get_matrix(), size)


def _render_matrix(matrix: list[list[bool]], size: int) -> Image.Image:
    """Scale a module matrix into a square image by whole-pixel blocks.

    The output never shrinks below one pixel per module, so a matrix wider
    than size produces an image of the matrix width instead.
    """
    modules = len(matrix)
    output_size = max(size, modules)
    multiple = output_size // modules
    padding = (output_size - modules * multiple) // 2

    img = Image.new("RGB", (output_size, output_size), "white")
    draw = ImageDraw.Draw(img)
    for row, line in enumerate(matrix):
        top = padding + row * multiple
        for col, dark in enumerate(line):
            if dark:
                left = padding + col * multiple
                draw.rectangle(
                    (left, top, left + multiple - 1, top + multiple - 1),
                    fill="black",
                )
    return img
