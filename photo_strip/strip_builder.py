"""Compose the printable photo strip.

A strip is one panel (W wide, 3W tall) rendered once and placed twice side
by side, so a single print yields two identical copies. The panel holds,
from the top: the original photo, the stylized photo, the logo on the right
half, and a bottom-anchored block with captions above two QR codes.
"""

from dataclasses import dataclass, field

from PIL import Image, ImageDraw, ImageFont

from photo_strip import (
    HALF_MARGIN,
    LINK_TEXT_SIZE,
    MARGIN,
    STRIP_WIDTH,
    TEXT_COLOR,
    TITLE,
    TITLE_TEXT_SIZE,
)
from photo_strip.image_utils import load_logo
from photo_strip.qr_generator import generate_qr_code

COPIES = 2

# Tried in order; Pillow's built-in font is the last resort
MONOSPACE_FONTS = (
    "DejaVuSansMono.ttf",
    "LiberationMono-Regular.ttf",
    "cour.ttf",
)
DEFAULT_FONTS = (
    "DejaVuSans.ttf",
    "LiberationSans-Regular.ttf",
    "arial.ttf",
)


@dataclass(frozen=True)
class StripLayout:
    """Fixed geometry and typography of a strip panel."""

    width: int = STRIP_WIDTH
    margin: int = MARGIN
    half_margin: int = HALF_MARGIN
    link_text_size: int = LINK_TEXT_SIZE
    title_text_size: int = TITLE_TEXT_SIZE
    title: str = TITLE
    text_color: tuple[int, int, int] = TEXT_COLOR
    background_color: tuple[int, int, int] = (255, 255, 255)

    @property
    def half_width(self) -> int:
        return self.width // 2

    @property
    def canvas_size(self) -> tuple[int, int]:
        return self.width * COPIES, self.width * 3

    @property
    def panel_size(self) -> tuple[int, int]:
        return self.width, self.width * 3

    @property
    def logo_origin(self) -> tuple[int, int]:
        return self.half_width, 2 * self.width + self.half_margin + self.margin

    @property
    def logo_width(self) -> int:
        return self.half_width - self.margin

    @property
    def qr_row_y(self) -> int:
        return 2 * self.width + self.half_width

    @property
    def caption_baseline(self) -> int:
        """Baseline of the lowest caption line, right on top of the QR row."""
        return self.qr_row_y


@dataclass(frozen=True, eq=False)
class PhotoStripSpec:
    """The two photos and links of one strip, plus their QR codes.

    QR codes are generated on construction at half the photo width; a link
    that cannot be encoded leaves its QR image as None.
    """

    original_image: Image.Image
    stylized_image: Image.Image
    original_qr_link: str = ""
    stylized_qr_link: str = ""
    original_qr_image: Image.Image | None = field(init=False, repr=False, compare=False)
    stylized_qr_image: Image.Image | None = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        width, height = self.original_image.size
        if width != height:
            raise ValueError(f"Original photo must be square, got {width}x{height}.")
        if self.stylized_image.size != self.original_image.size:
            raise ValueError(
                f"Stylized photo is {self.stylized_image.size[0]}x{self.stylized_image.size[1]}, "
                f"expected {width}x{height} to match the original."
            )

        size = width // 2
        object.__setattr__(self, "original_qr_image", generate_qr_code(self.original_qr_link, size))
        object.__setattr__(self, "stylized_qr_image", generate_qr_code(self.stylized_qr_link, size))


@dataclass(frozen=True)
class CaptionLine:
    """A caption slot placed on the panel. y is the text baseline."""

    text: str
    size: int
    monospace: bool
    y: int
    drawn: bool


def layout_captions(spec: PhotoStripSpec, layout: StripLayout | None = None) -> list[CaptionLine]:
    """Place caption lines bottom-up above the QR row.

    Slots are, from the bottom: stylized link, original link, title. An
    empty slot is not drawn but still takes its space, so line spacing is
    the same whichever links are present.
    """
    layout = layout or StripLayout()
    # (text, size, monospace, gap above)
    slots = [
        (spec.stylized_qr_link, layout.link_text_size, True, layout.half_margin),
        (spec.original_qr_link, layout.link_text_size, True, layout.margin),
        (layout.title, layout.title_text_size, False, 0),
    ]

    lines = []
    y = layout.caption_baseline
    for text, size, monospace, gap in slots:
        lines.append(CaptionLine(text=text, size=size, monospace=monospace, y=y, drawn=bool(text)))
        y -= size + gap
    return lines


def load_font(candidates: tuple[str, ...], size: int) -> ImageFont.FreeTypeFont:
    """Load the first available TrueType font or fall back to Pillow's default."""
    for name in candidates:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)


class StripBuilder:
    """Render photo strips with a fixed logo and layout."""

    def __init__(self, logo: Image.Image | None = None, layout: StripLayout | None = None):
        self.layout = layout or StripLayout()
        self.logo = self._scale_logo(logo if logo is not None else load_logo())
        self._fonts: dict[tuple[bool, int], ImageFont.FreeTypeFont] = {}

    def _scale_logo(self, logo: Image.Image) -> Image.Image:
        logo = logo.convert("RGBA")
        logo_width = self.layout.logo_width
        scale = logo_width / logo.width
        logo_height = int(scale * logo.height + 0.5)
        return logo.resize((logo_width, logo_height), Image.Resampling.LANCZOS)

    def _font(self, monospace: bool, size: int) -> ImageFont.FreeTypeFont:
        key = (monospace, size)
        if key not in self._fonts:
            self._fonts[key] = load_font(MONOSPACE_FONTS if monospace else DEFAULT_FONTS, size)
        return self._fonts[key]

    def build(self, spec: PhotoStripSpec) -> Image.Image:
        """Render the strip: one panel per copy on an opaque white canvas."""
        expected = (self.layout.width, self.layout.width)
        if spec.original_image.size != expected:
            raise ValueError(
                f"Photos must be {expected[0]}x{expected[1]}, "
                f"got {spec.original_image.size[0]}x{spec.original_image.size[1]}."
            )

        canvas = Image.new("RGBA", self.layout.canvas_size, self.layout.background_color + (255,))
        panel = self._render_panel(spec)
        for copy in range(COPIES):
            canvas.paste(panel, (copy * self.layout.width, 0))
        return canvas

    def _render_panel(self, spec: PhotoStripSpec) -> Image.Image:
        layout = self.layout
        panel = Image.new("RGBA", layout.panel_size, layout.background_color + (255,))

        # From the top: the two photos, then the logo
        _paste(panel, spec.original_image, (0, 0))
        _paste(panel, spec.stylized_image, (0, layout.width + layout.half_margin))
        _paste(panel, self.logo, layout.logo_origin)

        # From the bottom: the two QR codes, then the captions
        if spec.original_qr_image is not None:
            _paste(panel, spec.original_qr_image, (0, layout.qr_row_y))
        if spec.stylized_qr_image is not None:
            _paste(panel, spec.stylized_qr_image, (layout.half_width, layout.qr_row_y))

        draw = ImageDraw.Draw(panel)
        for line in layout_captions(spec, layout):
            if not line.drawn:
                continue
            draw.text(
                (layout.margin, line.y),
                line.text,
                font=self._font(line.monospace, line.size),
                fill=layout.text_color,
                anchor="ls",
            )
        return panel


def _paste(target: Image.Image, img: Image.Image, xy: tuple[int, int]) -> None:
    """Paste an image, blending through its alpha channel if it has one."""
    if "A" in img.getbands():
        target.alpha_composite(img.convert("RGBA"), dest=xy)
    else:
        target.paste(img, xy)


def build_photo_strip(
    spec: PhotoStripSpec,
    logo: Image.Image | None = None,
    layout: StripLayout | None = None,
) -> Image.Image:
    """Render a strip with the given (or bundled) logo and layout."""
    return StripBuilder(logo=logo, layout=layout).build(spec)
