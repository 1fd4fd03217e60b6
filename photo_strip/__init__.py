"""Photo Strip — printable two-panel photo strips with QR codes."""

__version__ = "1.0.0"

# Shared constants
STRIP_WIDTH = 480  # Width of one print copy; the canvas is 2x wide, 3x tall
MARGIN = 16
HALF_MARGIN = 8
LINK_TEXT_SIZE = 28
TITLE_TEXT_SIZE = 40
TITLE = "Your photos"
TEXT_COLOR = (0x21, 0x21, 0x21)  # 87% black
