"""
Gallery lightbox for a static photography portfolio.

The gallery items are read once from the page markup; a single
controller then moves between the CLOSED and OPEN states in response to
clicks, key presses and touch swipes, rendering through a display.
"""

__version__ = "1.0.0"

from .gallery_item import GalleryItem
from .lightbox_state import LightboxPhase, LightboxState
from .lightbox_config import LightboxConfig
from .input_events import Click, ClickTarget, KeyPress, TouchStart, TouchEnd, parse_event
from .markup_scanner import MarkupScanner
from .display import LightboxDisplay, RecordingDisplay, MarkupDisplay
from .controller import LightboxController
from .initialize import init_lightbox, init_lightbox_from_html
from .reporter import Reporter

__all__ = [
    "GalleryItem",
    "LightboxPhase",
    "LightboxState",
    "LightboxConfig",
    "Click",
    "ClickTarget",
    "KeyPress",
    "TouchStart",
    "TouchEnd",
    "parse_event",
    "MarkupScanner",
    "LightboxDisplay",
    "RecordingDisplay",
    "MarkupDisplay",
    "LightboxController",
    "init_lightbox",
    "init_lightbox_from_html",
    "Reporter",
]
