"""
One-time lightbox setup for a page view.
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup

from .controller import LightboxController
from .display import LightboxDisplay, MarkupDisplay
from .lightbox_config import LightboxConfig
from .lightbox_state import LightboxState
from .markup_scanner import MarkupScanner


def init_lightbox(
    document: BeautifulSoup,
    display: Optional[LightboxDisplay] = None,
    config: Optional[LightboxConfig] = None,
    logger: Optional[logging.Logger] = None
) -> Optional[LightboxController]:
    """
    Set up the lightbox for a parsed page.

    The gallery is scanned once; the controller never sees items added to
    the page later. A page without gallery items or without a lightbox
    element gets no lightbox.

    Args:
        document: Parsed page
        display: Presentation layer (default: MarkupDisplay on the page)
        config: Lightbox configuration (default: LightboxConfig())
        logger: Optional logger instance

    Returns:
        A controller in the CLOSED phase, or None when there is nothing
        to set up
    """
    config = config or LightboxConfig()
    logger = logger or logging.getLogger(__name__)
    scanner = MarkupScanner(config, logger)

    lightbox = scanner.find_lightbox(document)
    if lightbox is None:
        logger.debug(f"No #{config.lightbox_id} element, lightbox disabled")
        return None

    items = scanner.scan(document)
    if not items:
        logger.debug("No gallery items, lightbox disabled")
        return None

    if display is None:
        display = MarkupDisplay(document, lightbox, logger)

    state = LightboxState(item_count=len(items))
    logger.info(f"Lightbox ready with {state.item_count} gallery items")
    return LightboxController(items, state, display, config, logger)


def init_lightbox_from_html(
    html: str,
    display: Optional[LightboxDisplay] = None,
    config: Optional[LightboxConfig] = None,
    logger: Optional[logging.Logger] = None
) -> Optional[LightboxController]:
    """Parse html and set up its lightbox. See init_lightbox."""
    return init_lightbox(MarkupScanner.parse(html), display, config, logger)
