"""
Display - Presentation-layer collaborators for the lightbox.

The controller never reads back from a display. Every call sets a display
attribute to an absolute value, so repeating a call has no further effect.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from bs4 import BeautifulSoup, Tag


class LightboxDisplay(ABC):
    """Interface the controller renders through."""

    @abstractmethod
    def set_overlay_visible(self, visible: bool) -> None:
        ...

    @abstractmethod
    def set_image(self, source: str, alt_text: str) -> None:
        ...

    @abstractmethod
    def set_caption(self, title: str, location: str) -> None:
        ...

    @abstractmethod
    def set_counter(self, text: str) -> None:
        ...

    @abstractmethod
    def set_scroll_locked(self, locked: bool) -> None:
        """Suppress (True) or restore (False) background page scrolling."""
        ...


class RecordingDisplay(LightboxDisplay):
    """
    Keeps display attributes in memory.

    Used by tests and by the CLI when a page has to be replayed without
    touching its markup.
    """

    def __init__(self):
        self.overlay_visible = False
        self.image_source = ''
        self.image_alt_text = ''
        self.title = ''
        self.location = ''
        self.counter = ''
        self.scroll_locked = False
        self.render_count = 0

    def set_overlay_visible(self, visible: bool) -> None:
        self.overlay_visible = visible

    def set_image(self, source: str, alt_text: str) -> None:
        self.image_source = source
        self.image_alt_text = alt_text
        self.render_count += 1

    def set_caption(self, title: str, location: str) -> None:
        self.title = title
        self.location = location

    def set_counter(self, text: str) -> None:
        self.counter = text

    def set_scroll_locked(self, locked: bool) -> None:
        self.scroll_locked = locked

    def snapshot(self) -> dict:
        return {
            'overlay_visible': self.overlay_visible,
            'image_source': self.image_source,
            'image_alt_text': self.image_alt_text,
            'title': self.title,
            'location': self.location,
            'counter': self.counter,
            'scroll_locked': self.scroll_locked,
        }


class MarkupDisplay(LightboxDisplay):
    """
    Applies display attributes to the page's own markup.

    The lightbox element gets the 'active' class while visible; its
    .lightbox-image, .lightbox-title, .lightbox-location and
    .lightbox-counter children receive the item. Scroll locking writes
    overflow: hidden into the <body> style. Children the page does not
    have are skipped.
    """

    ACTIVE_CLASS = 'active'

    def __init__(
        self,
        document: BeautifulSoup,
        lightbox: Tag,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize display.

        Args:
            document: Parsed page the lightbox lives in
            lightbox: The lightbox overlay element within document
            logger: Optional logger instance
        """
        self.document = document
        self.lightbox = lightbox
        self.logger = logger or logging.getLogger(__name__)

        self.image = lightbox.select_one('.lightbox-image')
        self.title = lightbox.select_one('.lightbox-title')
        self.location = lightbox.select_one('.lightbox-location')
        self.counter = lightbox.select_one('.lightbox-counter')

        for name in ('image', 'title', 'location', 'counter'):
            if getattr(self, name) is None:
                self.logger.warning(f"Lightbox has no .lightbox-{name} element")

    def set_overlay_visible(self, visible: bool) -> None:
        classes = list(self.lightbox.get('class') or [])
        if visible and self.ACTIVE_CLASS not in classes:
            classes.append(self.ACTIVE_CLASS)
        elif not visible:
            classes = [c for c in classes if c != self.ACTIVE_CLASS]

        if classes:
            self.lightbox['class'] = classes
        elif self.lightbox.has_attr('class'):
            del self.lightbox['class']

    def set_image(self, source: str, alt_text: str) -> None:
        if self.image is None:
            return
        self.image['src'] = source
        self.image['alt'] = alt_text

    def set_caption(self, title: str, location: str) -> None:
        self._set_text(self.title, title)
        self._set_text(self.location, location)

    def set_counter(self, text: str) -> None:
        self._set_text(self.counter, text)

    def set_scroll_locked(self, locked: bool) -> None:
        body = self.document.body
        if body is None:
            return

        style = parse_style(body.get('style', ''))
        if locked:
            style['overflow'] = 'hidden'
        else:
            style.pop('overflow', None)

        if style:
            body['style'] = format_style(style)
        elif body.has_attr('style'):
            del body['style']

    @property
    def overlay_visible(self) -> bool:
        return self.ACTIVE_CLASS in (self.lightbox.get('class') or [])

    def render(self) -> str:
        """Return the document as HTML."""
        return str(self.document)

    @staticmethod
    def _set_text(element: Optional[Tag], text: str) -> None:
        if element is not None:
            element.string = text


def parse_style(style: str) -> Dict[str, str]:
    """Parse an inline style attribute into an ordered property dict."""
    properties = {}
    for declaration in style.split(';'):
        name, sep, value = declaration.partition(':')
        if sep and name.strip():
            properties[name.strip().lower()] = value.strip()
    return properties


def format_style(properties: Dict[str, str]) -> str:
    return '; '.join(f"{name}: {value}" for name, value in properties.items())
