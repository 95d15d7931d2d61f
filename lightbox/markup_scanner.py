"""
MarkupScanner - Reads gallery items and the lightbox element from page markup.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

from bs4 import BeautifulSoup, Tag

from .gallery_item import GalleryItem
from .lightbox_config import LightboxConfig


class MarkupScanner:
    """
    Extracts GalleryItems from a portfolio page.

    Each element matching the configured item selector contributes one
    item, in document order. The item's first <img> supplies the source
    and alt text; .photo-title and .photo-location supply the caption.
    """

    def __init__(
        self,
        config: Optional[LightboxConfig] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize scanner.

        Args:
            config: Lightbox configuration (default: LightboxConfig())
            logger: Optional logger instance
        """
        self.config = config or LightboxConfig()
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def parse(html: str) -> BeautifulSoup:
        """Parse an HTML string into a document tree."""
        return BeautifulSoup(html, 'html.parser')

    def scan(self, document: BeautifulSoup) -> Tuple[GalleryItem, ...]:
        """
        Collect gallery items from a document.

        Args:
            document: Parsed page

        Returns:
            Tuple of items in document order (empty if none match)
        """
        items = []
        for element in document.select(self.config.item_selector):
            items.append(self._item_from_element(element))

        self.logger.debug(
            f"Found {len(items)} gallery items matching {self.config.item_selector!r}"
        )
        return tuple(items)

    def scan_file(self, path: str) -> Tuple[GalleryItem, ...]:
        """
        Read and scan a page from disk.

        Raises:
            FileNotFoundError: If the page does not exist
        """
        html = Path(path).read_text(encoding='utf-8')
        return self.scan(self.parse(html))

    def find_lightbox(self, document: BeautifulSoup) -> Optional[Tag]:
        """Return the lightbox overlay element, or None if the page has none."""
        return document.find(id=self.config.lightbox_id)

    def _item_from_element(self, element: Tag) -> GalleryItem:
        img = element.find('img')
        source = ''
        alt_text = ''
        if img is not None:
            source = img.get('src') or ''
            alt_text = img.get('alt') or ''
        else:
            self.logger.warning("Gallery item has no <img> element")

        return GalleryItem(
            image_source=source,
            image_alt_text=alt_text,
            title=self._text_of(element, '.photo-title'),
            location=self._text_of(element, '.photo-location'),
        )

    @staticmethod
    def _text_of(element: Tag, selector: str) -> str:
        found = element.select_one(selector)
        if found is None:
            return ''
        return found.get_text().strip()
