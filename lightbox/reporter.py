"""
Reporter - Human-readable listings of gallery items and lightbox state.
"""

import logging
import sys
from typing import Iterable, List, Optional, Sequence, TextIO, Tuple

from .controller import LightboxController
from .gallery_item import GalleryItem


class Reporter:
    """
    Prints gallery listings and replay transcripts.
    """

    def __init__(
        self,
        output: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize reporter.

        Args:
            output: Output stream (default: stdout)
            logger: Optional logger instance
        """
        self.output = output or sys.stdout
        self.logger = logger or logging.getLogger(__name__)

    def _print(self, text: str = "") -> None:
        """Print to output stream."""
        print(text, file=self.output)

    def _print_header(self, title: str) -> None:
        self._print("=" * 60)
        self._print(title)
        self._print("=" * 60)

    def report_items(self, items: Sequence[GalleryItem], source: str = "") -> None:
        """
        List gallery items in display order.

        Args:
            items: Scanned gallery items
            source: Optional page name for the header
        """
        header = "GALLERY ITEMS"
        if source:
            header = f"{header}: {source}"
        self._print_header(header)

        if not items:
            self._print("  No gallery items found; the lightbox will not be enabled.")
            return

        width = len(str(len(items)))
        for position, item in enumerate(items, start=1):
            self._print(f"  {position:>{width}}. {item.format_caption()}")
            self._print(f"  {'':>{width}}  src: {item.image_source}")
            if item.image_alt_text:
                self._print(f"  {'':>{width}}  alt: {item.image_alt_text}")

        self._print("-" * 60)
        self._print(f"  Total items: {len(items)}")

    def report_state(self, controller: LightboxController) -> None:
        """Print the controller's phase, position and current item."""
        state = controller.state
        self._print_header("LIGHTBOX STATE")
        self._print(f"  Phase:       {state.phase.value}")
        self._print(f"  Index:       {state.current_index}")
        self._print(f"  Counter:     {state.counter_text}")

        item = controller.current_item
        if item is not None:
            self._print(f"  Current:     {item.format_caption()}")
            self._print(f"  Image:       {item.image_source}")

    def report_transcript(self, entries: Iterable[Tuple[str, Optional[str], str]]) -> None:
        """
        Print one line per replayed event.

        Args:
            entries: (event token, operation applied or None, counter after)
        """
        rows: List[Tuple[str, Optional[str], str]] = list(entries)
        self._print_header("REPLAY")
        if not rows:
            self._print("  No events.")
            return

        width = max(len(token) for token, _, _ in rows)
        for token, operation, counter in rows:
            applied = operation or "(ignored)"
            self._print(f"  {token:<{width}}  ->  {applied:<12} {counter}")
