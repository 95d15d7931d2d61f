"""
LightboxController - Finite-state machine driving the gallery lightbox.
"""

import logging
from typing import Callable, Dict, Optional, Sequence, Tuple

from .display import LightboxDisplay
from .gallery_item import GalleryItem
from .input_events import Click, InputEvent, KeyPress, TouchEnd, TouchStart
from .lightbox_config import LightboxConfig
from .lightbox_state import LightboxPhase, LightboxState


# Matches events in every phase.
ANY_PHASE = None


def event_key(event: InputEvent) -> str:
    """Transition-table key for an event, e.g. 'click:next' or 'key:Escape'."""
    if isinstance(event, Click):
        return f"click:{event.target.value}"
    if isinstance(event, KeyPress):
        return f"key:{event.key}"
    if isinstance(event, TouchStart):
        return 'touch:start'
    if isinstance(event, TouchEnd):
        return 'touch:end'
    raise TypeError(f"Not an input event: {event!r}")


class LightboxController:
    """
    Shows one gallery item at a time in a full-screen overlay.

    States are CLOSED and OPEN. Input events are looked up in TRANSITIONS
    by (phase, event key); events with no entry for the current phase are
    ignored. The item sequence and its length are fixed at construction.
    """

    TRANSITIONS: Dict[Tuple[Optional[LightboxPhase], str], str] = {
        (ANY_PHASE, 'click:item'): '_on_item_click',
        (LightboxPhase.OPEN, 'click:close'): '_on_close',
        (LightboxPhase.OPEN, 'click:background'): '_on_close',
        (LightboxPhase.OPEN, 'click:prev'): '_on_prev',
        (LightboxPhase.OPEN, 'click:next'): '_on_next',
        (LightboxPhase.OPEN, 'key:Escape'): '_on_close',
        (LightboxPhase.OPEN, 'key:ArrowLeft'): '_on_prev',
        (LightboxPhase.OPEN, 'key:ArrowRight'): '_on_next',
        (LightboxPhase.OPEN, 'touch:start'): '_on_touch_start',
        (LightboxPhase.OPEN, 'touch:end'): '_on_touch_end',
    }

    def __init__(
        self,
        items: Sequence[GalleryItem],
        state: LightboxState,
        display: LightboxDisplay,
        config: Optional[LightboxConfig] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize controller.

        Args:
            items: Gallery items in display order
            state: State object owned by this controller
            display: Presentation layer to render through
            config: Lightbox configuration (default: LightboxConfig())
            logger: Optional logger instance

        Raises:
            ValueError: If state.item_count does not match len(items)
        """
        self.items = tuple(items)
        if state.item_count != len(self.items):
            raise ValueError(
                f"State item count {state.item_count} does not match "
                f"{len(self.items)} gallery items"
            )
        self.state = state
        self.display = display
        self.config = config or LightboxConfig()
        self.logger = logger or logging.getLogger(__name__)

    @property
    def item_count(self) -> int:
        return self.state.item_count

    @property
    def current_item(self) -> Optional[GalleryItem]:
        if self.item_count == 0:
            return None
        return self.items[self.state.current_index]

    # Operations

    def open(self, index: int) -> None:
        """
        Open the lightbox on the item at index.

        Raises:
            IndexError: If index is outside [0, item_count)
        """
        if not self.state.is_valid_index(index):
            raise IndexError(
                f"Gallery index {index} out of range for {self.item_count} items"
            )

        self.state.current_index = index
        self.state.phase = LightboxPhase.OPEN
        self._render()
        self.display.set_overlay_visible(True)
        self.display.set_scroll_locked(True)
        self.logger.debug(f"Opened lightbox at {self.state.counter_text}")

    def close(self) -> None:
        """Close the lightbox. Closing a closed lightbox does nothing."""
        if not self.state.is_open:
            return

        self.state.phase = LightboxPhase.CLOSED
        self.display.set_overlay_visible(False)
        self.display.set_scroll_locked(False)
        self.logger.debug("Closed lightbox")

    def show_next(self) -> None:
        """Advance to the next item, wrapping from the last to the first."""
        if self.item_count == 0:
            return
        self.state.current_index = (self.state.current_index + 1) % self.item_count
        self._render()

    def show_prev(self) -> None:
        """Go back to the previous item, wrapping from the first to the last."""
        if self.item_count == 0:
            return
        self.state.current_index = (
            (self.state.current_index - 1 + self.item_count) % self.item_count
        )
        self._render()

    def handle_swipe(self, start_x: float, end_x: float) -> Optional[str]:
        """
        Navigate on a horizontal swipe.

        A right-to-left swipe (start_x > end_x) shows the next item, a
        left-to-right swipe the previous one. Travel at or below the
        configured threshold is ignored.

        Returns:
            'show_next', 'show_prev', or None when the swipe was too short
        """
        diff = start_x - end_x
        if abs(diff) <= self.config.swipe_threshold:
            return None

        if diff > 0:
            self.show_next()
            return 'show_next'
        self.show_prev()
        return 'show_prev'

    # Event dispatch

    def dispatch(self, event: InputEvent) -> Optional[str]:
        """
        Apply an input event.

        Args:
            event: Click, KeyPress, TouchStart or TouchEnd

        Returns:
            Name of the operation applied, or None if the event has no
            effect in the current phase
        """
        key = event_key(event)
        handler_name = (
            self.TRANSITIONS.get((self.state.phase, key))
            or self.TRANSITIONS.get((ANY_PHASE, key))
        )
        if handler_name is None:
            return None

        handler: Callable[[InputEvent], Optional[str]] = getattr(self, handler_name)
        return handler(event)

    def _on_item_click(self, event: Click) -> Optional[str]:
        if event.index is None or not self.state.is_valid_index(event.index):
            self.logger.warning(f"Ignoring click on unknown gallery item {event.index}")
            return None
        self.open(event.index)
        return 'open'

    def _on_close(self, event: InputEvent) -> str:
        self.close()
        return 'close'

    def _on_prev(self, event: InputEvent) -> str:
        self.show_prev()
        return 'show_prev'

    def _on_next(self, event: InputEvent) -> str:
        self.show_next()
        return 'show_next'

    def _on_touch_start(self, event: TouchStart) -> str:
        self.state.touch_start_x = event.screen_x
        return 'touch_start'

    def _on_touch_end(self, event: TouchEnd) -> Optional[str]:
        return self.handle_swipe(self.state.touch_start_x, event.screen_x)

    def _render(self) -> None:
        item = self.items[self.state.current_index]
        self.display.set_image(item.image_source, item.image_alt_text)
        self.display.set_caption(item.title, item.location)
        self.display.set_counter(self.state.counter_text)
