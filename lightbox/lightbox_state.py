"""
LightboxState - Mutable state of the lightbox for one page view.
"""

from dataclasses import dataclass
from enum import Enum


class LightboxPhase(Enum):
    """Display phase of the lightbox overlay."""
    CLOSED = 'closed'
    OPEN = 'open'


@dataclass
class LightboxState:
    """
    Lightbox state owned by a single controller.

    Attributes:
        item_count: Number of gallery items, fixed after initialization
        current_index: Index of the displayed item
        phase: CLOSED or OPEN
        touch_start_x: Horizontal position of the last touch start
    """
    item_count: int
    current_index: int = 0
    phase: LightboxPhase = LightboxPhase.CLOSED
    touch_start_x: float = 0.0

    @property
    def is_open(self) -> bool:
        return self.phase is LightboxPhase.OPEN

    @property
    def counter_text(self) -> str:
        """Position counter, e.g. "3 / 12"."""
        return f"{self.current_index + 1} / {self.item_count}"

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < self.item_count

    def to_dict(self) -> dict:
        return {
            'phase': self.phase.value,
            'current_index': self.current_index,
            'item_count': self.item_count,
            'counter': self.counter_text if self.item_count else '',
        }
