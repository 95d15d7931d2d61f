"""
LightboxConfig - Tunable settings for the lightbox, read from the environment.
"""

import logging
import os
from dataclasses import dataclass
from typing import List


DEFAULT_SWIPE_THRESHOLD = 50
DEFAULT_ITEM_SELECTOR = '.gallery-item'
DEFAULT_LIGHTBOX_ID = 'lightbox'


@dataclass
class LightboxConfig:
    """
    Lightbox configuration.

    Attributes:
        swipe_threshold: Minimum horizontal travel in pixels for a swipe
            to navigate; travel at or below it is ignored
        item_selector: CSS selector matching gallery items in the page
        lightbox_id: Element id of the lightbox overlay
        log_level: Logging level name
    """
    swipe_threshold: int = DEFAULT_SWIPE_THRESHOLD
    item_selector: str = DEFAULT_ITEM_SELECTOR
    lightbox_id: str = DEFAULT_LIGHTBOX_ID
    log_level: str = 'INFO'

    @classmethod
    def from_env(cls) -> 'LightboxConfig':
        """
        Create configuration from LIGHTBOX_* environment variables.

        Raises:
            ValueError: If LIGHTBOX_SWIPE_THRESHOLD is not an integer
        """
        return cls(
            swipe_threshold=int(os.getenv('LIGHTBOX_SWIPE_THRESHOLD', str(DEFAULT_SWIPE_THRESHOLD))),
            item_selector=os.getenv('LIGHTBOX_ITEM_SELECTOR', DEFAULT_ITEM_SELECTOR),
            lightbox_id=os.getenv('LIGHTBOX_ELEMENT_ID', DEFAULT_LIGHTBOX_ID),
            log_level=os.getenv('LIGHTBOX_LOG_LEVEL', 'INFO'),
        )

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []
        if self.swipe_threshold < 0:
            errors.append(f"Swipe threshold must be >= 0, got {self.swipe_threshold}")
        if not self.item_selector.strip():
            errors.append("Item selector must not be empty")
        if not self.lightbox_id.strip():
            errors.append("Lightbox element id must not be empty")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            errors.append(f"Unknown log level: {self.log_level}")
        return errors
