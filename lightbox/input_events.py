"""
Input events delivered to the lightbox by the host page.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union


class ClickTarget(Enum):
    """Element a click landed on."""
    ITEM = 'item'
    CLOSE = 'close'
    PREV = 'prev'
    NEXT = 'next'
    BACKGROUND = 'background'
    CONTENT = 'content'


@dataclass(frozen=True)
class Click:
    target: ClickTarget
    index: Optional[int] = None


@dataclass(frozen=True)
class KeyPress:
    key: str


@dataclass(frozen=True)
class TouchStart:
    screen_x: float


@dataclass(frozen=True)
class TouchEnd:
    screen_x: float


InputEvent = Union[Click, KeyPress, TouchStart, TouchEnd]


def parse_event(token: str) -> List[InputEvent]:
    """
    Parse a compact event token into one or more input events.

    Accepted tokens:
        item:N            click on gallery item N
        close, prev, next, background, content
        key:NAME          key press, e.g. key:Escape
        touch:START:END   touch start at START followed by touch end at END

    Args:
        token: Event token

    Returns:
        List of events (two for a touch token, one otherwise)

    Raises:
        ValueError: If the token is not recognized
    """
    name, _, rest = token.strip().partition(':')
    name = name.lower()

    if name == 'item':
        try:
            return [Click(ClickTarget.ITEM, int(rest))]
        except ValueError:
            raise ValueError(f"Invalid item index in event: {token!r}")

    if name == 'key':
        if not rest:
            raise ValueError(f"Missing key name in event: {token!r}")
        return [KeyPress(rest)]

    if name == 'touch':
        start, _, end = rest.partition(':')
        try:
            return [TouchStart(float(start)), TouchEnd(float(end))]
        except ValueError:
            raise ValueError(f"Invalid touch coordinates in event: {token!r}")

    if not rest:
        try:
            target = ClickTarget(name)
        except ValueError:
            target = None
        if target is not None and target is not ClickTarget.ITEM:
            return [Click(target)]

    raise ValueError(f"Unknown event: {token!r}")
