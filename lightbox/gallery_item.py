"""
GalleryItem - A single displayable photograph and its caption metadata.
"""

from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class GalleryItem:
    """
    One photograph shown by the lightbox.

    Attributes:
        image_source: URL of the image
        image_alt_text: Alternative text for the image
        title: Photo title (empty when the markup has none)
        location: Where the photo was taken (empty when the markup has none)
    """
    image_source: str
    image_alt_text: str
    title: str = ''
    location: str = ''

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'GalleryItem':
        return cls(
            image_source=data['image_source'],
            image_alt_text=data.get('image_alt_text', ''),
            title=data.get('title', ''),
            location=data.get('location', ''),
        )

    def format_caption(self) -> str:
        """
        Format a one-line caption for listings.

        Returns:
            Caption like "Sunrise - Big Sur", or the image source when
            the item has neither title nor location
        """
        parts = [p for p in (self.title, self.location) if p]
        if parts:
            return ' - '.join(parts)
        return self.image_source
