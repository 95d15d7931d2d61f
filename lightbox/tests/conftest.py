"""
Pytest fixtures for lightbox tests.
"""

import pytest


SAMPLE_PAGE = """<!DOCTYPE html>
<html>
<head><title>Portfolio</title></head>
<body style="margin: 0">
  <section class="gallery">
    <figure class="gallery-item">
      <img src="images/big-sur.jpg" alt="Cliffs at dawn">
      <figcaption>
        <span class="photo-title">Sunrise</span>
        <span class="photo-location">Big Sur</span>
      </figcaption>
    </figure>
    <figure class="gallery-item">
      <img src="images/yosemite.jpg" alt="Half Dome">
      <figcaption>
        <span class="photo-title">Granite</span>
        <span class="photo-location">Yosemite</span>
      </figcaption>
    </figure>
    <figure class="gallery-item">
      <img src="images/fog.jpg" alt="Bridge in fog">
    </figure>
    <figure class="gallery-item">
      <img src="images/desert.jpg" alt="Dunes">
      <figcaption><span class="photo-title">Dunes</span></figcaption>
    </figure>
    <figure class="gallery-item">
      <img src="images/coast.jpg" alt="Rocky coast">
      <figcaption><span class="photo-location">Mendocino</span></figcaption>
    </figure>
  </section>
  <div class="lightbox" id="lightbox">
    <button class="lightbox-close">&times;</button>
    <button class="lightbox-prev">&larr;</button>
    <div class="lightbox-content">
      <img class="lightbox-image" src="" alt="">
      <div class="lightbox-info">
        <h3 class="lightbox-title"></h3>
        <p class="lightbox-location"></p>
        <span class="lightbox-counter"></span>
      </div>
    </div>
    <button class="lightbox-next">&rarr;</button>
  </div>
</body>
</html>
"""

EMPTY_GALLERY_PAGE = """<html><body>
  <section class="gallery"></section>
  <div class="lightbox" id="lightbox"><img class="lightbox-image"></div>
</body></html>
"""

NO_LIGHTBOX_PAGE = """<html><body>
  <figure class="gallery-item"><img src="a.jpg" alt="A"></figure>
</body></html>
"""


@pytest.fixture
def sample_html():
    """Fixture providing a portfolio page with five gallery items."""
    return SAMPLE_PAGE


@pytest.fixture
def empty_gallery_html():
    """Fixture providing a page with a lightbox but no gallery items."""
    return EMPTY_GALLERY_PAGE


@pytest.fixture
def no_lightbox_html():
    """Fixture providing a page with gallery items but no lightbox element."""
    return NO_LIGHTBOX_PAGE


@pytest.fixture
def sample_page_file(sample_html, tmp_path):
    """Fixture providing the sample page on disk."""
    filepath = tmp_path / "index.html"
    filepath.write_text(sample_html, encoding='utf-8')
    return str(filepath)


@pytest.fixture
def sample_items():
    """Fixture providing five gallery items."""
    from lightbox.gallery_item import GalleryItem

    return (
        GalleryItem('images/big-sur.jpg', 'Cliffs at dawn', 'Sunrise', 'Big Sur'),
        GalleryItem('images/yosemite.jpg', 'Half Dome', 'Granite', 'Yosemite'),
        GalleryItem('images/fog.jpg', 'Bridge in fog'),
        GalleryItem('images/desert.jpg', 'Dunes', 'Dunes'),
        GalleryItem('images/coast.jpg', 'Rocky coast', location='Mendocino'),
    )


@pytest.fixture
def recording_display():
    """Fixture providing an in-memory display."""
    from lightbox.display import RecordingDisplay

    return RecordingDisplay()


@pytest.fixture
def make_controller(recording_display):
    """Fixture providing a factory for controllers over n generated items."""
    from lightbox.controller import LightboxController
    from lightbox.gallery_item import GalleryItem
    from lightbox.lightbox_config import LightboxConfig
    from lightbox.lightbox_state import LightboxState

    def _make(count=5, swipe_threshold=50):
        items = [
            GalleryItem(f"images/photo{i}.jpg", f"Photo {i}", f"Title {i}", f"Place {i}")
            for i in range(count)
        ]
        return LightboxController(
            items,
            LightboxState(item_count=count),
            recording_display,
            LightboxConfig(swipe_threshold=swipe_threshold),
        )

    return _make


@pytest.fixture
def controller(make_controller):
    """Fixture providing a closed controller over five items."""
    return make_controller(5)


@pytest.fixture
def logger():
    """Fixture providing a logger."""
    import logging
    return logging.getLogger('test')
