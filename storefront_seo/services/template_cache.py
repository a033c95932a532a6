import logging

from .. import config

logger = logging.getLogger(__name__)

# Read once per process; edits to the file need a restart
_cached_index_html = None


def get_index_html():
    """Return the HTML shell, reading it from disk on first use. None if unreadable."""
    global _cached_index_html
    if _cached_index_html is not None:
        return _cached_index_html

    try:
        with open(config.TEMPLATE_PATH, 'r', encoding='utf-8') as f:
            _cached_index_html = f.read()
    except OSError as e:
        logger.error("Failed to read template %s: %s", config.TEMPLATE_PATH, e)
        return None
    return _cached_index_html
