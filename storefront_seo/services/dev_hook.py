"""
Index transform for the frontend dev server.

The dev server has no database access, so the product is fetched from the
running backend's products API and the tags are applied to the HTML it is
about to serve.
"""
import logging
import requests

from .. import config
from ..utils.seo import extract_product_slug, generate_product_seo_tags
from .seo_injection import apply_seo_tags

logger = logging.getLogger(__name__)


def fetch_product(slug):
    """GET /api/products/<slug> from the backend and return its 'data' payload"""
    response = requests.get(
        f"{config.SEO_API_URL}/api/products/{slug}",
        timeout=config.FETCH_TIMEOUT
    )
    response.raise_for_status()
    payload = response.json()
    if not isinstance(payload, dict):
        raise ValueError(f"unexpected response body: {type(payload).__name__}")
    return payload.get('data')


def transform_index_html(html, path):
    slug = extract_product_slug(path)
    if not slug:
        return html

    try:
        product = fetch_product(slug)
    except (requests.RequestException, ValueError) as e:
        # Backend may simply not be running yet
        logger.warning("[SEO Injection] Failed to fetch product %s: %s", slug, e)
        return html

    if not product:
        return html

    try:
        tags = generate_product_seo_tags(product, config.DEV_BASE_URL)
        return apply_seo_tags(html, tags)
    except Exception as e:
        logger.warning("[SEO Injection] Could not apply tags for %s: %s", slug, e)
        return html
