import os
import json
import logging
from dotenv import load_dotenv

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
load_dotenv(os.path.join(PROJECT_ROOT, '.env'))

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

DEFAULT_SITE_SETTINGS = {
    "shopName": "uni10",
    "currency": {"symbol": "₹", "code": "INR"},
    "seo": {
        "title": "uni10 | Shop the latest collection online",
        "description": "Discover the latest products at uni10. Fast delivery and easy returns.",
        "keywords": "uni10, online shopping, clothing, accessories",
        "image": "/og-image.png"
    }
}

# Tag policies understood by apply_seo_tags
TAG_POLICIES = ('replace', 'upsert', 'append')


def _float_env(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("%s=%r is not a number, using %s", name, value, default)
        return default


BASE_URL = os.getenv('BASE_URL', 'https://uni10.in').rstrip('/')
TEMPLATE_PATH = os.getenv('SEO_TEMPLATE_PATH', os.path.join(PROJECT_ROOT, 'index.html'))
SEO_API_URL = os.getenv('SEO_API_URL', 'http://localhost:5055').rstrip('/')
DEV_BASE_URL = os.getenv('SEO_DEV_BASE_URL', 'http://localhost:8080').rstrip('/')
FETCH_TIMEOUT = _float_env('SEO_FETCH_TIMEOUT', 5.0)
TAG_POLICY = os.getenv('SEO_TAG_POLICY', 'replace').lower()
PASSTHROUGH_PREFIXES = tuple(
    p.strip() for p in os.getenv('SEO_PASSTHROUGH_PREFIXES', '/api,/uploads,/assets,/static').split(',')
    if p.strip()
)


def configure_logging():
    logging.basicConfig(
        format=LOG_FORMAT,
        level=os.getenv('LOG_LEVEL', 'INFO').upper()
    )


def load_site_settings(path=None):
    """Read shop name and default SEO copy from config/settings.json"""
    config_path = path or os.path.join(PROJECT_ROOT, 'config', 'settings.json')
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            settings = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not load %s, using built-in defaults: %s", config_path, e)
        return DEFAULT_SITE_SETTINGS

    seo = dict(DEFAULT_SITE_SETTINGS['seo'])
    seo.update(settings.get('seo') or {})
    return {
        "shopName": settings.get('shopName') or DEFAULT_SITE_SETTINGS['shopName'],
        "currency": settings.get('currency') or DEFAULT_SITE_SETTINGS['currency'],
        "seo": seo
    }


def get_tag_policy():
    if TAG_POLICY not in TAG_POLICIES:
        logger.warning("Unknown SEO_TAG_POLICY '%s', falling back to 'replace'", TAG_POLICY)
        return 'replace'
    return TAG_POLICY


SITE_SETTINGS = load_site_settings()
