import re
from dataclasses import dataclass
from typing import Optional

from ..config import BASE_URL, SITE_SETTINGS
from .html_tags import escape_attr

PRODUCT_PATH_RE = re.compile(r'^/products/([^/?]+)')
DESCRIPTION_LIMIT = 160


@dataclass(frozen=True)
class SeoTagSet:
    title: str
    description: str
    og_title: str
    og_description: str
    og_image: str
    canonical_url: str
    keywords: Optional[str] = None


def extract_product_slug(pathname):
    """Return the product slug from /products/<slug>, or None for any other path"""
    match = PRODUCT_PATH_RE.match(pathname or '')
    return match.group(1) if match else None


def _truncate(text, limit=DESCRIPTION_LIMIT):
    text = ' '.join(text.split())
    if len(text) <= limit:
        return text
    cut = text[:limit - 3].rsplit(' ', 1)[0]
    return cut.rstrip(' ,.;:') + '...'


def _absolute_url(url, base_url):
    if url.startswith(('http://', 'https://', '//')):
        return url
    return f"{base_url}/{url.lstrip('/')}"


def _first_image(product):
    images = product.get('images')
    if isinstance(images, (list, tuple)):
        for image in images:
            if image:
                return str(image)
    elif isinstance(images, str) and images:
        return images
    return product.get('image') or product.get('image_url')


def _split_keywords(value):
    if isinstance(value, str):
        return value.split(',')
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return []


def _product_keywords(product, shop_name):
    words = _split_keywords(product.get('keywords')) or _split_keywords(product.get('tags'))
    if not words:
        words = [
            str(product.get('name') or ''),
            str(product.get('category_name') or product.get('category') or ''),
            shop_name
        ]
    seen = []
    for word in (w.strip() for w in words):
        if word and word.lower() not in (s.lower() for s in seen):
            seen.append(word)
    return ', '.join(seen) or None


def _default_tags(base_url, site):
    seo = site['seo']
    image = seo.get('image') or ''
    return SeoTagSet(
        title=seo['title'],
        description=seo['description'],
        og_title=seo['title'],
        og_description=seo['description'],
        og_image=_absolute_url(image, base_url) if image else '',
        keywords=seo.get('keywords') or None,
        canonical_url=f"{base_url}/"
    )


def generate_product_seo_tags(product, base_url=None, site=None):
    """Build the SEO tag-set for a product page.

    Falls back to the site-wide default copy when product is None.
    """
    site = site or SITE_SETTINGS
    base_url = (base_url or BASE_URL).rstrip('/')
    if not product:
        return _default_tags(base_url, site)

    shop_name = site['shopName']
    name = ' '.join(str(product.get('name') or '').split())
    title = f"{name} | {shop_name}"

    description = _truncate(str(product.get('description') or ''))
    if not description:
        price = product.get('price')
        symbol = site.get('currency', {}).get('symbol', '₹')
        if price not in (None, ''):
            description = f"Buy {name} online at {shop_name} for {symbol}{price}."
        else:
            description = f"Buy {name} online at {shop_name}."

    image = _first_image(product) or site['seo'].get('image') or ''
    handle = product.get('slug') or product.get('id') or ''

    return SeoTagSet(
        title=title,
        description=description,
        og_title=title,
        og_description=description,
        og_image=_absolute_url(image, base_url) if image else '',
        keywords=_product_keywords(product, shop_name),
        canonical_url=f"{base_url}/products/{handle}"
    )


def create_meta_tags_html(tags):
    """Render a tag-set as a block of head markup"""
    lines = [
        f'<title>{escape_attr(tags.title)}</title>',
        f'<meta name="description" content="{escape_attr(tags.description)}" />',
    ]
    if tags.keywords:
        lines.append(f'<meta name="keywords" content="{escape_attr(tags.keywords)}" />')
    lines += [
        '<meta property="og:type" content="product" />',
        f'<meta property="og:title" content="{escape_attr(tags.og_title)}" />',
        f'<meta property="og:description" content="{escape_attr(tags.og_description)}" />',
        f'<meta property="og:image" content="{escape_attr(tags.og_image)}" />',
        f'<meta property="og:url" content="{escape_attr(tags.canonical_url)}" />',
        '<meta name="twitter:card" content="summary_large_image" />',
        f'<meta name="twitter:title" content="{escape_attr(tags.og_title)}" />',
        f'<meta name="twitter:description" content="{escape_attr(tags.og_description)}" />',
        f'<meta name="twitter:image" content="{escape_attr(tags.og_image)}" />',
        f'<link rel="canonical" href="{escape_attr(tags.canonical_url)}" />',
    ]
    return ''.join(f'    {line}\n' for line in lines)
