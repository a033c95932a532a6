import logging

from .. import database
from ..config import get_tag_policy
from ..utils.seo import extract_product_slug, generate_product_seo_tags, create_meta_tags_html
from ..utils.html_tags import (
    escape_attr, replace_title, replace_meta, replace_link, insert_before_head_close
)

logger = logging.getLogger(__name__)

KEYWORDS_TAG = '    <meta name="keywords" content="{}">\n'


def _meta_tag(attr, key, content):
    return f'    <meta {attr}="{key}" content="{escape_attr(content)}" />\n'


def apply_seo_tags(html, tags, policy=None):
    """Write a tag-set into an HTML document.

    policy:
      'replace' - title and description always replaced; og/twitter/canonical
                  only where the document already has them; keywords replaced
                  or inserted before </head>
      'upsert'  - like 'replace' but every missing tag is inserted
      'append'  - the rendered block goes before </head>, nothing is replaced
    """
    policy = policy or get_tag_policy()
    if policy == 'append':
        return insert_before_head_close(html, create_meta_tags_html(tags))

    upsert = policy == 'upsert'

    html, replaced = replace_title(html, tags.title)
    if not replaced and upsert:
        html = insert_before_head_close(html, f'    <title>{escape_attr(tags.title)}</title>\n')

    html, replaced = replace_meta(html, 'description', tags.description)
    if not replaced and upsert:
        html = insert_before_head_close(html, _meta_tag('name', 'description', tags.description))

    conditional = [
        ('property', 'og:title', tags.og_title),
        ('property', 'og:description', tags.og_description),
        ('name', 'twitter:title', tags.og_title),
        ('name', 'twitter:description', tags.og_description),
        ('property', 'og:image', tags.og_image),
        ('property', 'og:url', tags.canonical_url),
        ('name', 'twitter:image', tags.og_image),
    ]
    for attr, key, value in conditional:
        if not value:
            continue
        # Templates in the wild mix name= and property= for both prefixes
        html, replaced = replace_meta(html, key, value, attrs=(attr, 'property' if attr == 'name' else 'name'))
        if not replaced and upsert:
            html = insert_before_head_close(html, _meta_tag(attr, key, value))

    html, replaced = replace_link(html, 'canonical', tags.canonical_url)
    if not replaced and upsert:
        html = insert_before_head_close(
            html, f'    <link rel="canonical" href="{escape_attr(tags.canonical_url)}" />\n'
        )

    if tags.keywords:
        html, replaced = replace_meta(html, 'keywords', tags.keywords)
        if not replaced:
            html = insert_before_head_close(html, KEYWORDS_TAG.format(escape_attr(tags.keywords)))

    return html


def inject_meta_tags(html, pathname, base_url=None):
    """Return html with product-specific SEO tags for /products/<slug> paths.

    Any other path, an unknown product or a failing lookup leaves the
    document untouched.
    """
    slug = extract_product_slug(pathname)
    if not slug:
        return html

    try:
        product = database.find_product(slug)
        if not product:
            logger.debug("No product for slug '%s', serving template as is", slug)
            return html

        tags = generate_product_seo_tags(product, base_url)
        result = apply_seo_tags(html, tags)
    except Exception as e:
        logger.warning("SEO meta injection failed for %s: %s", pathname, e)
        return html

    logger.debug("Injected SEO tags for product '%s'", slug)
    return result
