import pytest

from storefront_seo.utils.seo import (
    SeoTagSet, extract_product_slug, generate_product_seo_tags, create_meta_tags_html
)


@pytest.mark.parametrize("path, expected", [
    ("/products/blue-mug", "blue-mug"),
    ("/products/blue-mug/reviews", "blue-mug"),
    ("/products/blue-mug?ref=home", "blue-mug"),
    ("/products/Blue%20Mug", "Blue%20Mug"),
    ("/products/", None),
    ("/products", None),
    ("/about", None),
    ("/shop/products/blue-mug", None),
    ("", None),
])
def test_extract_product_slug(path, expected):
    assert extract_product_slug(path) == expected


def test_default_tags_without_product(site):
    tags = generate_product_seo_tags(None, "https://uni10.in", site=site)
    assert tags.title == site['seo']['title']
    assert tags.description == site['seo']['description']
    assert tags.og_image == "https://uni10.in/og-image.png"
    assert tags.keywords == "uni10, online shopping"
    assert tags.canonical_url == "https://uni10.in/"


def test_product_tags(site, blue_mug):
    tags = generate_product_seo_tags(blue_mug, "https://uni10.in/", site=site)
    assert tags.title == "Blue Mug | uni10"
    assert tags.og_title == tags.title
    assert tags.description == "A 350 ml ceramic mug in deep ocean blue."
    assert tags.og_description == tags.description
    assert tags.og_image == "https://cdn.uni10.in/blue-mug.jpg"
    assert tags.keywords == "Blue Mug, Drinkware, uni10"
    assert tags.canonical_url == "https://uni10.in/products/blue-mug"


def test_generation_is_deterministic(site, blue_mug):
    first = generate_product_seo_tags(blue_mug, "https://uni10.in", site=site)
    second = generate_product_seo_tags(dict(blue_mug), "https://uni10.in", site=site)
    assert first == second


def test_long_description_is_cut_on_a_word(site, blue_mug):
    blue_mug['description'] = "Glazed  stoneware\nmug " * 30
    tags = generate_product_seo_tags(blue_mug, "https://uni10.in", site=site)
    assert len(tags.description) <= 160
    assert tags.description.endswith("...")
    assert "\n" not in tags.description
    assert "  " not in tags.description


def test_missing_description_mentions_price(site, blue_mug):
    blue_mug['description'] = None
    tags = generate_product_seo_tags(blue_mug, "https://uni10.in", site=site)
    assert tags.description == "Buy Blue Mug online at uni10 for ₹499."


def test_relative_image_and_id_fallback(site):
    product = {'id': 'abc-123', 'name': 'Tote', 'images': ['', '/uploads/tote.jpg']}
    tags = generate_product_seo_tags(product, "https://uni10.in", site=site)
    assert tags.og_image == "https://uni10.in/uploads/tote.jpg"
    assert tags.canonical_url == "https://uni10.in/products/abc-123"
    assert tags.description == "Buy Tote online at uni10."


def test_explicit_keywords_are_deduplicated(site, blue_mug):
    blue_mug['keywords'] = "mug, Mug, blue mug, , uni10"
    tags = generate_product_seo_tags(blue_mug, "https://uni10.in", site=site)
    assert tags.keywords == "mug, blue mug, uni10"


def test_minimal_product_does_not_raise(site):
    tags = generate_product_seo_tags({'name': 'X'}, "https://uni10.in", site=site)
    assert tags.title == "X | uni10"
    assert tags.og_image == "https://uni10.in/og-image.png"


def test_rendered_block_escapes_quotes():
    tags = SeoTagSet(
        title='Say "hi" | uni10',
        description='The "best" mug',
        og_title='Say "hi" | uni10',
        og_description='The "best" mug',
        og_image='https://uni10.in/a.jpg',
        canonical_url='https://uni10.in/products/say-hi',
        keywords=None
    )
    block = create_meta_tags_html(tags)
    assert '<title>Say &quot;hi&quot; | uni10</title>' in block
    assert 'content="The &quot;best&quot; mug"' in block
    assert '"hi"' not in block
    assert 'name="keywords"' not in block
    assert '<link rel="canonical" href="https://uni10.in/products/say-hi" />' in block
