import pytest

TEMPLATE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <title>uni10 | Shop the latest collection online</title>
    <meta name="description" content="old">
    <meta property="og:title" content="uni10" />
    <meta property="og:description" content="Shop online" />
    <meta property="og:image" content="https://uni10.in/og-image.png" />
    <meta name="twitter:title" content="uni10" />
    <meta name="twitter:description" content="Shop online" />
    <link rel="canonical" href="https://uni10.in/" />
</head>
  <body>
    <div id="root"></div>
  </body>
</html>
"""

MINIMAL_TEMPLATE = """<html>
<head>
    <title>uni10</title>
    <meta name="description" content="old">
</head>
<body></body>
</html>
"""

SITE = {
    "shopName": "uni10",
    "currency": {"symbol": "₹", "code": "INR"},
    "seo": {
        "title": "uni10 | Shop the latest collection online",
        "description": "Discover the latest products at uni10.",
        "keywords": "uni10, online shopping",
        "image": "/og-image.png"
    }
}


@pytest.fixture
def template_html():
    return TEMPLATE


@pytest.fixture
def minimal_html():
    return MINIMAL_TEMPLATE


@pytest.fixture
def site():
    return SITE


@pytest.fixture
def blue_mug():
    return {
        'id': '6f1c2b0e-2d5e-4a41-9a53-0c6f1a7e9b10',
        'slug': 'blue-mug',
        'name': 'Blue Mug',
        'description': 'A 350 ml ceramic mug in deep ocean blue.',
        'price': 499,
        'images': ['https://cdn.uni10.in/blue-mug.jpg'],
        'category_name': 'Drinkware'
    }
