#!/usr/bin/env python3
"""
Seed sample categories and products (with slugs) for trying out product page meta tags
"""
import sys
import os

# Add parent directory to path to allow importing the package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
load_dotenv(os.path.join(PROJECT_ROOT, '.env'))

from storefront_seo.database import get_db_connection, init_db, slugify

CATEGORIES = ['Drinkware', 'T-Shirts', 'Accessories']

PRODUCTS = [
    {
        'name': 'Blue Mug',
        'description': 'A 350 ml ceramic mug in deep ocean blue. Dishwasher and microwave safe.',
        'price': 499,
        'images': ['https://images.unsplash.com/photo-1514228742587-6b1558fcca3d?w=800'],
        'category': 'Drinkware'
    },
    {
        'name': 'Classic White Tee',
        'description': 'Everyday cotton crew-neck t-shirt with a relaxed fit.',
        'price': 799,
        'images': ['https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?w=800'],
        'category': 'T-Shirts',
        'keywords': 'white t-shirt, cotton tee, uni10'
    },
    {
        'name': 'Oversized "Logo" Hoodie',
        'description': 'Heavyweight fleece hoodie with the uni10 logo print on the chest.',
        'price': 1999,
        'images': ['https://images.unsplash.com/photo-1556821840-3a63f95609a7?w=800'],
        'category': 'T-Shirts'
    },
    {
        'name': 'Canvas Tote Bag',
        'description': '',
        'price': 599,
        'images': ['/uploads/tote-bag.jpg'],
        'category': 'Accessories'
    },
]

def seed_database():
    print("Connecting to database...")
    init_db()

    conn = get_db_connection()
    cur = conn.cursor()

    print("Seeding categories...")
    cat_mapping = {}
    for i, name in enumerate(CATEGORIES):
        cur.execute('SELECT id FROM categories WHERE name = %s', (name,))
        row = cur.fetchone()
        if not row:
            cur.execute(
                'INSERT INTO categories (name, sort_order) VALUES (%s, %s) RETURNING id',
                (name, i)
            )
            row = cur.fetchone()
        cat_mapping[name] = row['id']
    print(f"Seeded {len(cat_mapping)} categories.")

    added = 0
    for product in PRODUCTS:
        cur.execute('''
            INSERT INTO products (slug, name, description, price, images, category_id, keywords)
            VALUES (%s, %s, %s, %s, %s, %s, %s)
            ON CONFLICT (slug) DO NOTHING
        ''', (
            slugify(product['name']), product['name'], product['description'], product['price'],
            product['images'], cat_mapping.get(product['category']), product.get('keywords')
        ))
        added += cur.rowcount

    conn.commit()
    cur.close()
    conn.close()
    print(f"Added {added} products ({len(PRODUCTS) - added} already existed)")
    print("Try: curl http://localhost:5055/products/blue-mug")

if __name__ == '__main__':
    seed_database()
