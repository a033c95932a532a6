import os
import re
import logging
import psycopg2
from psycopg2.extras import RealDictCursor

logger = logging.getLogger(__name__)

CONNECT_TIMEOUT = int(os.getenv('PGCONNECT_TIMEOUT', '5'))

PRODUCT_SELECT = '''
    SELECT p.*, c.name AS category_name
    FROM products p
    LEFT JOIN categories c ON c.id = p.category_id
'''

def get_db_connection():
    database_url = os.getenv('DATABASE_URL')
    if database_url:
        if 'neon.tech' in database_url or 'amazonaws.com' in database_url:
            if 'sslmode=' not in database_url:
                database_url = database_url + ('&' if '?' in database_url else '?') + 'sslmode=require'
        conn = psycopg2.connect(database_url, cursor_factory=RealDictCursor, connect_timeout=CONNECT_TIMEOUT)
    else:
        conn = psycopg2.connect(
            host=os.getenv('PGHOST', 'localhost'),
            port=os.getenv('PGPORT', '5432'),
            user=os.getenv('PGUSER'),
            password=os.getenv('PGPASSWORD'),
            database=os.getenv('PGDATABASE'),
            cursor_factory=RealDictCursor,
            connect_timeout=CONNECT_TIMEOUT
        )
    return conn

def init_db():
    conn = get_db_connection()
    cur = conn.cursor()
    # gen_random_uuid() lives in pgcrypto on older servers
    cur.execute('CREATE EXTENSION IF NOT EXISTS pgcrypto')

    cur.execute('''
        CREATE TABLE IF NOT EXISTS categories (
            id VARCHAR PRIMARY KEY DEFAULT gen_random_uuid(),
            name TEXT NOT NULL,
            sort_order INTEGER DEFAULT 0,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    cur.execute('''
        CREATE TABLE IF NOT EXISTS products (
            id VARCHAR PRIMARY KEY DEFAULT gen_random_uuid(),
            slug TEXT UNIQUE,
            name TEXT NOT NULL,
            description TEXT,
            price INTEGER,
            images TEXT[],
            category_id VARCHAR REFERENCES categories(id) ON DELETE SET NULL,
            keywords TEXT
        )
    ''')

    # Tables created before slugs existed
    cur.execute('''
        DO $$
        BEGIN
            IF NOT EXISTS (SELECT 1 FROM information_schema.columns
                          WHERE table_name='products' AND column_name='slug') THEN
                ALTER TABLE products ADD COLUMN slug TEXT UNIQUE;
            END IF;
            IF NOT EXISTS (SELECT 1 FROM information_schema.columns
                          WHERE table_name='products' AND column_name='keywords') THEN
                ALTER TABLE products ADD COLUMN keywords TEXT;
            END IF;
        END $$;
    ''')

    conn.commit()
    cur.close()
    conn.close()
    logger.info("Database tables ready")

def _fetch_product(where, value):
    conn = get_db_connection()
    try:
        cur = conn.cursor()
        cur.execute(f'{PRODUCT_SELECT} WHERE {where} = %s LIMIT 1', (value,))
        product = cur.fetchone()
        cur.close()
    finally:
        conn.close()
    return dict(product) if product else None

def get_product_by_slug(slug):
    return _fetch_product('p.slug', slug)

def get_product_by_id(product_id):
    return _fetch_product('p.id', product_id)

def find_product(slug_or_id):
    """Look a product up by slug first, then by primary key"""
    return get_product_by_slug(slug_or_id) or get_product_by_id(slug_or_id)

def get_products(category=None):
    conn = get_db_connection()
    try:
        cur = conn.cursor()
        if category:
            cur.execute(f'{PRODUCT_SELECT} WHERE p.category_id = %s ORDER BY p.name', (category,))
        else:
            cur.execute(f'{PRODUCT_SELECT} ORDER BY p.name')
        products = cur.fetchall()
        cur.close()
    finally:
        conn.close()
    return [dict(p) for p in products]

def slugify(text):
    """'Blue Mug (XL)' -> 'blue-mug-xl'"""
    slug = re.sub(r'[^a-z0-9]+', '-', (text or '').lower())
    return slug.strip('-')
