#!/usr/bin/env python3
"""Start the Flask server with proper environment loading."""

import os
import sys

# Add root directory to python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.chdir(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

if __name__ == "__main__":
    database_url = os.environ.get('DATABASE_URL', '')
    pghost = os.environ.get('PGHOST', '')
    pgdatabase = os.environ.get('PGDATABASE', '')

    if database_url and len(database_url) > 10:
        print(f"Database URL found: {database_url[:30]}...")
    elif pghost and pgdatabase:
        print(f"Using individual PG vars: host={pghost}, db={pgdatabase}")
    else:
        print("WARNING: No database connection info available!")
        print("Product pages will be served with the default meta tags.")

    port = os.environ.get('PORT', '5055')
    os.system(f"gunicorn --bind 0.0.0.0:{port} --reuse-port app:app")
