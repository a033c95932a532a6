#!/usr/bin/env python3
"""
Frontend dev server with product meta tags.

Serves files from FRONTEND_DIR (default: project root) and, for every page
navigation, runs index.html through the SEO transform. Needs the backend
(app.py) running at SEO_API_URL for product pages; without it the page is
served with its default tags.
"""
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
load_dotenv(os.path.join(PROJECT_ROOT, '.env'))

from flask import Flask, Response, send_from_directory
from storefront_seo.config import configure_logging
from storefront_seo.middleware import HTML_HEADERS, raw_request_path
from storefront_seo.services.dev_hook import transform_index_html

FRONTEND_DIR = os.path.abspath(os.getenv('FRONTEND_DIR', PROJECT_ROOT))


def create_dev_app(frontend_dir=FRONTEND_DIR):
    app = Flask(__name__, static_folder=None)

    @app.route('/', defaults={'path': ''})
    @app.route('/<path:path>')
    def serve(path):
        file_path = os.path.join(frontend_dir, path)
        if path and os.path.isfile(file_path):
            return send_from_directory(frontend_dir, path)

        # Re-read on every request so template edits show up immediately
        with open(os.path.join(frontend_dir, 'index.html'), 'r', encoding='utf-8') as f:
            html = f.read()
        return Response(transform_index_html(html, raw_request_path()), headers=HTML_HEADERS)

    return app


if __name__ == '__main__':
    configure_logging()
    port = int(os.getenv('DEV_PORT', 8080))
    create_dev_app().run(host='0.0.0.0', port=port, debug=True)
