import logging
from urllib.parse import urlsplit
from flask import request, Response

from . import config
from .services.template_cache import get_index_html
from .services.seo_injection import inject_meta_tags

logger = logging.getLogger(__name__)

HTML_HEADERS = {
    'Content-Type': 'text/html; charset=UTF-8',
    'Cache-Control': 'public, max-age=0, must-revalidate'
}


def raw_request_path():
    """Request path as sent by the client, without Werkzeug's percent-decoding"""
    raw = request.environ.get('RAW_URI') or request.environ.get('REQUEST_URI')
    if not raw:
        return request.path
    return urlsplit(raw).path or request.path


class SeoMetaMiddleware:
    """Serve the SPA shell with per-product meta tags for every frontend route.

    API and asset paths fall through to the regular Flask routes.
    """

    def __init__(self, app=None, passthrough_prefixes=None):
        self.passthrough_prefixes = tuple(passthrough_prefixes or config.PASSTHROUGH_PREFIXES)
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.before_request(self.before_request)

    def before_request(self):
        if request.method not in ('GET', 'HEAD'):
            return None
        if request.path.startswith(self.passthrough_prefixes):
            return None

        html = get_index_html()
        if html is None:
            return Response('Internal Server Error', status=500)

        try:
            base_url = request.host_url.rstrip('/')
            html = inject_meta_tags(html, raw_request_path(), base_url)
            return Response(html, status=200, headers=HTML_HEADERS)
        except Exception:
            logger.exception("Error in SEO meta injection middleware for %s", request.path)
            return Response('Internal Server Error', status=500)
