from flask import Flask
import os
import logging
import psycopg2

from .config import configure_logging, PROJECT_ROOT

logger = logging.getLogger(__name__)

def create_app(init_database=True):
    configure_logging()

    app = Flask(__name__, static_folder=os.path.join(PROJECT_ROOT, 'dist', 'public'), static_url_path='/static')

    if init_database:
        from .database import init_db
        try:
            with app.app_context():
                init_db()
        except psycopg2.Error as e:
            # Pages still render, just with the template's default tags
            logger.warning("Database unavailable at startup, product tags disabled until it is back: %s", e)

    from .routes.products import products_bp
    app.register_blueprint(products_bp, url_prefix='/api')

    from .middleware import SeoMetaMiddleware
    SeoMetaMiddleware(app)

    return app
