import logging
from flask import Blueprint, request, jsonify
from ..database import get_products, find_product

logger = logging.getLogger(__name__)

products_bp = Blueprint('products', __name__)

@products_bp.route('/products', methods=['GET'])
def list_products():
    try:
        category = request.args.get('category')
        return jsonify({'data': get_products(category)})
    except Exception as e:
        logger.error("Error listing products: %s", e)
        return jsonify({'data': [], 'error': str(e)}), 500

@products_bp.route('/products/<slug>', methods=['GET'])
def get_product(slug):
    """Product by slug or id; {'data': null} when it doesn't exist"""
    try:
        return jsonify({'data': find_product(slug)})
    except Exception as e:
        logger.error("Error fetching product '%s': %s", slug, e)
        return jsonify({'data': None, 'error': str(e)}), 500
