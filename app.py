from flask import Flask, request, redirect, url_for, flash, jsonify, abort
from flask_migrate import Migrate
import click
import logging

from config import get_config, PROCESS_LOCAL_CACHES
from models import db
from services import (
    Redirect,
    cache,
    create_supplier, update_supplier, delete_supplier,
    create_ingredient, update_ingredient, delete_ingredient,
    create_order, update_order_status, delete_order,
    create_template, delete_template,
    get_dashboard_data,
    suppliers_page, ingredients_page, orders_page, order_detail,
    new_order_page, templates_page, new_template_page,
    OrderFormState,
)
from utils import setup_logging

logger = logging.getLogger(__name__)

migrate = Migrate()


def _json_payload():
    """Request JSON body as a dict; anything else counts as empty."""
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _respond(result):
    """JSON response for a service result: 400 for errors, 200 otherwise."""
    if result.get('error'):
        return jsonify(result), 400
    return jsonify(result)


def create_app(env=None, config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(get_config(env))
    app.config.update(config_overrides or {})

    if not (app.debug or app.testing) and app.config['CACHE_TYPE'] in PROCESS_LOCAL_CACHES:
        raise RuntimeError(
            f"CACHE_TYPE={app.config['CACHE_TYPE']} is per-process; use NullCache or a "
            "shared backend such as RedisCache when running more than one worker"
        )

    setup_logging(app.config['LOG_LEVEL'])

    db.init_app(app)
    migrate.init_app(app, db)
    cache.init_app(app)

    register_routes(app)
    register_commands(app)
    return app


def register_routes(app):

    @app.errorhandler(Redirect)
    def handle_redirect(signal):
        # Successful create/delete: navigate instead of answering with a result
        if signal.message:
            flash(signal.message, 'success')
        return redirect(url_for(signal.endpoint, **signal.values))

    # ============================================
    # ROUTES - DASHBOARD
    # ============================================

    @app.route('/')
    def index():
        return jsonify(get_dashboard_data())

    # ============================================
    # ROUTES - SUPPLIERS
    # ============================================

    @app.route('/suppliers')
    def suppliers_list():
        return jsonify(suppliers_page())

    @app.route('/suppliers', methods=['POST'])
    def supplier_add():
        return _respond(create_supplier(request.form))

    @app.route('/suppliers/<int:id>/edit', methods=['POST'])
    def supplier_edit(id):
        return _respond(update_supplier(id, request.form))

    @app.route('/suppliers/<int:id>/delete', methods=['POST'])
    def supplier_delete(id):
        return _respond(delete_supplier(id))

    # ============================================
    # ROUTES - INGREDIENTS
    # ============================================

    @app.route('/ingredients')
    def ingredients_list():
        return jsonify(ingredients_page(request.args.get('category')))

    @app.route('/ingredients', methods=['POST'])
    def ingredient_add():
        return _respond(create_ingredient(request.form))

    @app.route('/ingredients/<int:id>/edit', methods=['POST'])
    def ingredient_edit(id):
        return _respond(update_ingredient(id, request.form))

    @app.route('/ingredients/<int:id>/delete', methods=['POST'])
    def ingredient_delete(id):
        return _respond(delete_ingredient(id))

    # ============================================
    # ROUTES - ORDERS
    # ============================================

    @app.route('/orders')
    def orders_list():
        return jsonify(orders_page())

    @app.route('/orders/new')
    def order_new():
        return jsonify(new_order_page())

    @app.route('/orders/new/template/<int:template_id>', methods=['POST'])
    def order_new_from_template(template_id):
        page = new_order_page()
        form = OrderFormState(page['ingredients'], page['templates'])
        if template_id not in form.templates:
            abort(404)
        form.load_template(template_id)
        return jsonify(form.to_dict())

    @app.route('/orders', methods=['POST'])
    def order_add():
        payload = _json_payload()
        return _respond(create_order(
            payload.get('status', 'draft'),
            payload.get('notes', ''),
            payload.get('items') or [],
        ))

    @app.route('/orders/<int:order_id>', endpoint='order_detail')
    def order_detail_view(order_id):
        order = order_detail(order_id)
        if order is None:
            abort(404)
        return jsonify(order)

    @app.route('/orders/<int:order_id>/status', methods=['POST'])
    def order_status(order_id):
        return _respond(update_order_status(order_id, request.form.get('status', '')))

    @app.route('/orders/<int:order_id>/delete', methods=['POST'])
    def order_delete(order_id):
        return _respond(delete_order(order_id))

    # ============================================
    # ROUTES - TEMPLATES
    # ============================================

    @app.route('/templates')
    def templates_list():
        return jsonify(templates_page())

    @app.route('/templates/new')
    def template_new():
        return jsonify(new_template_page())

    @app.route('/templates', methods=['POST'])
    def template_add():
        payload = _json_payload()
        return _respond(create_template(
            payload.get('name', ''),
            payload.get('description', ''),
            payload.get('items') or [],
        ))

    @app.route('/templates/<int:id>/delete', methods=['POST'])
    def template_delete(id):
        return _respond(delete_template(id))


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db(app):
    with app.app_context():
        db.create_all()
        logger.info("Database tables created")


def register_commands(app):

    @app.cli.command('init-db')
    def init_db_command():
        """Create all database tables."""
        db.create_all()
        click.echo('Initialized the database.')


if __name__ == '__main__':
    app = create_app()
    init_db(app)
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
