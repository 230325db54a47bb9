import logging
from http import HTTPStatus

import flask
import utils.error_messages as errors
from config import load_app_config
from database.build_store import BuildStore
from database.catalog_store import CatalogStore
from database.db_connection import init_stores
from flask_cors import CORS
from routing.builds_routing import build_routing_blueprint
from routing.compatibility_routing import compatibility_routing_blueprint
from routing.product_routing import product_routing_blueprint
from routing.woocommerce.woocommerce_api import WooCommerceAPI
from routing.woocommerce_routing import woocommerce_routing_blueprint
from utils.error_messages_management import generate_error_data
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = True


def create_app(config=None, catalog=None, builds=None, woocommerce=None):
    """
    Builds the Flask application.

    Stores and the WooCommerce client are created here unless given, and live
    as long as the returned app.

    :param config: settings overriding the ones read from the environment
    :param catalog: CatalogStore to serve products from
    :param builds: BuildStore to save builds into
    :param woocommerce: WooCommerceAPI used to submit orders
    :return: flask app
    """
    app = flask.Flask(__name__)
    app.config.update(load_app_config())
    if config:
        app.config.update(config)
    CORS(app)

    if catalog is None:
        catalog = CatalogStore(seed=app.config["SEED_CATALOG"])
    if builds is None:
        builds = BuildStore()
    init_stores(app, catalog, builds)

    woocommerce = woocommerce if woocommerce is not None else WooCommerceAPI()
    woocommerce.init_app(app)

    app.register_blueprint(product_routing_blueprint, url_prefix="/api")
    app.register_blueprint(build_routing_blueprint, url_prefix="/api")
    app.register_blueprint(compatibility_routing_blueprint, url_prefix="/api")
    app.register_blueprint(woocommerce_routing_blueprint, url_prefix="/api")

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        error_text = errors.NOT_FOUND if e.code == HTTPStatus.NOT_FOUND else e.description
        return generate_error_data(error_text, user_ip=flask.request.remote_addr), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.exception("Unhandled error")
        return generate_error_data(errors.INTERNAL_ERROR, user_ip=flask.request.remote_addr), HTTPStatus.INTERNAL_SERVER_ERROR

    return app


if __name__ == "__main__":
    logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.INFO)
    app = create_app()
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
