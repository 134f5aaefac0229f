# pricewise/__init__.py
from __future__ import annotations

import os
from quart import Quart
from quart_schema import QuartSchema

from .config import get_config
from .utils.logger import get_logger
from .extensions import init_extensions
from .services.pricing import Catalog
from .routes.main import main_bp
from .routes.products import products_bp
from .routes.pricing import pricing_bp


async def create_app(
    config_object: object | None = None, catalog: Catalog | None = None
) -> Quart:
    """Application factory for the Pricewise Quart app.

    Args:
        config_object: Optional explicit configuration class.  If not
            provided, the value of the ``APP_ENV`` environment variable
            is used to determine which configuration class to load via
            :func:`get_config`.  See :mod:`pricewise.config` for details.
        catalog: Optional catalog to serve instead of the one built from
            :class:`pricewise.config.ServiceConfigs`.

    Returns:
        A fully configured :class:`quart.Quart` application instance.
    """

    app = Quart(__name__, instance_relative_config=True)

    QuartSchema(app)

    env = os.environ.get("APP_ENV", "default")
    if config_object:
        app.config.from_object(config_object)
    else:
        app.config.from_object(get_config(env))

    # respon JSON mengikuti urutan field model
    app.json.sort_keys = False  # type: ignore[attr-defined]

    logger = get_logger("quart.app")
    logger.info(f"Starting Pricewise app in {app.config['ENV']} mode")

    await init_extensions(app, catalog=catalog)
    logger.info("Extensions initialized successfully")

    # Register blueprints
    app.register_blueprint(main_bp)
    app.register_blueprint(products_bp, url_prefix="/api/products")
    app.register_blueprint(pricing_bp, url_prefix="/api")
    logger.info("Blueprints registered")

    return app
