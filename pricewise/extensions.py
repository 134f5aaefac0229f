# pricewise/extensions.py
from __future__ import annotations

from quart import Quart

from .config import ServiceConfigs
from .utils.logger import get_logger
from .services.pricing import Catalog, PriceCalculator


async def init_extensions(app: Quart, catalog: Catalog | None = None) -> None:
    """Initialise the catalog and calculator and attach them to the app.

    This should be called once when the application starts.  The
    resulting objects are stored on ``app.extensions`` for later use.
    An explicit ``catalog`` takes precedence over the seed setting.
    """

    logger = get_logger(__name__)

    # Load service configuration from environment (via pydantic)
    service_configs = ServiceConfigs()
    app.extensions["service_configs"] = service_configs
    logger.info("ServiceConfigs loaded: bind = %s", service_configs.bind)

    if catalog is None:
        catalog = Catalog.seeded() if service_configs.seed_catalog else Catalog()
    app.extensions["catalog"] = catalog
    app.extensions["price_calculator"] = PriceCalculator(catalog)
    logger.info(
        "Catalog initialised (products=%d, rules=%d)",
        len(catalog.list_products()),
        len(catalog.list_rules()),
    )
