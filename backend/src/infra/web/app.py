from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from infra.adapter.json_localizer_catalog import get_localizer_catalog
from infra.config.config import get_config
from infra.logging.config import configure_logging
from infra.web.routers.format_router import router as format_router
from infra.web.routers.stats_router import router as stats_router

logger = structlog.stdlib.get_logger(__name__)


def create_app() -> FastAPI:
    config = get_config()

    configure_logging(
        log_level=config.LOGGING_CONFIG.LEVEL,
        json_logs=config.LOGGING_CONFIG.JSON_FORMAT,
        service_name=config.APP_NAME,
        environment=config.ENVIRONMENT,
        library_log_levels=config.LOGGING_CONFIG.LIBRARY_LOG_LEVELS,
    )

    localizer_catalog = get_localizer_catalog()

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        # The default bundle must load before the app serves requests.
        localizer_catalog.get(localizer_catalog.default_locale)
        logger.info(
            "Text formatter started",
            default_locale=localizer_catalog.default_locale,
            supported_locales=localizer_catalog.supported_locales(),
        )

        yield

        logger.info("Text formatter stopped")

    app = FastAPI(
        title=config.APP_NAME,
        version=config.VERSION,
        root_path=config.ROOT_PATH,
        docs_url="/apidocs",
        lifespan=lifespan,
    )

    app.state.host = config.HOST
    app.state.port = config.PORT

    app.include_router(stats_router)
    app.include_router(format_router)

    return app
