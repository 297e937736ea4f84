import logging
from fastapi import FastAPI
from datetime import datetime
from app.core.config import settings
from app.core.errors import register_error_handlers
from app.core.logging_config import setup_logging
from app.middleware.metrics import MetricsMiddleware, new_metrics
from app.routes import system
from app.database.connection import Base, engine
from app.routes.dashboard import router as dashboard_router
from app.routes.rankings import router as rankings_router
from app.routes.products import router as products_router
from app.routes.watchlist import router as watchlist_router
from app.routes.compare import router as compare_router
from app.models import category, data_collection_log, platform, price_history, product, product_analysis, ranking, watchlist  # noqa: F401

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_TITLE)

app.add_middleware(MetricsMiddleware)
register_error_handlers(app)


app.include_router(dashboard_router, prefix=settings.API_PREFIX)
app.include_router(rankings_router, prefix=settings.API_PREFIX)
app.include_router(products_router, prefix=settings.API_PREFIX)
app.include_router(watchlist_router, prefix=settings.API_PREFIX)
app.include_router(compare_router, prefix=settings.API_PREFIX)
app.include_router(system.router)

@app.on_event("startup")
async def startup_event():
    Base.metadata.create_all(bind=engine)
    app.state.start_time = datetime.utcnow()
    app.state.metrics = new_metrics()
    logger.info("%s started", settings.APP_TITLE)
