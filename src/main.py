from contextlib import asynccontextmanager
from fastapi import FastAPI

from src.adapters.primary.api.routes.definitions import router as definitions_router
from src.adapters.primary.api.routes.instances import router as instances_router
from src.adapters.primary.api.routes.health import router as health_router
from src.adapters.primary.api.routes.metrics import router as metrics_router
from src.shared.config import settings
from src.shared.logger import configure_logging, get_logger

# Configure logging early
configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("application_started", version=settings.APP_VERSION)
    yield
    # Registries are in-memory only; everything is dropped here.
    logger.info("application_shutdown_complete")


app = FastAPI(
    title=settings.APP_NAME,
    description="Finite-state workflow definitions and the instances that run them.",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# Exceptions
from src.domain.workflow.exceptions import WorkflowException
from src.adapters.primary.api.error_handlers import workflow_exception_handler, general_exception_handler

app.add_exception_handler(WorkflowException, workflow_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Routes
app.include_router(definitions_router)
app.include_router(instances_router)
app.include_router(health_router)
if settings.METRICS_ENABLED:
    app.include_router(metrics_router)
