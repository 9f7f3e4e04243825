import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from .core.config import settings
from .core.constants import DefaultErrors
from .db.base import Base
from .db.session import engine
from .api.routes import router
from .services.orchestration import ServiceResult

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Hometasks API", version="0.1.0")

@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)


def _error_field(loc) -> str:
    # loc looks like ("body", "items", 0, "name"); report the top-level field
    for part in loc[1:]:
        if isinstance(part, str):
            return part
    return "payload"


@app.exception_handler(RequestValidationError)
def on_validation_error(request: Request, exc: RequestValidationError):
    errors: dict[str, str] = {}
    for err in exc.errors():
        message = DefaultErrors.IS_REQUIRED if err.get("type") == "missing" else DefaultErrors.NOT_ALLOWED_VALUE
        errors.setdefault(_error_field(err.get("loc", ())), message)
    logger.info(f"Rejected request to {request.url.path}: {errors}")
    return ServiceResult.errors(errors).to_response()

app.include_router(router)
