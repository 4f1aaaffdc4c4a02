from contextlib import asynccontextmanager
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import Settings
from .db.database import Database
from .db.repo import PropertyRepository, SQLPropertyRepository
from .exceptions import PropertyError, StoreUnavailable
from .models.dashboard import DashboardSnapshot
from .models.property import DeleteResponse, Property
from .services.aggregation import build_dashboard
from .services.presentation import ChartMode, chart_series
from .utils.logging import configure_logging, get_logger

LOGGER = get_logger("api")

router = APIRouter(prefix="/api")


def get_repository(request: Request) -> PropertyRepository:
    return request.app.state.repository


@router.get("/properties", response_model=List[Property])
def list_props(repo: PropertyRepository = Depends(get_repository)):
    return repo.list()


@router.post("/properties", response_model=Property, status_code=201)
def create_prop(payload: Any = Body(...), repo: PropertyRepository = Depends(get_repository)):
    return repo.create(payload)


@router.get("/properties/{property_id}", response_model=Property)
def get_prop(property_id: str, repo: PropertyRepository = Depends(get_repository)):
    return repo.get(property_id)


@router.put("/properties/{property_id}", response_model=Property)
def update_prop(property_id: str, payload: Any = Body(...), repo: PropertyRepository = Depends(get_repository)):
    return repo.update(property_id, payload)


@router.delete("/properties/{property_id}", response_model=DeleteResponse)
def delete_prop(property_id: str, repo: PropertyRepository = Depends(get_repository)):
    repo.delete(property_id)
    return DeleteResponse(message="Property deleted successfully")


@router.get("/dashboard", response_model=DashboardSnapshot)
def dashboard(repo: PropertyRepository = Depends(get_repository)):
    return build_dashboard(repo.list())


@router.get("/dashboard/charts/{mode}")
def chart(mode: ChartMode, repo: PropertyRepository = Depends(get_repository)):
    return chart_series(repo.list(), mode)


@router.get("/health")
def health(): return {"status": "ok"}


async def _property_error(request: Request, exc: PropertyError) -> JSONResponse:
    if exc.status_code >= 500:
        LOGGER.error("request_failed path=%s error=%s", request.url.path, exc)
    else:
        LOGGER.info("request_rejected path=%s status=%d error=%s", request.url.path, exc.status_code, exc)
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def _malformed_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"field": "body", "message": str(err.get("msg", "Invalid request body"))}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"error": "Invalid property data", "details": details})


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the API around one database handle shared by every request."""

    settings = settings or Settings.from_env()
    configure_logging(level=settings.log_level)
    database = database or Database(settings.database_url, echo=settings.sql_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            database.create_schema()
        except StoreUnavailable as exc:
            LOGGER.error("schema_setup_failed error=%s", exc)
        yield
        database.dispose()

    app = FastAPI(title="Hotel Portfolio API", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database
    app.state.repository = SQLPropertyRepository(database)
    app.add_exception_handler(PropertyError, _property_error)
    app.add_exception_handler(RequestValidationError, _malformed_body)
    app.include_router(router)
    return app


app = create_app()
