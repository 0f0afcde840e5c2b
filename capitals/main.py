"""
FastAPI application for the state capitals service.

``create_app`` wires a ``CapitalStore`` into a ``CapitalHandler`` and
registers the routes. A module-level ``app`` built from the sample data
and environment settings is provided for ASGI servers::

    uvicorn capitals.main:app --port 8191
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Query, Request, Response
from fastapi.responses import JSONResponse

from .config import Settings, settings as default_settings
from .handlers import CapitalHandler, log_outcome
from .logging_config import setup_logging
from .models import CapitalQuery, Health, LookupKind
from .storage import CapitalStore, default_store

logger = logging.getLogger(__name__)

router = APIRouter()


def get_handler(request: Request) -> CapitalHandler:
    return request.app.state.capital_handler


# === Health ===


@router.get("/health", response_model=Health)
def health() -> Health:
    return Health()


# === Capital endpoints ===


@router.get("/capital", response_model=None)
def get_capital(
    state: Optional[str] = Query(default=None),
    handler: CapitalHandler = Depends(get_handler),
) -> Response:
    outcome = handler.get_capital(CapitalQuery.from_params(state))
    log_outcome(outcome)
    if outcome.kind is LookupKind.UNKNOWN:
        return Response(status_code=400)
    if outcome.kind is LookupKind.FOUND:
        return JSONResponse(status_code=200, content=outcome.payload.model_dump())
    return JSONResponse(status_code=200, content=outcome.payload)


@router.post("/capital", response_model=None)
def add_capital(handler: CapitalHandler = Depends(get_handler)) -> Response:
    # the request body is never read, so malformed payloads still get a 501
    return Response(status_code=handler.add_capital())


def create_app(store: Optional[CapitalStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around ``store`` (the sample data by default)."""
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    store = store if store is not None else default_store()
    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.capital_handler = CapitalHandler(store)
    app.state.settings = settings
    app.include_router(router)
    logger.debug("Serving %d capitals", len(store))
    return app


app = create_app()
