from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import DEFAULT_SERVER_CONFIG, ServerConfig
from .simulation.config import DEFAULT_SLOW_CONFIG, SlowConfig
from .simulation.slow import SimulatedOutageError, simulate_slow_response
from .vendors.config import DEFAULT_GENERATOR_CONFIG, GeneratorConfig
from .vendors.dependencies import get_store
from .vendors.models import (
    FavoriteResponse,
    FeaturedResponse,
    SlowResponse,
    Vendor,
    VendorMenu,
    VendorPage,
    VendorStats,
)
from .vendors.pagination import DEFAULT_LIMIT, coerce_int, paginate
from .vendors.store import VendorNotFoundError, VendorStore

logger = logging.getLogger(__name__)

API_NAME = "Street Food Safari API"
API_VERSION = "1.0.0"

ENDPOINTS = [
    "GET /vendors?page=&limit=&city=&cuisine=",
    "GET /vendors/:id",
    "GET /vendors/:id/menu",
    "POST /vendors/:id/favorite",
    "GET /search?q=",
    "GET /featured",
    "GET /stats",
    "GET /slow",
    "GET /metadata",
    "GET /health",
]

router = APIRouter()


# ── Public endpoints ─────────────────────────────────────────────────────


@router.get("/")
def root() -> dict:
    return {"name": API_NAME, "version": API_VERSION, "endpoints": ENDPOINTS}


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/metadata")
def metadata(request: Request) -> dict:
    config: GeneratorConfig = request.app.state.generator_config
    return {
        "cities": list(config.cities),
        "cuisines": list(config.cuisines),
        "priceLevels": list(config.price_levels),
    }


# ── Vendor endpoints ─────────────────────────────────────────────────────


@router.get("/vendors", response_model=VendorPage)
def list_vendors(
    page: str | None = None,
    limit: str | None = None,
    city: str | None = None,
    cuisine: str | None = None,
    store: VendorStore = Depends(get_store),
) -> VendorPage:
    items = store.filter(city=city, cuisine=cuisine)
    return paginate(items, page, limit)


@router.get("/vendors/{vendor_id}", response_model=Vendor)
def get_vendor(vendor_id: str, store: VendorStore = Depends(get_store)) -> Vendor:
    return store.get(vendor_id)


@router.get("/vendors/{vendor_id}/menu", response_model=VendorMenu)
def get_menu(vendor_id: str, store: VendorStore = Depends(get_store)) -> VendorMenu:
    return store.menu(vendor_id)


@router.post("/vendors/{vendor_id}/favorite", response_model=FavoriteResponse)
def toggle_favorite(
    vendor_id: str, store: VendorStore = Depends(get_store)
) -> FavoriteResponse:
    is_favorite = store.toggle_favorite(vendor_id)
    return FavoriteResponse(id=vendor_id, is_favorite=is_favorite)


@router.get("/search", response_model=VendorPage)
def search(
    q: str | None = None,
    limit: str | None = None,
    store: VendorStore = Depends(get_store),
) -> VendorPage:
    # Zero or unparseable limits fall back to the default rather than clamping to 1
    lim = coerce_int(limit, DEFAULT_LIMIT) or DEFAULT_LIMIT
    return paginate(store.search(q), 1, lim)


@router.get("/featured", response_model=FeaturedResponse)
def featured(store: VendorStore = Depends(get_store)) -> FeaturedResponse:
    return FeaturedResponse(data=store.featured())


@router.get("/stats", response_model=VendorStats)
def stats(store: VendorStore = Depends(get_store)) -> VendorStats:
    return store.stats()


# ── Resilience testing ───────────────────────────────────────────────────


@router.get("/slow", response_model=SlowResponse)
async def slow(request: Request) -> SlowResponse:
    result = await simulate_slow_response(request.app.state.slow_config)
    return SlowResponse(**result)


# ── Error mapping ────────────────────────────────────────────────────────


async def _vendor_not_found(request: Request, exc: VendorNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": "Not found"})


async def _simulated_outage(request: Request, exc: SimulatedOutageError) -> JSONResponse:
    return JSONResponse(status_code=503, content={"error": "Temporary outage"})


# ── Application factory ──────────────────────────────────────────────────


def create_app(
    generator_config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
    server_config: ServerConfig = DEFAULT_SERVER_CONFIG,
    slow_config: SlowConfig = DEFAULT_SLOW_CONFIG,
) -> FastAPI:
    """Build the API with its own freshly generated vendor store."""
    app = FastAPI(title=API_NAME, version=API_VERSION)

    app.state.generator_config = generator_config
    app.state.slow_config = slow_config
    app.state.store = VendorStore.generate(generator_config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(server_config.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        elapsed_ms = round((time.time() - start_time) * 1000, 1)
        logger.info(
            "%s %s %d %.1f ms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    app.add_exception_handler(VendorNotFoundError, _vendor_not_found)
    app.add_exception_handler(SimulatedOutageError, _simulated_outage)
    app.include_router(router)
    return app


app = create_app()
