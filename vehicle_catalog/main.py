import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vehicle_catalog import __version__
from vehicle_catalog.config import settings
from vehicle_catalog.routers.vehicles import router as vehicles_router
from vehicle_catalog.seed import seed_data
from vehicle_catalog.services.vehicle_service import VehicleService
from vehicle_catalog.store import InMemoryVehicleStore, VehicleStore
from vehicle_catalog.utils.exceptions import register_exception_handlers

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    seed_data(app.state.vehicle_service, settings.vehicles_file)
    yield


def create_app(store: VehicleStore | None = None) -> FastAPI:
    app = FastAPI(
        title="Vehicle Catalog API",
        description="CRUD and query API over an in-memory vehicle catalog",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.state.vehicle_service = VehicleService(store if store is not None else InMemoryVehicleStore())

    app.include_router(vehicles_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check():
        return {"status": "success", "data": {"service": settings.app_name, "version": __version__}, "message": None}

    return app


app = create_app()
