"""Tracking FastAPI application.

Serves read-only shipment state while the simulator replays the configured
feed in the background. The simulator is started with the app and asked
to stop on shutdown.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000
"""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tracking.api import shipment_router, simulation_router
from tracking.domain import tracking
from tracking.simulation import get_simulator
from tracking.utils.logging import configure_logging

configure_logging()
tracking.init()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    simulator = get_simulator()
    task = simulator.start()
    yield
    simulator.stop()
    await asyncio.gather(task, return_exceptions=True)


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Shipment Tracking API",
    description="Live shipment state driven by a replayed carrier event feed",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(shipment_router)
app.include_router(simulation_router)


@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": tracking.name})
