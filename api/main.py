"""Room3D FastAPI Application"""

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from dotenv import load_dotenv
load_dotenv()  # Load .env file

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import events, health, lighting, render, scene, view
from .state import get_session

# Configure logging
logging.basicConfig(
    level=os.getenv("ROOM3D_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan handler."""
    logger.info("Starting Room3D API...")
    get_session()
    yield
    get_session().close()
    logger.info("Shutting down Room3D API...")


app = FastAPI(
    title="Room3D",
    description="Pseudo-3D room and furniture rendering API",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for the plan editor frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(scene.router, prefix="/api/scene", tags=["Scene"])
app.include_router(view.router, prefix="/api/view", tags=["View"])
app.include_router(lighting.router, prefix="/api/lighting", tags=["Lighting"])
app.include_router(render.router, prefix="/api/render", tags=["Render"])
app.include_router(events.router, prefix="/api/events", tags=["Events"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Room3D",
        "version": "0.1.0",
        "status": "running",
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=os.getenv("ROOM3D_HOST", "127.0.0.1"),
        port=int(os.getenv("ROOM3D_PORT", "8000")),
    )
