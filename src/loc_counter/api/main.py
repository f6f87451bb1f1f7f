"""FastAPI application entry point for the LOC Counter API."""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from loc_counter.api.routes import archives, health
from loc_counter.utils.logging_utils import configure_logging

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup."""
    configure_logging()
    yield


app = FastAPI(
    title="LOC Counter API",
    description="API for counting lines of code in uploaded project archives",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(archives.router, prefix="/api")


def main(reload: bool = True) -> None:
    """Start the development server."""
    import uvicorn

    uvicorn.run(
        "loc_counter.api.main:app",
        host=os.getenv("LOC_COUNTER_HOST", "0.0.0.0"),
        port=int(os.getenv("LOC_COUNTER_PORT", "8000")),
        reload=reload,
    )


if __name__ == "__main__":
    main()
