# main.py
"""
Application entrypoint. Includes routers and mounts.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from groupmaker.api.routers import groups, roster
from groupmaker.config.settings import settings

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

app = FastAPI(title="Group Division Backend")

# Basic CORS (adjust origins in production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# include routers
app.include_router(groups.router, prefix="/api/v1/groups", tags=["groups"])
app.include_router(roster.router, prefix="/api/v1/roster", tags=["roster"])


@app.get("/")
async def index():
    """Health / basic info endpoint."""
    return {"status": "ok", "service": settings.service_name, "env": settings.ENV}
