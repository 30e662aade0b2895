"""
Top‑level router for version 1 of the API.

This router aggregates domain routers under their base paths.  The
client registry is the only domain and lives under ``/clients``.
"""

from fastapi import APIRouter

from .endpoints import clients

router = APIRouter()

router.include_router(clients.router, prefix="/clients", tags=["clients"])
