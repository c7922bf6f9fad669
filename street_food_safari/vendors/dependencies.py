from __future__ import annotations

from fastapi import Request

from .store import VendorStore


def get_store(request: Request) -> VendorStore:
    """Return the vendor store created for this application."""
    return request.app.state.store
