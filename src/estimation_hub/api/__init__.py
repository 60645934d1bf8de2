"""HTTP API routers for extraction and estimation records."""

from estimation_hub.api.estimations import router as estimations_router
from estimation_hub.api.extract import router as extract_router

__all__ = ["estimations_router", "extract_router"]
