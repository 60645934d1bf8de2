"""Record store: persistence of estimation records over the Supabase REST API."""

from estimation_hub.store.client import get_store_client, reset_client
from estimation_hub.store.service import (
    build_list_params,
    create_estimation,
    delete_estimation,
    get_estimation,
    list_estimations,
    update_estimation,
)

__all__ = [
    "build_list_params",
    "create_estimation",
    "delete_estimation",
    "get_estimation",
    "get_store_client",
    "list_estimations",
    "reset_client",
    "update_estimation",
]
