# src/island_access/api/v1/endpoints/resources.py
"""Visibility-checked reads of individual resources."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, status
from fastapi.encoders import jsonable_encoder

from island_access.api.v1.dependencies import StoreDep, ViewerDep
from island_access.collections import RESOURCE_TYPES, collection_name
from island_access.core.exceptions import AccessError, InvalidIdError, StoreError
from island_access.services.access import can_access

router = APIRouter(prefix="/resources", tags=["resources"])

logger = logging.getLogger(__name__)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resource not found")


@router.get("/{resource_type}/{resource_id}")
async def read_resource(
    resource_type: str,
    resource_id: str,
    store: StoreDep,
    viewer: ViewerDep,
) -> dict[str, Any]:
    """Return a resource if the viewer may see it.

    Denied and missing resources are indistinguishable to the caller: both
    return 404.
    """
    if resource_type not in RESOURCE_TYPES:
        raise _not_found()
    try:
        document_id = store.to_id(resource_id)
    except InvalidIdError as err:
        raise _not_found() from err

    document = await store.read(collection_name(resource_type), {"id": document_id})
    if document is None:
        raise _not_found()

    try:
        allowed = await can_access(store, viewer, document)
    except (AccessError, StoreError) as err:
        logger.error("Access check failed for %s %s: %s", resource_type, resource_id, err)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not resolve resource access",
        ) from err
    except TimeoutError as err:
        logger.error("Access check timed out for %s %s", resource_type, resource_id)
        raise HTTPException(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail="Access check timed out",
        ) from err

    if not allowed:
        raise _not_found()
    return jsonable_encoder(dict(document))
