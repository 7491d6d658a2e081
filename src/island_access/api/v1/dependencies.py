"""Shared API dependencies for identifying the viewer and reaching the store."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from island_access.collections import MEMBERS
from island_access.core.exceptions import InvalidIdError
from island_access.core.security import decode_access_token
from island_access.repositories.document_store import (
    Document,
    DocumentStore,
    get_document_store,
)

# Anonymous viewers send no Authorization header at all.
bearer_scheme = HTTPBearer(auto_error=False)


def get_store() -> DocumentStore:
    """Return the document store used by request handlers."""
    return get_document_store()


StoreDep = Annotated[DocumentStore, Depends(get_store)]


def _unauthorized(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


async def get_viewer(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    store: StoreDep,
) -> Document | None:
    """Return the member presenting a bearer token, or None when anonymous.

    Raises:
        HTTPException: If a token is presented but invalid or names no member.
    """
    if credentials is None:
        return None
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError as err:
        raise _unauthorized() from err

    subject = payload.get("sub")
    if subject is None:
        raise _unauthorized()
    try:
        member_id = store.to_id(subject)
    except InvalidIdError as err:
        raise _unauthorized() from err

    member = await store.read(MEMBERS, {"id": member_id})
    if member is None:
        raise _unauthorized("Member not found")
    return member


# Type alias for the optional viewer dependency
ViewerDep = Annotated[Document | None, Depends(get_viewer)]
