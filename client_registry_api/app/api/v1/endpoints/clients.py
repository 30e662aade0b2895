"""
Client endpoints for API v1.

These routes expose create/read/update/delete operations over the
in‑memory client collection.  The ``{client_id}`` path segment is
bound as a string and checked by :func:`parse_client_id`, so a
non‑numeric, zero, negative or out‑of‑range id is answered with 400
before the collection is touched.  Request bodies are decoded by
:func:`read_client_body`, declared after the id so an invalid id is
reported even when the body is malformed too.  Error responses are
plain text (see ``core.errors``).
"""

import json
import re
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import ValidationError

from client_registry_api.app.core.errors import (
    BAD_REQUEST_MSG,
    CLIENT_NOT_FOUND_MSG,
    INVALID_CLIENT_ID_MSG,
)
from client_registry_api.app.schemas.client import MAX_CLIENT_ID, Client
from client_registry_api.app.services.client_service import ClientService

router = APIRouter()

_CLIENT_ID_RE = re.compile(r"[+-]?[0-9]+")


def parse_client_id(client_id: str) -> int:
    """Bind the ``{client_id}`` path parameter as a positive 64‑bit integer."""
    if not _CLIENT_ID_RE.fullmatch(client_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_CLIENT_ID_MSG)
    value = int(client_id)
    if value <= 0 or value > MAX_CLIENT_ID:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_CLIENT_ID_MSG)
    return value


async def read_client_body(request: Request) -> Client:
    """Decode the request body as a :class:`Client`.

    A JSON ``null`` body decodes to a client with zero values.  Anything
    that is not JSON, or does not have the expected field types, is
    answered with 400.
    """
    try:
        data = json.loads(await request.body())
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_REQUEST_MSG) from exc
    try:
        return Client.model_validate({} if data is None else data)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_REQUEST_MSG) from exc


def get_client_service(request: Request) -> ClientService:
    """Build a service around the store owned by the running app."""
    return ClientService(request.app.state.client_store)


@router.get("", response_model=List[Client])
async def list_clients(service: ClientService = Depends(get_client_service)) -> List[Client]:
    """Return all clients in the order they were created."""
    return await service.list_clients()


@router.get("/{client_id}", response_model=Client)
async def get_client(
    client_id: int = Depends(parse_client_id),
    service: ClientService = Depends(get_client_service),
) -> Client:
    """Retrieve a single client by ID.

    Raises 404 if no client has this ID.
    """
    client = await service.get_client(client_id)
    if client is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CLIENT_NOT_FOUND_MSG)
    return client


@router.post("", response_model=Client, status_code=status.HTTP_201_CREATED)
async def create_client(
    client_in: Client = Depends(read_client_body),
    service: ClientService = Depends(get_client_service),
) -> Client:
    """Append a new client; duplicate ids are accepted."""
    return await service.create_client(client_in)


@router.put("/{client_id}", response_model=Client)
async def update_client(
    client_id: int = Depends(parse_client_id),
    client_in: Client = Depends(read_client_body),
    service: ClientService = Depends(get_client_service),
) -> Client:
    """Replace the name of an existing client.

    The stored id never changes, whatever id the body carries.
    """
    client = await service.update_client(client_id, client_in)
    if client is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CLIENT_NOT_FOUND_MSG)
    return client


@router.delete("/{client_id}", status_code=status.HTTP_200_OK, response_class=Response)
async def delete_client(
    client_id: int = Depends(parse_client_id),
    service: ClientService = Depends(get_client_service),
) -> Response:
    """Delete a client; the response body is empty."""
    deleted = await service.delete_client(client_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CLIENT_NOT_FOUND_MSG)
    return Response(status_code=status.HTTP_200_OK)
