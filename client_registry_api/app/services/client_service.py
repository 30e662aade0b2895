"""
Service layer for client records.

``ClientService`` implements the five registry operations on top of a
:class:`~client_registry_api.app.core.store.ClientStore`.  Lookups are
linear and return the first record with a matching id; ids are not
required to be unique, so creating a client never checks for an
existing id.  Methods return ``None``/``False`` when a record is
missing and leave it to the API layer to map that to HTTP 404.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from client_registry_api.app.core.store import ClientStore
from client_registry_api.app.schemas.client import Client

logger = logging.getLogger(__name__)


class ClientService:
    """Operations over one client store."""

    def __init__(self, store: ClientStore) -> None:
        self.store = store

    async def list_clients(self) -> List[Client]:
        """Return every client in insertion order."""
        return self.store.list_all()

    async def get_client(self, client_id: int) -> Optional[Client]:
        """Retrieve the first client with the given id."""
        return self.store.get(client_id)

    async def create_client(self, data: Client) -> Client:
        """Append ``data`` to the collection and return it."""
        client = self.store.append(data)
        logger.info("Created client %s", client.id)
        return client

    async def update_client(self, client_id: int, data: Client) -> Optional[Client]:
        """Replace the name of an existing client.

        Only ``name`` is taken from ``data``; an id in the body that
        differs from ``client_id`` is ignored.  Returns the updated
        client or ``None`` if no client has that id.
        """
        client = self.store.update_name(client_id, data.name)
        if client is not None:
            logger.info("Updated client %s", client_id)
        return client

    async def delete_client(self, client_id: int) -> bool:
        """Delete the first client with the given id.

        Returns ``True`` if a record was removed, ``False`` otherwise.
        """
        deleted = self.store.remove(client_id)
        if deleted:
            logger.info("Deleted client %s", client_id)
        return deleted
