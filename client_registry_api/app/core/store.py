"""
In‑memory client collection.

``ClientStore`` owns the ordered list of client records for one
application instance.  It replaces a database connection for this
service: the FastAPI app keeps one store on ``app.state`` and the API
layer receives it through a dependency, so tests can inject a
pre‑seeded store without resetting module globals.

Every operation holds ``self._lock`` for its whole read or
read‑modify‑write sequence, so at most one mutation is in flight even
when FastAPI runs handlers concurrently.  Records handed out are
copies; callers never see the list itself.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from client_registry_api.app.schemas.client import Client

_CLIENT_LIST = TypeAdapter(List[Client])


class ClientStore:
    """Ordered, lock‑guarded collection of :class:`Client` records."""

    def __init__(self, clients: Optional[Iterable[Client]] = None) -> None:
        self._lock = threading.Lock()
        self._clients: List[Client] = [c.model_copy() for c in clients or ()]

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ClientStore":
        """Build a store seeded from a JSON array of client objects.

        Raises ``ValueError`` if the file is not valid JSON or does not
        hold a list of clients.
        """
        raw = Path(path).read_text(encoding="utf-8")
        try:
            clients = _CLIENT_LIST.validate_python(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as exc:
            raise ValueError(f"Invalid client seed file {path}: {exc}") from exc
        return cls(clients)

    def __len__(self) -> int:
        with self._lock:
            return len(self._clients)

    def _index_of(self, client_id: int) -> int:
        # Caller must hold the lock.
        for index, client in enumerate(self._clients):
            if client.id == client_id:
                return index
        return -1

    def list_all(self) -> List[Client]:
        """Return copies of every record in insertion order."""
        with self._lock:
            return [c.model_copy() for c in self._clients]

    def get(self, client_id: int) -> Optional[Client]:
        """Return the first record whose id matches, or ``None``."""
        with self._lock:
            index = self._index_of(client_id)
            if index < 0:
                return None
            return self._clients[index].model_copy()

    def append(self, client: Client) -> Client:
        """Append a record to the end of the collection.

        Duplicate ids are accepted.
        """
        with self._lock:
            self._clients.append(client.model_copy())
            return client.model_copy()

    def update_name(self, client_id: int, name: str) -> Optional[Client]:
        """Replace the name of the first matching record.

        The id of the stored record is left untouched.  Returns the
        updated record, or ``None`` when no record matches.
        """
        with self._lock:
            index = self._index_of(client_id)
            if index < 0:
                return None
            self._clients[index].name = name
            return self._clients[index].model_copy()

    def remove(self, client_id: int) -> bool:
        """Remove the first matching record, keeping the others in order."""
        with self._lock:
            index = self._index_of(client_id)
            if index < 0:
                return False
            del self._clients[index]
            return True
