"""Client Registry API client.

This module defines a small client wrapper around the ``/clients``
REST API served by ``client_registry_api``.  The client uses the
``requests`` library internally to make HTTP calls and exposes one
method per operation:

* :meth:`ClientRegistryAPI.list_clients` – return every client.
* :meth:`ClientRegistryAPI.get_client` – fetch a single client by id.
* :meth:`ClientRegistryAPI.create_client` – append a new client.
* :meth:`ClientRegistryAPI.update_client` – rename an existing client.
* :meth:`ClientRegistryAPI.delete_client` – delete a client.

Every method returns a ``(data, error)`` tuple instead of raising.
The server answers errors with plain‑text bodies such as
``Client not found``; that text becomes the ``message`` of the error.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ClientRegistryAPI:
    """Client for interacting with the client registry API."""

    BASE_PATH = "/clients"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service including any configured
                prefix, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for an empty body) and
            ``error`` is ``None``. On failure, ``data`` is ``None`` and
            ``error`` is a dictionary with keys ``status_code`` and
            ``message``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                message = exc.response.text.strip()
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _client_path(self, client_id: Any) -> str:
        return f"{self.BASE_PATH}/{client_id}"

    # ------------------------------------------------------------------
    # Client operations
    # ------------------------------------------------------------------
    def list_clients(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all clients in creation order.

        Returns:
            A tuple ``(clients, error)``. ``clients`` is empty on failure.
        """
        data, error = self._request("GET", self.BASE_PATH)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_client(self, client_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single client by ID."""
        return self._request("GET", self._client_path(client_id))

    def create_client(self, client_id: int, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a client and return the record echoed by the server."""
        return self._request("POST", self.BASE_PATH, json_body={"id": client_id, "name": name})

    def update_client(self, client_id: Any, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Rename a client and return the updated record.

        The server keeps the stored id and only reads ``name`` from the
        body; the id is repeated when it is already an integer.
        """
        body: Dict[str, Any] = {"name": name}
        if isinstance(client_id, int):
            body["id"] = client_id
        return self._request("PUT", self._client_path(client_id), json_body=body)

    def delete_client(self, client_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a client.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", self._client_path(client_id))
        if error:
            return False, error
        return True, None
