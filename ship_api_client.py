"""Space Ships API client.

A thin wrapper around the ship REST endpoints built on ``requests``.
Every method returns a tuple ``(data, error)``: on success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with ``status_code`` and ``message``.  Methods never raise
for HTTP or connection errors, so callers such as scripts can report
problems without wrapping every call.

* :meth:`list_ships` – filtered, ordered, paged list of ships.
* :meth:`count_ships` – number of ships matching the filters.
* :meth:`get_ship` – a single ship.
* :meth:`create_ship` / :meth:`update_ship` – write operations.
* :meth:`delete_ship` – remove a ship.

Filters are passed as keyword arguments using the query parameter
names of the API (``shipType``, ``minSpeed``, ``pageSize`` ...).
Arguments that are ``None`` are not sent.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class SpaceShipsAPI:
    """Client for the ship endpoints of the Space Ships API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/rest",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            prefix: Route prefix the API is mounted under.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/") + prefix.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            path: Path relative to the prefixed base URL (e.g. ``/ships``).
            params: Query parameters; ``None`` values are dropped.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        if params:
            params = {key: _query_value(value) for key, value in params.items() if value is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
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
                try:
                    err_json = exc.response.json()
                    message = str(err_json.get("detail") or err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Ship operations
    # ------------------------------------------------------------------
    def list_ships(self, **params: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve a page of ships.

        Keyword arguments are sent as query parameters, e.g.
        ``list_ships(planet="Mars", order="SPEED", pageSize=10)``.
        """
        data, error = self._request("GET", "/ships", params=params)
        if error:
            return [], error
        return data or [], None

    def count_ships(self, **params: Any) -> Tuple[int, Optional[Error]]:
        data, error = self._request("GET", "/ships/count", params=params)
        if error:
            return 0, error
        return int(data or 0), None

    def get_ship(self, ship_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/ships/{ship_id}")

    def create_ship(self, ship: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a ship from a dict using the API field names."""
        return self._request("POST", "/ships", json_body=ship)

    def update_ship(self, ship_id: int, changes: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Send a partial update.

        Note that the server marks the ship as new unless ``isUsed``
        is part of ``changes``.
        """
        return self._request("POST", f"/ships/{ship_id}", json_body=changes)

    def delete_ship(self, ship_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/ships/{ship_id}")
        return error is None, error


def _query_value(value: Any) -> Any:
    # The API expects lowercase booleans and enum tokens by value.
    if isinstance(value, bool):
        return "true" if value else "false"
    return getattr(value, "value", value)
