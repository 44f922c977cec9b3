"""Users API client.

A thin wrapper around the Users API used by the presentation client.
It uses the ``requests`` library and never raises for HTTP or network
failures: every operation returns a ``(data, error)`` tuple, where
``error`` is ``None`` on success and otherwise a dictionary with the
keys ``status_code`` and ``message``.

The API address is fixed at :data:`DEFAULT_BASE_URL` unless an
explicit ``base_url`` (normally ``Settings.api_base_url``) overrides
it.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000"
USERS_PATH = "/api/users"


class UsersAPI:
    """Client for the Users API."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:5000``.
                Defaults to :data:`DEFAULT_BASE_URL`.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Optional per‑request timeout in seconds.  ``None``
                waits for as long as the server takes.
        """
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, etc.).
            path: Path relative to :attr:`base_url` (e.g. ``/api/users``).
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
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
                    if isinstance(err_json, dict):
                        message = err_json.get("error") or err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all user records.

        Returns:
            A tuple ``(users, error)``. ``users`` is the list of
            ``{"id", "name"}`` dictionaries in the order returned by the
            API, or an empty list if the request failed.
        """
        data, error = self._request("GET", USERS_PATH)
        if error:
            return [], error
        if not isinstance(data, list):
            logger.error("Unexpected users payload: %r", data)
            return [], {"status_code": None, "message": "Unexpected response payload"}
        return data, None
