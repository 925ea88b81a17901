"""Lab services API client.

This module defines a small client wrapper around the REST endpoints of
the banking service and my service.  It is handy for smoke checks
against running instances, e.g. after ``python run.py``::

    >>> client = LabServicesClient(base_url="http://localhost:8081")
    >>> client.greet("Alice")
    ('Hello, Alice!', None)

Every public method returns a tuple ``(data, error)``.  On success
``data`` holds the response payload (text, or the decoded JSON map for
:meth:`LabServicesClient.get_info`) and ``error`` is ``None``.  On
failure ``data`` is ``None`` and ``error`` is a dictionary with keys
``status_code`` and ``message``.  The client never raises on HTTP or
transport errors; they are logged and returned instead.

Both services are plain HTTP applications on separate ports, so one
client instance talks to one service.  Calling an endpoint the target
service does not expose yields a 404 error tuple.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class LabServicesClient:
    """Client for the banking service and my service endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of one service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _get(self, path: str, *, as_json: bool = False) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform a GET request and decode the body.

        Args:
            path: Path relative to :attr:`base_url` (e.g. ``/hello``).
            as_json: Decode the body as JSON instead of returning text.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending GET request to %s", url)
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                except ValueError:
                    message = exc.response.text
                else:
                    # Proxies may answer with a bare list or string.
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if not as_json:
            return response.text, None
        try:
            return response.json(), None
        except ValueError as exc:
            logger.error("Invalid JSON from %s: %s", url, exc)
            return None, {"status_code": response.status_code, "message": "Invalid JSON response"}

    # ------------------------------------------------------------------
    # Banking service
    # ------------------------------------------------------------------
    def get_balance(self) -> Tuple[Optional[str], Optional[Error]]:
        """Retrieve the balance message."""
        return self._get("/balance")

    # ------------------------------------------------------------------
    # My service
    # ------------------------------------------------------------------
    def hello(self) -> Tuple[Optional[str], Optional[Error]]:
        """Retrieve the service greeting."""
        return self._get("/hello")

    def greet(self, name: str) -> Tuple[Optional[str], Optional[Error]]:
        """Retrieve a greeting for ``name``.

        The name is percent-encoded as a single path segment.  Note that
        servers decode ``%2F`` before routing, so names containing ``/``
        cannot be greeted.
        """
        segment = quote(name, safe="")
        # "." and ".." would be dropped as dot segments by the URL layer.
        if segment in {".", ".."}:
            segment = segment.replace(".", "%2E")
        return self._get(f"/greet/{segment}")

    def get_info(self) -> Tuple[Optional[Dict[str, str]], Optional[Error]]:
        """Retrieve the service version and description."""
        data, error = self._get("/info", as_json=True)
        if error:
            return None, error
        if not isinstance(data, dict):
            return None, {"status_code": None, "message": "Unexpected info payload"}
        return data, None
