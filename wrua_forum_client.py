"""WRUAs Forum API client.

This module wraps the forum's REST API for Python callers (scripts,
dashboards, the test-suite).  It uses the ``requests`` library and
mirrors the public and admin endpoints one method per operation.

Every method returns a ``(data, error)`` tuple.  On success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list for list
calls) and ``error`` is a dictionary with ``status_code`` and
``message`` keys, the message being the API's ``{"error": ...}`` text.

Authentication is explicit: an :class:`AdminSession` is handed to the
client and carries the bearer token.  :meth:`ForumClient.login` fills it
in, :meth:`ForumClient.logout` clears it, and any 401/403 answer from
the API clears it as well, together with the GET cache, so callers notice
that the token is no longer usable and no admin data is served from it.

GET responses are cached per path and query string.  Writes drop the
cached entries of the collections they touch, so a list fetched after a
create reflects the new record.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]
Result = Tuple[Optional[Any], Optional[Error]]


@dataclass
class AdminSession:
    """Credentials of the signed-in administrator.

    Attributes:
        token: Bearer token returned by the login endpoint.
        user: The ``{"id", "username"}`` record returned with it.
    """

    token: Optional[str] = None
    user: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def clear(self) -> None:
        self.token = None
        self.user = {}


class ForumClient:
    """Client for the MaraSondu WRUAs Forum API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[AdminSession] = None,
        http: Optional[Any] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Server root, e.g. ``http://localhost:5000``.  Paths
                such as ``/api/projects`` are appended to it.
            session: Admin session to authenticate with.  A fresh,
                anonymous one is created when omitted.
            http: Object with a ``requests``-compatible ``request``
                method.  Defaults to a new ``requests.Session``.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or AdminSession()
        self.http = http or requests.Session()
        self.timeout = timeout
        self._cache: Dict[Tuple[str, Tuple[Tuple[str, str], ...]], Any] = {}

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
        files: Dict[str, Any] | None = None,
        invalidate: Iterable[str] = (),
    ) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``PATCH``,
                ``DELETE``).
            path: Path relative to :attr:`base_url`.
            params: Query parameters; ``None`` values are dropped.
            json_body: JSON body for writes.
            files: Multipart files for uploads.
            invalidate: Path prefixes whose cached GET responses become
                stale when this request succeeds.
        Returns:
            ``(data, error)`` as described in the module docstring.
        """
        params = {k: v for k, v in (params or {}).items() if v is not None}
        cache_key = (path, tuple(sorted((k, str(v)) for k, v in params.items())))
        if method == "GET" and cache_key in self._cache:
            logger.debug("Cache hit for %s", path)
            return self._cache[cache_key], None

        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.session.token:
            headers["Authorization"] = f"Bearer {self.session.token}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.http.request(
                method,
                url,
                params=params or None,
                json=json_body,
                files=files,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = ""
            try:
                body = response.json()
                message = body.get("error") or body.get("detail") or str(body)
            except ValueError:
                message = response.text
            if response.status_code in (401, 403) and self.session.token:
                logger.info("Token rejected (%s); clearing admin session", response.status_code)
                self.session.clear()
                self.clear_cache()
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message or f"HTTP {response.status_code}"}

        data = response.json() if response.content else None
        if method == "GET":
            self._cache[cache_key] = data
        else:
            self._invalidate(invalidate)
        return data, None

    def _invalidate(self, prefixes: Iterable[str]) -> None:
        prefixes = tuple(prefixes)
        if not prefixes:
            return
        for key in [key for key in self._cache if key[0].startswith(prefixes)]:
            del self._cache[key]

    def clear_cache(self) -> None:
        self._cache.clear()

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        return (data or []), error

    @staticmethod
    def _resource_paths(resource: str) -> Tuple[str, str]:
        return f"/api/{resource}", f"/api/admin/{resource}"

    # ------------------------------------------------------------------
    # Public content
    # ------------------------------------------------------------------
    def list_projects(
        self, *, category: Optional[str] = None, location: Optional[str] = None, sdg: Optional[int] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/api/projects", {"category": category, "location": location, "sdg": sdg})

    def get_project(self, id_or_slug: str) -> Result:
        return self._request("GET", f"/api/projects/{id_or_slug}")

    def list_wruas(
        self, *, status: Optional[str] = None, q: Optional[str] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/api/wruas", {"status": status, "q": q})

    def get_wrua(self, wrua_id: str) -> Result:
        return self._request("GET", f"/api/wruas/{wrua_id}")

    def list_blog_posts(
        self, *, category: Optional[str] = None, q: Optional[str] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/api/blog", {"category": category, "q": q})

    def get_blog_post(self, slug: str) -> Result:
        return self._request("GET", f"/api/blog/{slug}")

    def list_funding(
        self, *, status: Optional[str] = None, focus_area: Optional[str] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/api/funding", {"status": status, "focus_area": focus_area})

    def get_stats(self) -> Result:
        return self._request("GET", "/api/stats")

    # ------------------------------------------------------------------
    # Public forms
    # ------------------------------------------------------------------
    def send_contact_message(self, payload: Dict[str, Any]) -> Result:
        """Submit the contact form (name, email, subject, message, organization)."""
        return self._request("POST", "/api/contact", json_body=payload, invalidate=("/api/admin/messages",))

    def subscribe(self, email: str) -> Result:
        return self._request(
            "POST", "/api/newsletter", json_body={"email": email}, invalidate=("/api/admin/subscribers",)
        )

    def unsubscribe(self, email: str) -> Result:
        return self._request(
            "POST", "/api/newsletter/unsubscribe", json_body={"email": email}, invalidate=("/api/admin/subscribers",)
        )

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    def login(self, username: str, password: str) -> Result:
        """Log in and store the token on :attr:`session`."""
        data, error = self._request(
            "POST", "/api/admin/login", json_body={"username": username, "password": password}
        )
        if error is None and data:
            self.session.token = data.get("token")
            self.session.user = data.get("user") or {}
            self.clear_cache()
        return data, error

    def logout(self) -> None:
        self.session.clear()
        self.clear_cache()

    def register_admin(self, username: str, password: str) -> Result:
        return self._request(
            "POST", "/api/admin/register", json_body={"username": username, "password": password}
        )

    # ------------------------------------------------------------------
    # Admin content management
    # ------------------------------------------------------------------
    def admin_list(self, resource: str, **params: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """List ``projects``, ``wruas``, ``blog`` or ``funding`` including drafts."""
        return self._list(f"/api/admin/{resource}", params)

    def admin_get(self, resource: str, record_id: str) -> Result:
        return self._request("GET", f"/api/admin/{resource}/{record_id}")

    def admin_create(self, resource: str, payload: Dict[str, Any]) -> Result:
        return self._request(
            "POST", f"/api/admin/{resource}", json_body=payload, invalidate=self._resource_paths(resource)
        )

    def admin_update(self, resource: str, record_id: str, payload: Dict[str, Any]) -> Result:
        return self._request(
            "PUT",
            f"/api/admin/{resource}/{record_id}",
            json_body=payload,
            invalidate=self._resource_paths(resource),
        )

    def admin_delete(self, resource: str, record_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request(
            "DELETE", f"/api/admin/{resource}/{record_id}", invalidate=self._resource_paths(resource)
        )
        return error is None, error

    def upload_image(self, filename: str, content: bytes, content_type: str) -> Result:
        """Upload an image and return ``{"url": "/uploads/<name>"}``."""
        return self._request("POST", "/api/admin/upload", files={"image": (filename, content, content_type)})

    # ------------------------------------------------------------------
    # Admin inbox, subscribers and settings
    # ------------------------------------------------------------------
    def list_messages(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/api/admin/messages")

    def mark_message_read(self, message_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request(
            "PATCH", f"/api/admin/messages/{message_id}/read", invalidate=("/api/admin/messages",)
        )
        return error is None, error

    def list_subscribers(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/api/admin/subscribers")

    def list_settings(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/api/admin/settings")

    def get_setting(self, key: str) -> Result:
        return self._request("GET", f"/api/admin/settings/{key}")

    def update_setting(self, key: str, value: Any) -> Result:
        return self._request(
            "PUT",
            f"/api/admin/settings/{key}",
            json_body={"value": value},
            invalidate=("/api/admin/settings", "/api/stats"),
        )
