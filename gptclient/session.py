"""HTTP session handling for the API client: URL parsing, headers and requests."""

from __future__ import annotations

import os
import re
import sys
import threading
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote

import requests

CONNECT_TIMEOUT = 30
READ_TIMEOUT = 60

_DEFAULT_PORTS = {"http": "80", "https": "443"}
_LEADING_INT = re.compile(r"\s*[+-]?\d+")


class OpenAIError(RuntimeError):
    """Raised when a request fails or the API reports an error."""


@dataclass(frozen=True)
class Response:
    """Outcome of one HTTP exchange."""

    text: str
    is_error: bool = False
    error_message: str = ""


def env_value(name: str) -> str:
    """Return the environment variable ``name``, or an empty string if unset."""
    return os.environ.get(name, "")


def parse_url(url: str) -> tuple[str, str, str, str]:
    """Split ``scheme://host:port/path`` into ``(scheme, host, port, path)``.

    A missing port defaults to 80 for ``http`` and 443 otherwise; a missing
    path defaults to ``/``. A URL without ``://`` yields four empty strings.
    """
    scheme, sep, rest = url.partition("://")
    if not sep:
        return "", "", "", ""

    colon = rest.find(":")
    slash = rest.find("/")
    default_port = "80" if scheme == "http" else "443"

    if colon != -1 and (slash == -1 or colon < slash):
        host = rest[:colon]
        if slash != -1:
            return scheme, host, rest[colon + 1 : slash], rest[slash:]
        return scheme, host, rest[colon + 1 :], "/"
    if slash != -1:
        return scheme, rest[:slash], default_port, rest[slash:]
    return scheme, rest, default_port, "/"


def _parse_port(text: str) -> int:
    match = _LEADING_INT.match(text)
    if not match:
        raise ValueError(f"invalid proxy port: {text!r}")
    return int(match.group())


class Session:
    """Holds the target URL, credentials and payload for the next request."""

    def __init__(self, throw_exception: bool, proxy_url: str = "") -> None:
        self._throw_exception = throw_exception
        self._ignore_ssl = True
        self._scheme = ""
        self._host = ""
        self._port = ""
        self._path = ""
        self._url = ""
        self._proxy = ""
        self._token = ""
        self._organization = ""
        self._beta = ""
        self._body = ""
        self._use_multipart = False
        self._file_field: tuple[str, str] = ("", "")
        self._form_fields: dict[str, str] = {}
        self._http: requests.Session | None = None
        self._lock = threading.Lock()
        if proxy_url:
            self.set_proxy_url(proxy_url)

    def ignore_ssl(self) -> None:
        """Disable server certificate verification."""
        self._ignore_ssl = True

    def set_url(self, url: str) -> None:
        """Target ``url`` for the next request."""
        self._url = url
        scheme, host, port, path = parse_url(url)
        if (scheme, host, port) != (self._scheme, self._host, self._port):
            self._reset_client()
        self._scheme, self._host, self._port, self._path = scheme, host, port, path

    def set_token(self, token: str, organization: str = "") -> None:
        self._token = token
        self._organization = organization

    def set_proxy_url(self, url: str) -> None:
        self._proxy = url
        self._reset_client()

    def set_beta(self, beta: str) -> None:
        self._beta = beta

    def set_body(self, data: str) -> None:
        """Send ``data`` as the raw body of the next POST."""
        self._body = data
        self._use_multipart = False

    def set_multipart(self, file_field: str, file_path: str, fields: dict[str, str]) -> None:
        """Send the next POST as a multipart form with one file and ``fields``."""
        self._file_field = (file_field, file_path)
        self._form_fields = dict(fields)
        self._use_multipart = True
        self._body = ""

    def get(self) -> Response:
        return self._request("GET")

    def post(self, content_type: str = "") -> Response:
        return self._request("POST", content_type)

    def delete(self) -> Response:
        return self._request("DELETE")

    def escape(self, text: str) -> str:
        """Percent-encode ``text`` for use inside a URL."""
        return quote(text, safe="")

    def _reset_client(self) -> None:
        if self._http is not None:
            self._http.close()
        self._http = None

    def _client(self) -> requests.Session:
        if self._http is None:
            if not (self._scheme and self._host and self._port):
                raise OpenAIError("URL not set")
            self._http = requests.Session()
        return self._http

    def _full_url(self) -> str:
        if _DEFAULT_PORTS.get(self._scheme) == self._port:
            return f"{self._scheme}://{self._host}{self._path}"
        return f"{self._scheme}://{self._host}:{self._port}{self._path}"

    def _proxies(self) -> dict[str, str] | None:
        if not self._proxy:
            return None
        _, sep, rest = self._proxy.partition("://")
        address = rest if sep else self._proxy
        host, colon, port = address.partition(":")
        if not colon:
            return None
        proxy = f"http://{host}:{_parse_port(port)}"
        return {"http": proxy, "https": proxy}

    def _headers(self, content_type: str) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {self._token}"}
        if self._organization:
            headers["OpenAI-Organization"] = self._organization
        if self._beta:
            headers["OpenAI-Beta"] = self._beta
        # A multipart body gets its Content-Type (with boundary) from the encoder.
        if content_type and not (self._use_multipart and content_type == "multipart/form-data"):
            headers["Content-Type"] = content_type
        return headers

    def _request(self, method: str, content_type: str = "") -> Response:
        with self._lock:
            try:
                http = self._client()
                options = {
                    "headers": self._headers(content_type),
                    "timeout": (CONNECT_TIMEOUT, READ_TIMEOUT),
                    "verify": not self._ignore_ssl,
                    "proxies": self._proxies(),
                }
                url = self._full_url()
                if method == "GET":
                    reply = http.get(url, **options)
                elif method == "DELETE":
                    reply = http.delete(url, **options)
                elif not self._use_multipart:
                    reply = http.post(url, data=self._body.encode("utf-8"), **options)
                else:
                    self._use_multipart = False
                    field, path = self._file_field
                    with open(path, "rb") as handle:
                        files = {field: (Path(path).name, handle, "application/octet-stream")}
                        reply = http.post(url, data=dict(self._form_fields), files=files, **options)
            except (requests.RequestException, OSError, ValueError, OpenAIError) as exc:
                message = f"HTTP Request failed: {exc}"
                if self._throw_exception:
                    raise OpenAIError(message) from exc
                print(message, file=sys.stderr)
                return Response("", True, message)

            if reply.status_code >= 400:
                return Response(
                    reply.text, True, f"HTTP Error: {reply.status_code} - {reply.text}"
                )
            return Response(reply.text)