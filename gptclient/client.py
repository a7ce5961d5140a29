"""API client bound to one base URL, plus a process-wide default instance."""

from __future__ import annotations

import json
import sys
import threading
from typing import Any, Callable, Mapping

from gptclient.categories import (
    AssistantsCategory,
    AudioCategory,
    ChatCategory,
    CompletionCategory,
    EditCategory,
    EmbeddingCategory,
    FileCategory,
    FineTuneCategory,
    ImageCategory,
    ModelCategory,
    ModerationCategory,
    ThreadsCategory,
)
from gptclient.session import OpenAIError, Response, Session, env_value

DEFAULT_BASE_URL = "https://api.openai.com/v1/"
JSON_CONTENT = "application/json"
MULTIPART = "multipart/form-data"


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _parse(text: str) -> tuple[bool, Any]:
    try:
        return True, json.loads(text)
    except ValueError:
        return False, None


class OpenAI:
    """Client for the API; each endpoint group is available as an attribute."""

    def __init__(
        self,
        token: str = "",
        organization: str = "",
        throw_exception: bool = True,
        api_base_url: str = "",
        beta: str = "",
    ) -> None:
        self.throw_exception = throw_exception
        self._session = Session(throw_exception)
        self._token = token or env_value("OPENAI_API_KEY")
        self._organization = organization
        if api_base_url:
            self.base_url = api_base_url
        else:
            self.base_url = env_value("OPENAI_API_BASE") + "/"
            if self.base_url == "/":
                self.base_url = DEFAULT_BASE_URL
        self._session.set_url(self.base_url)
        self._session.set_token(self._token, self._organization)
        self._session.set_beta(beta)

        self.model = ModelCategory(self)
        self.assistant = AssistantsCategory(self)
        self.thread = ThreadsCategory(self)
        self.completion = CompletionCategory(self)
        self.edit = EditCategory(self)
        self.image = ImageCategory(self)
        self.embedding = EmbeddingCategory(self)
        self.file = FileCategory(self)
        self.fine_tune = FineTuneCategory(self)
        self.moderation = ModerationCategory(self)
        self.chat = ChatCategory(self)
        self.audio = AudioCategory(self)

    def set_token(self, token: str = "", organization: str = "") -> None:
        """Use ``token`` and ``organization`` for subsequent requests."""
        self._session.set_token(token, organization)

    def set_proxy(self, url: str) -> None:
        self._session.set_proxy_url(url)

    def set_beta(self, beta: str) -> None:
        self._session.set_beta(beta)

    def set_multipart(self, file_field: str, file_path: str, fields: Mapping[str, str]) -> None:
        """Make the next POST a multipart upload of ``file_path`` with ``fields``."""
        self._session.set_multipart(file_field, file_path, dict(fields))

    def post(self, suffix: str, data: Any = None, content_type: str = JSON_CONTENT) -> Any:
        """POST to ``suffix``; a string is sent as is, anything else as JSON."""
        body = data if isinstance(data, str) else _dumps(data)
        self._prepare(suffix, body, content_type)
        return self._handle(self._session.post(content_type), lambda text: None)

    def get(self, suffix: str, data: str = "") -> Any:
        """GET ``suffix``; a non-JSON reply comes back as ``{"Result": text}``."""
        self._prepare(suffix, data)
        return self._handle(self._session.get(), lambda text: {"Result": text})

    def delete(self, suffix: str) -> Any:
        self._prepare(suffix, "")
        return self._handle(self._session.delete(), lambda text: None)

    def escape(self, text: str) -> str:
        return self._session.escape(text)

    def _prepare(self, suffix: str, data: str, content_type: str = "") -> None:
        self._session.set_url(self.base_url + suffix)
        if content_type != MULTIPART:
            self._session.set_body(data)

    def _handle(self, response: Response, fallback: Callable[[str], Any]) -> Any:
        if response.is_error:
            self._trigger_error(response.error_message)
        valid, parsed = _parse(response.text)
        if not valid:
            return fallback(response.text)
        if isinstance(parsed, dict) and "error" in parsed:
            self._trigger_error(_dumps(parsed["error"]))
        return parsed

    def _trigger_error(self, message: str) -> None:
        if self.throw_exception:
            raise OpenAIError(message)
        print(f"[OpenAI] error. Reason: {message}", file=sys.stderr)


_instance: OpenAI | None = None
_instance_lock = threading.Lock()


def start(
    token: str = "",
    organization: str = "",
    throw_exception: bool = True,
    api_base_url: str = "",
) -> OpenAI:
    """Return the default client, creating it from these arguments on first use."""
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = OpenAI(token, organization, throw_exception, api_base_url)
        return _instance


def instance() -> OpenAI:
    return start()


def post(suffix: str, data: Any) -> Any:
    return instance().post(suffix, data)


def get(suffix: str) -> Any:
    return instance().get(suffix)


def model() -> ModelCategory:
    return instance().model


def assistant() -> AssistantsCategory:
    return instance().assistant


def thread() -> ThreadsCategory:
    return instance().thread


def completion() -> CompletionCategory:
    return instance().completion


def chat() -> ChatCategory:
    return instance().chat


def audio() -> AudioCategory:
    return instance().audio


def edit() -> EditCategory:
    return instance().edit


def image() -> ImageCategory:
    return instance().image


def embedding() -> EmbeddingCategory:
    return instance().embedding


def file() -> FileCategory:
    return instance().file


def fine_tune() -> FineTuneCategory:
    return instance().fine_tune


def moderation() -> ModerationCategory:
    return instance().moderation