"""Endpoint groups of the API, each bound to a client that performs the requests."""

from __future__ import annotations

import struct
from typing import Any, Mapping, Protocol

Json = Any

MULTIPART = "multipart/form-data"


class _Client(Protocol):
    def get(self, suffix: str, data: str = "") -> Json: ...

    def post(self, suffix: str, data: Any = None, content_type: str = "application/json") -> Json: ...

    def delete(self, suffix: str) -> Json: ...

    def set_multipart(self, file_field: str, file_path: str, fields: Mapping[str, str]) -> None: ...


def _string(params: Mapping[str, Any], key: str) -> str:
    value = params[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, not {type(value).__name__}")
    return value


def _integer(params: Mapping[str, Any], key: str) -> int:
    value = params[key]
    if not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number, not {type(value).__name__}")
    return int(value)


def _single_float(params: Mapping[str, Any], key: str) -> str:
    """Format a number as a single-precision value with six decimals."""
    value = params[key]
    if not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number, not {type(value).__name__}")
    (single,) = struct.unpack("f", struct.pack("f", float(value)))
    return f"{single:.6f}"


def _form(fields: Mapping[str, str]) -> dict[str, str]:
    return dict(sorted(fields.items()))


class ModelCategory:
    """Models endpoints."""

    def __init__(self, client: _Client) -> None:
        self._client = client

    def list(self) -> Json:
        return self._client.get("models")

    def retrieve(self, model: str) -> Json:
        return self._client.get(f"models/{model}")


class AssistantsCategory:
    """Assistants endpoints."""

    def __init__(self, client: _Client) -> None:
        self._client = client

    def create(self, params: Json) -> Json:
        return self._client.post("assistants", params)

    def retrieve(self, assistant_id: str) -> Json:
        return self._client.get(f"assistants/{assistant_id}")

    def modify(self, assistant_id: str, params: Json) -> Json:
        return self._client.post(f"assistants/{assistant_id}", params)

    def delete(self, assistant_id: str) -> Json:
        return self._client.delete(f"assistants/{assistant_id}")

    def list(self) -> Json:
        return self._client.get("assistants")

    def create_file(self, assistant_id: str, params: Json) -> Json:
        return self._client.post(f"assistants/{assistant_id}/files", params)

    def retrieve_file(self, assistant_id: str, file_id: str) -> Json:
        return self._client.get(f"assistants/{assistant_id}/files/{file_id}")

    def delete_file(self, assistant_id: str, file_id: str) -> Json:
        return self._client.delete(f"assistants/{assistant_id}/files/{file_id}")

    def list_files(self, assistant_id: str) -> Json:
        return self._client.get(f"assistants/{assistant_id}/files")


class ThreadsCategory:
    """Threads, messages, runs and run steps endpoints."""

    def __init__(self, client: _Client) -> None:
        self._client = client

    def create(self) -> Json:
        return self._client.post("threads", None)

    def retrieve(self, thread_id: str) -> Json:
        return self._client.get(f"threads/{thread_id}")

    def modify(self, thread_id: str, params: Json) -> Json:
        return self._client.post(f"threads/{thread_id}", params)

    def delete(self, thread_id: str) -> Json:
        return self._client.delete(f"threads/{thread_id}")

    def create_message(self, thread_id: str, params: Json) -> Json:
        return self._client.post(f"threads/{thread_id}/messages", params)

    def retrieve_message(self, thread_id: str, message_id: str) -> Json:
        return self._client.get(f"threads/{thread_id}/messages/{message_id}")

    def modify_message(self, thread_id: str, message_id: str, params: Json) -> Json:
        return self._client.post(f"threads/{thread_id}/messages/{message_id}", params)

    def list_messages(self, thread_id: str) -> Json:
        return self._client.get(f"threads/{thread_id}/messages")

    def retrieve_message_file(self, thread_id: str, message_id: str, file_id: str) -> Json:
        return self._client.get(f"threads/{thread_id}/messages/{message_id}/files/{file_id}")

    def list_message_files(self, thread_id: str, message_id: str) -> Json:
        return self._client.get(f"threads/{thread_id}/messages/{message_id}/files")

    def create_run(self, thread_id: str, params: Json) -> Json:
        return self._client.post(f"threads/{thread_id}/runs", params)

    def retrieve_run(self, thread_id: str, run_id: str) -> Json:
        return self._client.get(f"threads/{thread_id}/runs/{run_id}")

    def modify_run(self, thread_id: str, run_id: str, params: Json) -> Json:
        return self._client.post(f"threads/{thread_id}/runs/{run_id}", params)

    def list_runs(self, thread_id: str) -> Json:
        return self._client.get(f"threads/{thread_id}/runs")

    def submit_tool_outputs_to_run(self, thread_id: str, run_id: str, params: Json) -> Json:
        return self._client.post(f"threads/{thread_id}/runs/{run_id}/submit_tool_outputs", params)

    def cancel_run(self, thread_id: str, run_id: str) -> Json:
        return self._client.post(f"threads/{thread_id}/runs/{run_id}/cancel", None)

    def create_thread_and_run(self, params: Json) -> Json:
        return self._client.post("threads/runs", params)

    def retrieve_run_step(self, thread_id: str, run_id: str, step_id: str) -> Json:
        return self._client.get(f"threads/{thread_id}/runs/{run_id}/steps/{step_id}")

    def list_run_steps(self, thread_id: str, run_id: str) -> Json:
        return self._client.get(f"threads/{thread_id}/runs/{run_id}/steps")


class CompletionCategory:
    """Text completion endpoint."""

    def __init__(self, client: _Client) -> None:
        self._client = client

    def create(self, params: Json) -> Json:
        return self._client.post("completions", params)


class ChatCategory:
    """Chat completion endpoint."""

    def __init__(self, client: _Client) -> None:
        self._client = client

    def create(self, params: Json) -> Json:
        return self._client.post("chat/completions", params)


class AudioCategory:
    """Speech-to-text endpoints, sent as multipart uploads."""

    _OPTIONAL_TEXT = ("language", "prompt", "response_format")

    def __init__(self, client: _Client) -> None:
        self._client = client

    def transcribe(self, params: Mapping[str, Any]) -> Json:
        return self._upload("audio/transcriptions", params)

    def translate(self, params: Mapping[str, Any]) -> Json:
        return self._upload("audio/translations", params)

    def _upload(self, suffix: str, params: Mapping[str, Any]) -> Json:
        fields = {"model": _string(params, "model")}
        fields.update({key: _string(params, key) for key in self._OPTIONAL_TEXT if key in params})
        if "temperature" in params:
            fields["temperature"] = _single_float(params, "temperature")
        self._client.set_multipart("file", _string(params, "file"), _form(fields))
        return self._client.post(suffix, "", MULTIPART)


class EditCategory:
    """Text edit endpoint."""

    def __init__(self, client: _Client) -> None:
        self._client = client

    def create(self, params: Json) -> Json:
        return self._client.post("edits", params)


class ImageCategory:
    """Image generation, edit and variation endpoints."""

    def __init__(self, client: _Client) -> None:
        self._client = client

    def create(self, params: Json) -> Json:
        return self._client.post("images/generations", params)

    def edit(self, params: Mapping[str, Any]) -> Json:
        prompt = _string(params, "prompt")
        fields = {
            "prompt": prompt,
            "mask": _string(params, "mask") if "mask" in params else "",
            **self._common_fields(params),
        }
        self._client.set_multipart("image", _string(params, "image"), _form(fields))
        return self._client.post("images/edits", "", MULTIPART)

    def variation(self, params: Mapping[str, Any]) -> Json:
        fields = self._common_fields(params)
        self._client.set_multipart("image", _string(params, "image"), _form(fields))
        return self._client.post("images/variations", "", MULTIPART)

    @staticmethod
    def _common_fields(params: Mapping[str, Any]) -> dict[str, str]:
        return {
            "n": str(_integer(params, "n") if "n" in params else 1),
            "size": _string(params, "size") if "size" in params else "1024x1024",
            "response_format": (
                _string(params, "response_format") if "response_format" in params else "url"
            ),
            "user": _string(params, "user") if "user" in params else "",
        }


class EmbeddingCategory:
    """Embeddings endpoint."""

    def __init__(self, client: _Client) -> None:
        self._client = client

    def create(self, params: Json) -> Json:
        return self._client.post("embeddings", params)


class FileCategory:
    """Files endpoints."""

    def __init__(self, client: _Client) -> None:
        self._client = client

    def list(self) -> Json:
        return self._client.get("files")

    def upload(self, params: Mapping[str, Any]) -> Json:
        fields = {"purpose": _string(params, "purpose")}
        self._client.set_multipart("file", _string(params, "file"), fields)
        return self._client.post("files", "", MULTIPART)

    def delete(self, file_id: str) -> Json:
        return self._client.delete(f"files/{file_id}")

    def retrieve(self, file_id: str) -> Json:
        return self._client.get(f"files/{file_id}")

    def content(self, file_id: str) -> Json:
        return self._client.get(f"files/{file_id}/content")


class FineTuneCategory:
    """Fine-tune endpoints."""

    def __init__(self, client: _Client) -> None:
        self._client = client

    def create(self, params: Json) -> Json:
        return self._client.post("fine-tunes", params)

    def list(self) -> Json:
        return self._client.get("fine-tunes")

    def retrieve(self, fine_tune_id: str) -> Json:
        return self._client.get(f"fine-tunes/{fine_tune_id}")

    def content(self, fine_tune_id: str) -> Json:
        return self._client.get(f"fine-tunes/{fine_tune_id}/content")

    def cancel(self, fine_tune_id: str) -> Json:
        return self._client.post(f"fine-tunes/{fine_tune_id}/cancel", None)

    def events(self, fine_tune_id: str) -> Json:
        return self._client.get(f"fine-tunes/{fine_tune_id}/events")

    def delete(self, model: str) -> Json:
        return self._client.delete(f"models/{model}")


class ModerationCategory:
    """Moderation endpoint."""

    def __init__(self, client: _Client) -> None:
        self._client = client

    def create(self, params: Json) -> Json:
        return self._client.post("moderations", params)