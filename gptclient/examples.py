"""Runnable demonstrations of the client against each endpoint group."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Callable

from gptclient.client import OpenAI, start
from gptclient.session import OpenAIError


def _pretty(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def _compact(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _show_response(value: Any) -> None:
    print("Response is:\n" + _pretty(value))


def _showcase(api: OpenAI) -> None:
    completion = api.completion.create(
        {"model": "text-davinci-003", "prompt": "Say this is a test", "max_tokens": 7, "temperature": 0}
    )
    _show_response(completion)
    image = api.image.create({"prompt": "A logo with a cello in a heart", "n": 1, "size": "512x512"})
    print("Image URL is: " + _compact(image["data"][0]["url"]))


def _model(api: OpenAI) -> None:
    models = api.model.list()
    print(_compact(models["data"][0]))
    again = api.model.list()
    print(_compact(again["data"][1]))
    print(_compact(api.model.retrieve("text-davinci-003")))


def _completion(api: OpenAI) -> None:
    _show_response(
        api.completion.create(
            {"model": "text-davinci-003", "prompt": "Say this is a test", "max_tokens": 7, "temperature": 0}
        )
    )


def _edit(api: OpenAI) -> None:
    _show_response(
        api.edit.create(
            {
                "model": "text-davinci-edit-001",
                "input": "What day of the wek is it?",
                "instruction": "Fix the spelling mistakes",
            }
        )
    )


def _image(api: OpenAI) -> None:
    print(_pretty(api.image.create({"prompt": "A cute baby sea otter", "n": 2, "size": "512x512"})))
    print(
        _pretty(
            api.image.edit(
                {
                    "image": "otter.png",
                    "prompt": "A cute baby sea otter wearing a beret",
                    "n": 1,
                    "size": "256x256",
                }
            )
        )
    )
    print(_pretty(api.image.variation({"image": "otter.png", "n": 2, "size": "256x256"})))


def _embedding(api: OpenAI) -> None:
    _show_response(
        api.embedding.create(
            {"model": "text-embedding-ada-002", "input": "The food was delicious and the waiter..."}
        )
    )


def _file(api: OpenAI) -> None:
    upload = api.file.upload({"file": "finetune1.jsonl", "purpose": "fine-tune"})
    print(_pretty(upload) + "\n")
    file_id = upload["id"]

    print(_pretty(api.file.list()) + "\n")
    print(_pretty(api.file.retrieve(file_id)) + "\n")
    try:
        print(_pretty(api.file.content(file_id)) + "\n")
    except OpenAIError as exc:
        print(f"You might have this exception because you have a free account {exc}\n", file=sys.stderr)
    print(_pretty(api.file.delete(file_id)) + "\n")


def _fine_tune(api: OpenAI) -> None:
    fine_tune_id = "ft-N9Zf32f3uzpoXxJLr14CnFy1"
    print(_pretty(api.fine_tune.create({"training_file": "file-gD2KgQKsxcn6zguK0ETuodXO"})))
    print(_pretty(api.fine_tune.list()))
    print(_pretty(api.fine_tune.retrieve(fine_tune_id)))
    print(_pretty(api.fine_tune.cancel(fine_tune_id)))
    print(_pretty(api.fine_tune.events(fine_tune_id)))
    print(_pretty(api.fine_tune.delete("any-model")))


def _bar(api: OpenAI) -> None:
    try:
        result = api.completion.create({"model": "text-davinci-003", "prompt": "Say bar() function called"})
        print(_compact(result) + "\n")
    except OpenAIError as exc:
        print(f"Exception:{exc}\n", file=sys.stderr)


def _foo(api: OpenAI) -> None:
    result = api.completion.create({"model": "text-davinci-003", "prompt": "Say Foo class ctor called"})
    print(_compact(result) + "\n")


def _instances(api: OpenAI) -> None:
    _bar(api)
    _foo(api)
    another = OpenAI("placeholder", api_base_url=api.base_url)
    try:
        another.completion.create(
            {"model": "text-davinci-003", "prompt": "Say this should throw since token is invalid here"}
        )
    except OpenAIError as exc:
        print(f"Request failed purposely because of {exc}\n", file=sys.stderr)


def _chat(api: OpenAI) -> None:
    _show_response(
        api.chat.create(
            {
                "model": "gpt-3.5-turbo",
                "messages": [{"role": "user", "content": "blah"}],
                "max_tokens": 7,
                "temperature": 0,
            }
        )
    )


def _audio(api: OpenAI) -> None:
    _show_response(api.audio.transcribe({"file": "audio.mp3", "model": "whisper-1"}))
    _show_response(api.audio.translate({"file": "german.m4a", "model": "whisper-1"}))


def _moderation(api: OpenAI) -> None:
    _show_response(api.moderation.create({"input": "I want to kill them."}))


_EXAMPLES: dict[str, Callable[[OpenAI], None]] = {
    "showcase": _showcase,
    "model": _model,
    "completion": _completion,
    "edit": _edit,
    "image": _image,
    "embedding": _embedding,
    "file": _file,
    "fine-tune": _fine_tune,
    "instances": _instances,
    "chat": _chat,
    "audio": _audio,
    "moderation": _moderation,
}


def main(argv: list[str] | None = None) -> int:
    """Run one named example with the default client; return an exit status."""
    parser = argparse.ArgumentParser(description="Run an API client example.")
    parser.add_argument("example", choices=list(_EXAMPLES))
    args = parser.parse_args(argv)
    try:
        _EXAMPLES[args.example](start())
    except OpenAIError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())