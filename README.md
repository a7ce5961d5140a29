# gptclient

A small, synchronous client for the OpenAI REST API. Requests are plain
dictionaries and responses come back as the decoded JSON, so anything the API
accepts can be sent without the library having to know about it.

Covered endpoints: models, completions, chat completions, edits, images
(generation, edit, variation), embeddings, audio (transcription, translation),
files, fine-tunes, moderations, assistants (and assistant files) and threads
(messages, message files, runs, run steps).

## Installation

```
pip install gptclient
```

For running the test suite:

```
pip install "gptclient[test]"
pytest
```

## Configuration

When no explicit values are given, `gptclient.client.OpenAI` reads:

- `OPENAI_API_KEY`: the bearer token sent with every request.
- `OPENAI_API_BASE`: the base URL of the API; a `/` is appended to it. When
  unset, `https://api.openai.com/v1/` is used.

## Quick start

The module-level helpers in `gptclient.client` share one client, created on
the first call to `start()` (or `instance()`); later calls to `start()` return
that same client and ignore their arguments.

```python
from gptclient.client import start, completion, image

start()  # token taken from OPENAI_API_KEY

result = completion().create({
    "model": "text-davinci-003",
    "prompt": "Say this is a test",
    "max_tokens": 7,
    "temperature": 0,
})
print(result["choices"][0]["text"])

picture = image().create({"prompt": "A logo with a cello in a heart", "n": 1, "size": "512x512"})
print(picture["data"][0]["url"])
```

## Separate clients

Several clients with different tokens, organizations or base URLs can live
side by side:

```python
from gptclient.client import OpenAI

client = OpenAI(token="token", organization="", throw_exception=True,
                api_base_url="https://api.openai.com/v1/", beta="")
reply = client.chat.create({
    "model": "gpt-3.5-turbo",
    "messages": [{"role": "user", "content": "Hello"}],
})
```

Each client exposes its endpoint groups as attributes: `model`, `assistant`,
`thread`, `completion`, `chat`, `audio`, `edit`, `image`, `embedding`, `file`,
`fine_tune` and `moderation` (classes from `gptclient.categories`). The
module-level functions of the same names return the groups of the shared
client.

Other settings on a client:

- `set_token(token, organization)`: token and `OpenAI-Organization` header for
  later requests.
- `set_beta(beta)`: value of the `OpenAI-Beta` header.
- `set_proxy(url)`: route requests through an HTTP proxy given as
  `host:port` (a leading `scheme://` is dropped).
- `escape(text)`: percent-encode a string for use inside a URL path.
- `base_url`: the base URL the request paths are appended to.

Requests use a 30 second connect timeout and a 60 second read timeout. Server
certificates are not verified.

## Uploads

Endpoints that send files take a local path in the request dictionary and
upload it as multipart form data:

```python
from gptclient.client import start, file, audio

start()
uploaded = file().upload({"file": "finetune.jsonl", "purpose": "fine-tune"})
text = audio().transcribe({"file": "audio.mp3", "model": "whisper-1"})
```

`image().edit` and `image().variation` fill in `n=1`, `size="1024x1024"`,
`response_format="url"` and an empty `user` when these are not given.

## Errors

With `throw_exception=True` (the default), a failed HTTP request, a status of
400 or above, or a response body holding an `"error"` member raises
`gptclient.session.OpenAIError`. With `throw_exception=False` the problem is
written to standard error and the call returns what could be decoded from the
reply.

## Raw requests

`OpenAI.get`, `OpenAI.post` and `OpenAI.delete` take a path relative to the
base URL, for endpoints without a dedicated method. `post` sends a string
body as is and anything else as JSON. A GET whose reply is not JSON returns
`{"Result": <text>}`; a POST or DELETE whose reply is not JSON returns `None`.
The module-level `get()` and `post()` do the same on the shared client.

## Examples

The package ships a command that runs one named example request sequence
against the API, using the key from `OPENAI_API_KEY`:

```
gptclient-examples chat
```

The example names are `showcase`, `model`, `completion`, `edit`, `image`,
`embedding`, `file`, `fine-tune`, `instances`, `chat`, `audio` and
`moderation`. The `image`, `file` and `audio` examples upload `otter.png`,
`finetune1.jsonl`, `audio.mp3` and `german.m4a` from the current directory.
The command exits with status 1 when a request fails.

## What it does not do

The client is synchronous and blocking: there is no streaming of responses,
no async interface and no automatic retrying of failed requests.