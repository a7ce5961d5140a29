import json

import pytest
import responses

import gptclient.client as client_module
from gptclient.examples import main

BASE = "https://api.example.com/v1/"


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture(autouse=True)
def environment(monkeypatch, tmp_path):
    monkeypatch.setattr(client_module, "_instance", None)
    monkeypatch.setenv("OPENAI_API_KEY", "token")
    monkeypatch.setenv("OPENAI_API_BASE", "https://api.example.com/v1")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_completion(mocked, capsys):
    payload = {"choices": [{"text": "This is a test"}]}
    mocked.add(responses.POST, BASE + "completions", json=payload)
    assert main(["completion"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Response is:\n")
    assert json.loads(out[len("Response is:\n"):]) == payload
    assert json.loads(mocked.calls[0].request.body) == {
        "model": "text-davinci-003",
        "prompt": "Say this is a test",
        "max_tokens": 7,
        "temperature": 0,
    }


def test_showcase(mocked, capsys):
    mocked.add(responses.POST, BASE + "completions", json={"id": "c1"})
    mocked.add(
        responses.POST,
        BASE + "images/generations",
        json={"data": [{"url": "https://img.example.com/a.png"}]},
    )
    assert main(["showcase"]) == 0
    out = capsys.readouterr().out
    assert 'Image URL is: "https://img.example.com/a.png"' in out
    assert json.loads(mocked.calls[1].request.body)["prompt"] == "A logo with a cello in a heart"


def test_model(mocked, capsys):
    mocked.add(responses.GET, BASE + "models", json={"data": [{"id": "a"}, {"id": "b"}]})
    mocked.add(responses.GET, BASE + "models/text-davinci-003", json={"id": "text-davinci-003"})
    assert main(["model"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ['{"id":"a"}', '{"id":"b"}', '{"id":"text-davinci-003"}']


@pytest.mark.parametrize(
    "name, path, key, expected",
    [
        ("edit", "edits", "instruction", "Fix the spelling mistakes"),
        ("embedding", "embeddings", "model", "text-embedding-ada-002"),
        ("chat", "chat/completions", "messages", [{"role": "user", "content": "blah"}]),
        ("moderation", "moderations", "input", "I want to kill them."),
    ],
)
def test_simple_posts(mocked, capsys, name, path, key, expected):
    mocked.add(responses.POST, BASE + path, json={"ok": True})
    assert main([name]) == 0
    assert json.loads(mocked.calls[0].request.body)[key] == expected
    assert json.loads(capsys.readouterr().out[len("Response is:\n"):]) == {"ok": True}


def test_image(mocked, environment):
    (environment / "otter.png").write_bytes(b"OTTER")
    for path in ("images/generations", "images/edits", "images/variations"):
        mocked.add(responses.POST, BASE + path, json={"data": []})
    assert main(["image"]) == 0
    edit_body = mocked.calls[1].request.body
    assert b"OTTER" in edit_body
    assert b'name="size"\r\n\r\n256x256' in edit_body
    assert b'name="n"\r\n\r\n2' in mocked.calls[2].request.body


def test_file(mocked, environment, capsys):
    (environment / "finetune1.jsonl").write_text('{"prompt": "p", "completion": "c"}\n')
    mocked.add(responses.POST, BASE + "files", json={"id": "file-1"})
    mocked.add(responses.GET, BASE + "files", json={"data": [{"id": "file-1"}]})
    mocked.add(responses.GET, BASE + "files/file-1", json={"id": "file-1"})
    mocked.add(responses.GET, BASE + "files/file-1/content", json={"error": "denied"}, status=403)
    mocked.add(responses.DELETE, BASE + "files/file-1", json={"deleted": True})
    assert main(["file"]) == 0
    captured = capsys.readouterr()
    assert "free account" in captured.err
    assert [call.request.method for call in mocked.calls][-1] == "DELETE"
    assert b'name="purpose"\r\n\r\nfine-tune' in mocked.calls[0].request.body


def test_fine_tune(mocked):
    ft = "ft-N9Zf32f3uzpoXxJLr14CnFy1"
    mocked.add(responses.POST, BASE + "fine-tunes", json={"id": ft})
    mocked.add(responses.GET, BASE + "fine-tunes", json={"data": []})
    mocked.add(responses.GET, BASE + f"fine-tunes/{ft}", json={"id": ft})
    mocked.add(responses.POST, BASE + f"fine-tunes/{ft}/cancel", json={"status": "cancelled"})
    mocked.add(responses.GET, BASE + f"fine-tunes/{ft}/events", json={"data": []})
    mocked.add(responses.DELETE, BASE + "models/any-model", json={"deleted": True})
    assert main(["fine-tune"]) == 0
    assert len(mocked.calls) == 6
    assert json.loads(mocked.calls[0].request.body) == {"training_file": "file-gD2KgQKsxcn6zguK0ETuodXO"}


def test_instances(mocked, capsys):
    def reply(request):
        if request.headers["Authorization"] == "Bearer token":
            return 200, {}, json.dumps({"id": "ok"})
        return 401, {}, json.dumps({"error": {"message": "invalid"}})

    mocked.add_callback(responses.POST, BASE + "completions", callback=reply)
    assert main(["instances"]) == 0
    captured = capsys.readouterr()
    assert captured.out.count('{"id":"ok"}') == 2
    assert "failed purposely" in captured.err


def test_audio(mocked, environment, capsys):
    (environment / "audio.mp3").write_bytes(b"MP3")
    (environment / "german.m4a").write_bytes(b"M4A")
    mocked.add(responses.POST, BASE + "audio/transcriptions", json={"text": "hello"})
    mocked.add(responses.POST, BASE + "audio/translations", json={"text": "hallo"})
    assert main(["audio"]) == 0
    assert b"MP3" in mocked.calls[0].request.body
    assert b'name="model"\r\n\r\nwhisper-1' in mocked.calls[1].request.body
    assert capsys.readouterr().out.count("Response is:") == 2


def test_failure_exit_status(mocked, capsys):
    mocked.add(responses.POST, BASE + "completions", body="boom", status=500)
    assert main(["completion"]) == 1
    assert "HTTP Error: 500" in capsys.readouterr().err


def test_unknown_example():
    with pytest.raises(SystemExit) as info:
        main(["nothing"])
    assert info.value.code == 2