"""Shared fixtures: a scripted git runner and a mock Messages API."""

import json
import subprocess

import httpx
import pytest

from claude_commit.config import Config


# ---------------------------------------------------------------------------
# Scripted git
# ---------------------------------------------------------------------------

class FakeGit:
    """Stands in for subprocess.run; answers git commands from a script."""

    def __init__(self):
        self._outputs = {}
        self.calls = []

    def set(self, *args, stdout=b"", returncode=0, stderr=b""):
        if isinstance(stdout, str):
            stdout = stdout.encode('utf-8')
        self._outputs[args] = (returncode, stdout, stderr)

    def __call__(self, cmd, capture_output=False, check=False, **kwargs):
        self.calls.append(list(cmd))
        returncode, stdout, stderr = self._outputs.get(tuple(cmd[1:]), (0, b"", b""))
        if check and returncode:
            raise subprocess.CalledProcessError(returncode, cmd, output=stdout, stderr=stderr)
        if not capture_output:
            stdout = stderr = None
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)

    @property
    def commits(self):
        return [call for call in self.calls if call[1:2] == ['commit']]


@pytest.fixture
def fake_git(monkeypatch):
    git = FakeGit()
    monkeypatch.setattr("claude_commit.git.analyzer.subprocess.run", git)
    return git


# ---------------------------------------------------------------------------
# Mock Messages API
# ---------------------------------------------------------------------------

def make_message(content, model="claude-sonnet-4-20250514"):
    """A Messages API response body."""
    return {
        "id": "msg_01XFDUDYJgAACzvnptvVoYEL",
        "type": "message",
        "role": "assistant",
        "model": model,
        "content": content,
        "stop_reason": "end_turn",
        "stop_sequence": None,
        "usage": {"input_tokens": 120, "output_tokens": 30},
    }


class FakeAnthropic:
    """Records outgoing requests and replies with a scripted response."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = make_message([{"type": "text", "text": "Add foo\n\n- thing"}])
        self.error = None

    def reply(self, status_code, body):
        self.status_code = status_code
        self.body = body

    def fail_with(self, error):
        self.error = error

    def _handler(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.body)

    def http_client(self):
        return httpx.Client(transport=httpx.MockTransport(self._handler))

    @property
    def last_body(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def fake_anthropic(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_BASE_URL", raising=False)
    return FakeAnthropic()


@pytest.fixture
def config():
    return Config(api_key="test-key")
