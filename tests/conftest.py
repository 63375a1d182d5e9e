"""Shared fixtures: a stub completion client and a sample directory."""

import threading
import time
from pathlib import Path
from types import SimpleNamespace

import pytest

from ulexite import log


class StubCompletions:
    """Stands in for `client.chat.completions`; records every request."""

    def __init__(self, reply=None, delays=None):
        self.reply = reply or (lambda system, user: f"  summary of {user!r}  \n")
        self.delays = delays or {}
        self.calls = []
        self._lock = threading.Lock()

    def create(self, **kwargs):
        with self._lock:
            self.calls.append(kwargs)
        system = kwargs["messages"][0]["content"]
        user = kwargs["messages"][1]["content"]
        time.sleep(self.delays.get(user, 0))
        message = SimpleNamespace(role="assistant", content=self.reply(system, user))
        return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message)])


def make_stub_client(**kwargs):
    completions = StubCompletions(**kwargs)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.fixture
def stub_client():
    return make_stub_client()


@pytest.fixture
def stub_client_factory():
    return make_stub_client


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """a.txt, b.txt, a hidden .secret and a subdirectory sub/."""
    root = tmp_path / "sample"
    root.mkdir()
    (root / "a.txt").write_text("alpha contents\n")
    (root / "b.txt").write_text("bravo contents\n")
    (root / ".secret").write_text("token=hunter2\n")
    (root / "sub").mkdir()
    (root / "sub" / "nested.txt").write_text("never read\n")
    return root


@pytest.fixture(autouse=True)
def _reset_quiet():
    yield
    log.set_quiet(False)
