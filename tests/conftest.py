from __future__ import annotations

import re

import pytest


ARRAY_RE = re.compile(r"^char (\w+)\[(\d+)\] = \{\n(.*)\};\n$", re.DOTALL)
TOKEN_RE = re.compile(r"0x([0-9a-f]{2})")


def parse_c_array(text: str) -> tuple[str, int, bytes]:
    """Read back (name, declared size, bytes) from a generated source file."""
    m = ARRAY_RE.match(text)
    assert m, f"not a generated array:\n{text}"
    name, size, body = m.groups()
    return name, int(size), bytes(int(t, 16) for t in TOKEN_RE.findall(body))


class FailingFile:
    """Wraps a real file; the first write raises ENOSPC."""

    def __init__(self, f):
        self._f = f

    def write(self, s):
        raise OSError(28, "No space left on device")

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self._f.close()
        return False


@pytest.fixture
def fail_writes_to(monkeypatch):
    """Make writes to the named paths fail after the file has been created."""
    from file_to_c_array import emit

    failing: set[str] = set()

    def fake_open(path, *args, **kwargs):
        f = open(path, *args, **kwargs)
        if str(path) in failing:
            return FailingFile(f)
        return f

    monkeypatch.setattr(emit, "open", fake_open, raising=False)

    def add(path) -> None:
        failing.add(str(path))

    return add
