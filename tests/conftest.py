from __future__ import annotations

import io
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection
# without requiring an editable install.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Keep PERSISTABLE_* variables from the developer's shell out of the tests.
    """
    for name in ("PERSISTABLE_DEFAULT_ADAPTER", "PERSISTABLE_PERSIST_METHOD", "PERSISTABLE_ATOMIC_WRITES"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def store() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def registry():
    """
    A private registry with the reference codecs, so tests can register
    extra codecs without leaking into the process-wide one.
    """
    from persistable import CodecRegistry, register_codecs

    return register_codecs(CodecRegistry())
