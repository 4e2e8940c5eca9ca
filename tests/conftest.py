"""Shared fixtures for the helmsafe test suite."""

import io
from typing import List, Optional

import pytest

from helmsafe.errors import ConfigQueryFailed, SpawnFailed


class FakeKubeConfig:
    """Stands in for KubeConfigClient without running kubectl."""

    def __init__(self, contexts=None, current="", fail=False):
        self.contexts = list(contexts or [])
        self.current = current
        self.fail = fail
        self.calls: List[str] = []

    def list_contexts(self):
        self.calls.append("list_contexts")
        if self.fail:
            raise ConfigQueryFailed("connection refused")
        return list(self.contexts)

    def current_context(self):
        self.calls.append("current_context")
        if self.fail:
            raise ConfigQueryFailed("connection refused")
        return self.current


class RecordingExecutor:
    """Stands in for HelmExecutor and records forwarded argument vectors."""

    def __init__(self, returncode: int = 0, error: Optional[SpawnFailed] = None):
        self.returncode = returncode
        self.error = error
        self.calls: List[List[str]] = []

    def run(self, args):
        self.calls.append(list(args))
        if self.error is not None:
            raise self.error
        return self.returncode


class ClosedStream(io.StringIO):
    """An input stream whose reads fail."""

    def readline(self, *args):
        raise ValueError("I/O operation on closed file.")


@pytest.fixture
def kube():
    return FakeKubeConfig(contexts=["dev", "staging", "prod-eu"], current="dev")


@pytest.fixture
def executor():
    return RecordingExecutor()

