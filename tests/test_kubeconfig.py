"""Tests for the kubectl configuration client."""

import subprocess

import pytest

from helmsafe.commands.kubeconfig import KubeConfigClient
from helmsafe.errors import ConfigQueryFailed


def fake_run(stdout="", returncode=0, stderr="", error=None, calls=None):
    def _run(command, **kwargs):
        if calls is not None:
            calls.append(command)
        if error is not None:
            raise error
        if kwargs.get("check") and returncode != 0:
            raise subprocess.CalledProcessError(returncode, command, stdout, stderr)
        return subprocess.CompletedProcess(command, returncode, stdout, stderr)
    return _run


class TestListContexts:

    def test_one_name_per_line_trimmed(self, monkeypatch):
        calls = []
        monkeypatch.setattr(subprocess, "run", fake_run("dev\n  staging \n\nprod\n", calls=calls))
        assert KubeConfigClient().list_contexts() == ["dev", "staging", "prod"]
        assert calls == [["kubectl", "config", "get-contexts", "-o", "name"]]

    def test_custom_binary(self, monkeypatch):
        calls = []
        monkeypatch.setattr(subprocess, "run", fake_run("dev\n", calls=calls))
        KubeConfigClient("/opt/kubectl").list_contexts()
        assert calls[0][0] == "/opt/kubectl"

    def test_non_zero_exit(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", fake_run(returncode=1, stderr="error: no config"))
        with pytest.raises(ConfigQueryFailed) as excinfo:
            KubeConfigClient().list_contexts()
        assert excinfo.value.cause == "error: no config"

    def test_missing_binary(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", fake_run(error=FileNotFoundError("No such file: 'kubectl'")))
        with pytest.raises(ConfigQueryFailed):
            KubeConfigClient().list_contexts()


class TestCurrentContext:

    def test_trimmed(self, monkeypatch):
        calls = []
        monkeypatch.setattr(subprocess, "run", fake_run("minikube\n", calls=calls))
        assert KubeConfigClient().current_context() == "minikube"
        assert calls == [["kubectl", "config", "current-context"]]

    def test_failure(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", fake_run(returncode=1))
        with pytest.raises(ConfigQueryFailed) as excinfo:
            KubeConfigClient().current_context()
        assert excinfo.value.cause == "exit status 1"
