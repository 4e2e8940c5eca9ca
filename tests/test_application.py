"""End-to-end tests of the classify, validate, confirm, execute flow."""

import io

import pytest

from helmsafe.commands.classifier import CommandClassifier
from helmsafe.commands.confirmation import ConfirmationPrompt
from helmsafe.commands.safety import SafetyValidator
from helmsafe.core.application import HelmSafe
from helmsafe.errors import SpawnFailed

from conftest import FakeKubeConfig, RecordingExecutor


def make_app(kube, executor, answer="", environ=None):
    environ = environ or {}
    out = io.StringIO()
    app = HelmSafe(
        classifier=CommandClassifier(),
        validator=SafetyValidator(kube, environ=environ, stream=out),
        confirmation=ConfirmationPrompt(kube, environ=environ,
                                        input_stream=io.StringIO(answer), output_stream=out),
        executor=executor,
    )
    return app, out


GATED = ["install", "web", "./chart", "--namespace", "shop", "--kube-context", "dev", "--wait"]


class TestPassThrough:

    @pytest.mark.parametrize("args", [
        ["list", "-A"],
        ["status", "my-release", "--output", "json"],
        ["show", "values", "bitnami/nginx"],
        ["repo", "list"],
        ["kustomize", "--weird-flag", "x"],
        ["repo"],
    ])
    def test_forwarded_verbatim_without_checks(self, kube, executor, args):
        app, out = make_app(kube, executor)
        assert app.run(args) == 0
        assert executor.calls == [args]
        assert kube.calls == []
        assert out.getvalue() == ""

    def test_child_exit_status_propagates(self, kube):
        executor = RecordingExecutor(returncode=2)
        app, _ = make_app(kube, executor)
        assert app.run(["status", "missing"]) == 2


class TestGatedCommands:

    def test_confirmed_runs_once(self, kube, executor):
        app, _ = make_app(kube, executor, answer="yes\n")
        assert app.run(GATED) == 0
        assert executor.calls == [GATED]

    def test_missing_flags_blocks(self, kube, executor, capsys):
        app, out = make_app(kube, executor, answer="y\n")
        assert app.run(["uninstall", "web"]) == 1
        assert executor.calls == []
        assert "HELM OPERATION CONFIRMATION" not in out.getvalue()
        assert "missing required safety flags" in capsys.readouterr().err

    def test_unknown_context_blocks(self, kube, executor):
        app, out = make_app(kube, executor, answer="y\n")
        args = ["upgrade", "web", "./chart", "-n", "shop", "--kube-context", "nowhere"]
        assert app.run(args) == 1
        assert executor.calls == []
        assert "HELM OPERATION CONFIRMATION" not in out.getvalue()

    def test_query_failure_blocks(self, executor):
        app, _ = make_app(FakeKubeConfig(fail=True), executor, answer="y\n")
        assert app.run(GATED) == 1
        assert executor.calls == []

    @pytest.mark.parametrize("answer", ["n\n", "Y", "\n", ""])
    def test_declined_is_not_an_error(self, kube, executor, answer):
        app, _ = make_app(kube, executor, answer=answer)
        assert app.run(GATED) == 0
        assert executor.calls == []

    def test_cancel_notice(self, kube, executor, capsys):
        app, _ = make_app(kube, executor, answer="n\n")
        app.run(GATED)
        assert "Operation cancelled" in capsys.readouterr().out

    def test_environment_target(self, kube, executor):
        env = {"HELM_NAMESPACE": "shop", "HELM_KUBECONTEXT": "staging"}
        app, out = make_app(kube, executor, answer="y\n", environ=env)
        assert app.run(["rollback", "web", "3"]) == 0
        assert executor.calls == [["rollback", "web", "3"]]
        assert "staging" in out.getvalue()

    def test_spawn_failure(self, kube, capsys):
        executor = RecordingExecutor(error=SpawnFailed("executable not found", "helm"))
        app, _ = make_app(kube, executor, answer="y\n")
        assert app.run(GATED) == 1
        assert "executable not found" in capsys.readouterr().err


class TestNoArguments:

    def test_notice_and_success(self, kube, executor, capsys):
        app, _ = make_app(kube, executor)
        assert app.run([]) == 0
        assert executor.calls == []
        assert "No command specified" in capsys.readouterr().out
