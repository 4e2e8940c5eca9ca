"""Tests for permissive target flag parsing and value resolution."""

import pytest

from helmsafe.commands.flags import (
    TargetFlags, parse_target_flags, resolve_value, namespace_providers, context_providers
)


class TestParseTargetFlags:

    @pytest.mark.parametrize("args,expected", [
        (["install", "r", "c", "--namespace", "ns"], TargetFlags("ns", "")),
        (["install", "r", "c", "--namespace=ns"], TargetFlags("ns", "")),
        (["install", "-n", "ns"], TargetFlags("ns", "")),
        (["install", "-n=ns"], TargetFlags("ns", "")),
        (["install", "-nns"], TargetFlags("ns", "")),
        (["install", "--kube-context", "dev"], TargetFlags("", "dev")),
        (["install", "--kube-context=dev"], TargetFlags("", "dev")),
        (["install", "-n", "ns", "--kube-context", "dev"], TargetFlags("ns", "dev")),
    ])
    def test_recognized_forms(self, args, expected):
        assert parse_target_flags(args) == expected

    def test_unknown_flags_are_ignored(self):
        args = ["upgrade", "--install", "--set", "a=b", "rel", "./chart",
                "--wait", "--timeout=5m", "-n", "ns", "--kube-context", "dev"]
        assert parse_target_flags(args) == TargetFlags("ns", "dev")

    def test_unknown_flag_leaves_dashed_token_alone(self):
        args = ["install", "--values", "-n", "ns"]
        assert parse_target_flags(args).namespace == "ns"

    def test_unknown_short_flag_group_before_namespace(self):
        assert parse_target_flags(["install", "-an", "ns"]).namespace == "ns"

    def test_last_occurrence_wins(self):
        args = ["install", "-n", "first", "--namespace", "second"]
        assert parse_target_flags(args).namespace == "second"

    def test_known_flag_takes_next_token_even_if_dashed(self):
        assert parse_target_flags(["install", "--kube-context", "-weird"]).kube_context == "-weird"

    def test_stops_at_double_dash(self):
        args = ["install", "--", "-n", "ns"]
        assert parse_target_flags(args) == TargetFlags("", "")

    def test_missing_value_at_end(self):
        assert parse_target_flags(["install", "--namespace"]) == TargetFlags("", "")
        assert parse_target_flags(["install", "--kube-context", "dev", "-n"]) == TargetFlags("", "dev")

    def test_does_not_modify_input(self):
        args = ["install", "-n", "ns", "--kube-context=dev"]
        snapshot = list(args)
        parse_target_flags(args)
        assert args == snapshot


class TestResolveValue:

    def test_first_non_empty_wins(self):
        assert resolve_value([lambda: "", lambda: None, lambda: "b", lambda: "c"]) == "b"

    def test_empty_when_nothing_resolves(self):
        assert resolve_value([lambda: "", lambda: None]) == ""
        assert resolve_value([]) == ""

    def test_later_providers_not_called_after_match(self):
        called = []

        def late():
            called.append(True)
            return "late"

        assert resolve_value([lambda: "early", late]) == "early"
        assert called == []

    def test_flag_beats_environment(self):
        env = {"HELM_NAMESPACE": "env-ns", "HELM_KUBECONTEXT": "env-ctx"}
        flags = TargetFlags("flag-ns", "flag-ctx")
        assert resolve_value(namespace_providers(flags, env)) == "flag-ns"
        assert resolve_value(context_providers(flags, env)) == "flag-ctx"

    def test_environment_used_without_flag(self):
        env = {"HELM_NAMESPACE": "env-ns", "HELM_KUBECONTEXT": "env-ctx"}
        flags = TargetFlags()
        assert resolve_value(namespace_providers(flags, env)) == "env-ns"
        assert resolve_value(context_providers(flags, env)) == "env-ctx"
