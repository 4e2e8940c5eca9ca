"""Command classification, safety checks and execution for helmsafe."""

from .classifier import (
    CommandClass, CommandClassifier, create_command_classifier,
    SAFE_COMMANDS, MODIFYING_COMMANDS
)
from .flags import TargetFlags, parse_target_flags, resolve_value
from .kubeconfig import KubeConfigClient, create_kubeconfig_client
from .safety import SafetyValidator, SafetyVerdict, create_safety_validator
from .confirmation import ConfirmationPrompt, create_confirmation_prompt, is_production_context
from .executor import HelmExecutor, create_helm_executor

__all__ = [
    "CommandClass",
    "CommandClassifier",
    "create_command_classifier",
    "SAFE_COMMANDS",
    "MODIFYING_COMMANDS",
    "TargetFlags",
    "parse_target_flags",
    "resolve_value",
    "KubeConfigClient",
    "create_kubeconfig_client",
    "SafetyValidator",
    "SafetyVerdict",
    "create_safety_validator",
    "ConfirmationPrompt",
    "create_confirmation_prompt",
    "is_production_context",
    "HelmExecutor",
    "create_helm_executor",
]
