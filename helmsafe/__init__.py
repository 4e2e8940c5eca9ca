"""
helm-safe - an interactive safety net for modifying Helm commands.

Wraps the helm CLI: read-only commands pass straight through, while
commands that change a cluster must name their namespace and kube context,
target a context that exists, and be confirmed by the user before helm runs.
"""

__version__ = "1.0.0"
__author__ = "helm-safe Team"

# Main API imports
from .core.application import HelmSafe, create_application
from .commands.classifier import CommandClass, CommandClassifier, create_command_classifier
from .config.manager import ConfigManager, create_config_manager

__all__ = [
    "HelmSafe",
    "create_application",
    "CommandClass",
    "CommandClassifier",
    "create_command_classifier",
    "ConfigManager",
    "create_config_manager",
    "__version__",
]
