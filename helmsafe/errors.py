"""Error types raised and reported by helmsafe."""

from typing import List, Optional, Sequence


class HelmSafeError(Exception):
    """Base class for all helmsafe errors."""


class MissingSafetyFlags(HelmSafeError):
    """A modifying command did not name both a namespace and a context."""

    def __init__(self, fields: Sequence[str]):
        self.fields: List[str] = list(fields)
        super().__init__(f"missing required safety flags: {', '.join(self.fields)}")


class ContextNotFound(HelmSafeError):
    """The requested kube context is absent from the kubeconfig."""

    def __init__(self, name: str, candidates: Sequence[str]):
        self.name = name
        self.candidates: List[str] = sorted(candidates)
        super().__init__(f"context '{name}' not found")


class ConfigQueryFailed(HelmSafeError):
    """kubectl could not be run or exited non-zero."""

    def __init__(self, cause: str, command: Optional[Sequence[str]] = None):
        self.cause = cause
        self.command = list(command) if command else []
        super().__init__(f"failed to query kubectl config: {cause}")


class SpawnFailed(HelmSafeError):
    """The helm binary could not be started."""

    def __init__(self, cause: str, binary: str = ""):
        self.cause = cause
        self.binary = binary
        super().__init__(f"failed to run '{binary}': {cause}" if binary else f"failed to run helm: {cause}")


class UserCancelled(HelmSafeError):
    """The user declined the confirmation prompt. Not a failure."""

    def __init__(self):
        super().__init__("operation cancelled")


class ConfigurationError(HelmSafeError):
    """The helm-safe configuration file is unusable."""
