"""Safety checks for modifying helm commands."""

import os
import sys
from typing import List, Mapping, Optional, Sequence, TextIO

from ..constants import NAMESPACE_FLAG_LABEL, CONTEXT_FLAG_LABEL
from ..errors import HelmSafeError, MissingSafetyFlags, ContextNotFound, ConfigQueryFailed
from ..utils.display import MessageType, print_message, print_colored_list
from ..utils.logging import logger
from .flags import parse_target_flags, resolve_value, namespace_providers, context_providers
from .kubeconfig import KubeConfigClient


class SafetyVerdict:
    """Outcome of validating one invocation."""
    
    def __init__(self, error: Optional[HelmSafeError] = None):
        self.error = error
    
    @property
    def passed(self) -> bool:
        return self.error is None
    
    @property
    def missing_fields(self) -> List[str]:
        if isinstance(self.error, MissingSafetyFlags):
            return self.error.fields
        return []
    
    @property
    def invalid_context(self) -> Optional[str]:
        if isinstance(self.error, ContextNotFound):
            return self.error.name
        return None
    
    def __str__(self) -> str:
        return "Pass" if self.passed else f"Fail: {self.error}"


class SafetyValidator:
    """Checks that a modifying command targets an explicit, existing namespace and context."""
    
    def __init__(self, kube_client: KubeConfigClient,
                 environ: Optional[Mapping[str, str]] = None,
                 stream: Optional[TextIO] = None):
        """Initialize the validator.
        
        Args:
            kube_client: Client used to list kube contexts
            environ: Environment to read HELM_NAMESPACE/HELM_KUBECONTEXT from
            stream: Where diagnostics are printed (stdout if None)
        """
        self.kube_client = kube_client
        self.environ = os.environ if environ is None else environ
        self.stream = stream
    
    def validate(self, args: Sequence[str]) -> SafetyVerdict:
        """Validate a modifying invocation.
        
        Prints the reason for any failure but never exits.
        
        Args:
            args: Full helm argument vector (command first)
            
        Returns:
            SafetyVerdict, passed or carrying the failure
        """
        flags = parse_target_flags(args)
        namespace = resolve_value(namespace_providers(flags, self.environ))
        kube_context = resolve_value(context_providers(flags, self.environ))
        
        missing = []
        if not namespace:
            missing.append(NAMESPACE_FLAG_LABEL)
        if not kube_context:
            missing.append(CONTEXT_FLAG_LABEL)
        
        if missing:
            self._report_missing(missing)
            return SafetyVerdict(MissingSafetyFlags(missing))
        
        try:
            self.check_context_exists(kube_context)
        except ContextNotFound as e:
            self._report_unknown_context(e)
            return SafetyVerdict(e)
        except ConfigQueryFailed as e:
            print_message(MessageType.WARNING, "Could not read kube contexts", e.cause,
                          "Check that kubectl is installed and your kubeconfig is readable",
                          stream=self.stream)
            return SafetyVerdict(e)
        
        logger.debug(f"Safety checks passed (namespace={namespace}, context={kube_context})")
        return SafetyVerdict()
    
    def check_context_exists(self, kube_context: str) -> None:
        """Raise ContextNotFound unless kube_context exactly matches a kubeconfig context.
        
        Raises:
            ContextNotFound: No exact, case-sensitive match
            ConfigQueryFailed: The context list could not be read
        """
        contexts = self.kube_client.list_contexts()
        if kube_context not in contexts:
            raise ContextNotFound(kube_context, contexts)
    
    def _report_missing(self, missing: List[str]) -> None:
        out = self.stream or sys.stdout
        print_message(MessageType.WARNING, "Missing required safety flags", stream=out)
        print("Missing flags: ", end="", file=out)
        print_colored_list(missing, stream=out)
        print(file=out)
        print_message(MessageType.NOTICE, "Safety requirement",
                      "Modifying Helm commands must specify both namespace and context "
                      "to prevent accidental operations",
                      "Add the missing flags and try again", stream=out)
    
    def _report_unknown_context(self, error: ContextNotFound) -> None:
        out = self.stream or sys.stdout
        print_message(MessageType.WARNING, "Invalid context specified",
                      f"Context '{error.name}' does not exist in your kubeconfig", stream=out)
        print("Available contexts:", file=out)
        print_colored_list(error.candidates, stream=out)


def create_safety_validator(kube_client: KubeConfigClient,
                            environ: Optional[Mapping[str, str]] = None) -> SafetyValidator:
    """Create a safety validator backed by the given kubeconfig client."""
    return SafetyValidator(kube_client, environ)
