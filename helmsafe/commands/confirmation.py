"""Interactive confirmation of modifying helm commands."""

import os
import sys
from typing import Mapping, Optional, Sequence, TextIO, Tuple

from ..constants import (
    CLR_RESET, CLR_BLUE, CLR_CYAN, CLR_YELLOW, CLR_BOLD_YELLOW,
    DEFAULT_NAMESPACE, UNKNOWN_CONTEXT, PRODUCTION_KEYWORDS, CONFIRM_ANSWERS
)
from ..errors import ConfigQueryFailed
from ..utils.display import MessageType, print_message, format_command_line
from ..utils.logging import logger
from .flags import parse_target_flags, resolve_value, namespace_providers, context_providers
from .kubeconfig import KubeConfigClient

SEPARATOR = "━" * 32


def is_production_context(kube_context: str) -> bool:
    """Check whether a context name looks like a production cluster."""
    lowered = kube_context.lower()
    return any(keyword in lowered for keyword in PRODUCTION_KEYWORDS)


class ConfirmationPrompt:
    """Shows what a modifying command will touch and asks the user to proceed."""
    
    def __init__(self, kube_client: KubeConfigClient,
                 environ: Optional[Mapping[str, str]] = None,
                 input_stream: Optional[TextIO] = None,
                 output_stream: Optional[TextIO] = None):
        """Initialize the prompt.
        
        Args:
            kube_client: Client used to look up the current context
            environ: Environment to read HELM_NAMESPACE/HELM_KUBECONTEXT from
            input_stream: Where the answer is read from (stdin if None)
            output_stream: Where the summary is printed (stdout if None)
        """
        self.kube_client = kube_client
        self.environ = os.environ if environ is None else environ
        self.input_stream = input_stream
        self.output_stream = output_stream
    
    def effective_namespace(self, args: Sequence[str]) -> str:
        flags = parse_target_flags(args)
        return resolve_value(namespace_providers(flags, self.environ)) or DEFAULT_NAMESPACE
    
    def effective_context(self, args: Sequence[str]) -> str:
        flags = parse_target_flags(args)
        providers = context_providers(flags, self.environ) + [self._current_context]
        return resolve_value(providers) or UNKNOWN_CONTEXT
    
    def effective_target(self, args: Sequence[str]) -> Tuple[str, str]:
        """Return the (namespace, context) helm will actually use."""
        return self.effective_namespace(args), self.effective_context(args)
    
    def confirm(self, args: Sequence[str]) -> bool:
        """Render the operation summary and block for a yes/no answer.
        
        Args:
            args: Full helm argument vector (command first)
            
        Returns:
            True only for "y" or "yes" (any case); False otherwise, including
            empty input, end of input, or a read error
        """
        namespace, kube_context = self.effective_target(args)
        out = self.output_stream or sys.stdout
        
        print(file=out)
        print(f"{CLR_BOLD_YELLOW}🔍 HELM OPERATION CONFIRMATION{CLR_RESET}", file=out)
        print(SEPARATOR, file=out)
        print(f"{CLR_BLUE}Command:   {CLR_RESET}{format_command_line(list(args))}", file=out)
        print(f"{CLR_BLUE}Context:   {CLR_RESET}{CLR_CYAN}{kube_context}{CLR_RESET}", file=out)
        print(f"{CLR_BLUE}Namespace: {CLR_RESET}{CLR_CYAN}{namespace}{CLR_RESET}", file=out)
        print(file=out)
        
        if is_production_context(kube_context):
            print_message(MessageType.PRODUCTION_ALERT, "PRODUCTION CONTEXT DETECTED",
                          "You are about to execute a command in what appears to be a production context",
                          stream=out)
            print(file=out)
        
        print(f"{CLR_YELLOW}Do you want to continue? (y/N): {CLR_RESET}", end="", file=out)
        out.flush()
        
        response = self._read_response()
        if response is None:
            return False
        
        answer = response.strip().lower()
        logger.debug(f"Confirmation answer: '{answer}'")
        return answer in CONFIRM_ANSWERS
    
    def _read_response(self) -> Optional[str]:
        stream = self.input_stream or sys.stdin
        try:
            line = stream.readline()
        except (OSError, ValueError) as e:
            logger.debug(f"Could not read confirmation: {e}")
            return None
        except KeyboardInterrupt:
            print(file=self.output_stream or sys.stdout)
            return None
        
        # An answer cut off by end of input is not an answer
        if not line.endswith("\n"):
            return None
        return line
    
    def _current_context(self) -> str:
        try:
            return self.kube_client.current_context()
        except ConfigQueryFailed as e:
            logger.debug(f"Current context lookup failed: {e}")
            return ""


def create_confirmation_prompt(kube_client: KubeConfigClient,
                               environ: Optional[Mapping[str, str]] = None) -> ConfirmationPrompt:
    """Create a confirmation prompt reading from stdin."""
    return ConfirmationPrompt(kube_client, environ)
