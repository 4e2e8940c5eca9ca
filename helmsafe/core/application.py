"""Main application class for helmsafe."""

import os
from typing import List, Mapping, Optional, Sequence

from ..commands.classifier import CommandClassifier, CommandClass, create_command_classifier
from ..commands.confirmation import ConfirmationPrompt, create_confirmation_prompt
from ..commands.executor import HelmExecutor, create_helm_executor
from ..commands.kubeconfig import create_kubeconfig_client
from ..commands.safety import SafetyValidator, create_safety_validator
from ..config.manager import create_config_manager
from ..errors import SpawnFailed, UserCancelled
from ..utils.display import MessageType, print_message
from ..utils.logging import logger

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class HelmSafe:
    """Gate between the user and helm: classify, validate, confirm, execute."""
    
    def __init__(self, classifier: CommandClassifier, validator: SafetyValidator,
                 confirmation: ConfirmationPrompt, executor: HelmExecutor):
        self.classifier = classifier
        self.validator = validator
        self.confirmation = confirmation
        self.executor = executor
    
    def run(self, args: Sequence[str]) -> int:
        """Handle one invocation.
        
        Args:
            args: Helm argument vector (command first), forwarded unmodified
            
        Returns:
            Process exit status
        """
        args = list(args)
        if not args:
            print_message(MessageType.NOTICE, "No command specified",
                          "Use 'helm safe --help' for usage information")
            return EXIT_SUCCESS
        
        classification = self.classifier.classify(args[0], args[1:])
        
        if classification is CommandClass.MODIFYING:
            verdict = self.validator.validate(args)
            if not verdict.passed:
                logger.error(str(verdict.error))
                return EXIT_FAILURE
            
            if not self.confirmation.confirm(args):
                cancelled = UserCancelled()
                logger.debug(str(cancelled))
                print_message(MessageType.NOTICE, "Operation cancelled")
                return EXIT_SUCCESS
        
        return self.execute(args)
    
    def execute(self, args: List[str]) -> int:
        """Hand the invocation to helm, mapping spawn failures to exit 1."""
        try:
            return self.executor.run(args)
        except SpawnFailed as e:
            logger.error(str(e))
            return EXIT_FAILURE


def create_application(environ: Optional[Mapping[str, str]] = None) -> HelmSafe:
    """Create a HelmSafe application wired to kubectl and helm.
    
    Args:
        environ: Environment to use instead of os.environ
        
    Returns:
        Initialized HelmSafe instance
        
    Raises:
        ConfigurationError: The configuration file cannot be used
    """
    environ = os.environ if environ is None else environ
    
    config_manager = create_config_manager(environ=environ)
    logger.set_debug(config_manager.get("enable_debug", False))
    
    kube_client = create_kubeconfig_client(config_manager.get("kubectl_bin"))
    
    app = HelmSafe(
        classifier=create_command_classifier(),
        validator=create_safety_validator(kube_client, environ),
        confirmation=create_confirmation_prompt(kube_client, environ),
        executor=create_helm_executor(config_manager.get("helm_bin"), environ),
    )
    logger.debug("Application initialization complete")
    return app
