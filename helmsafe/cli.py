"""Command-line interface for helmsafe."""

import sys
from typing import List, Optional

from colorama import init as colorama_init

from .commands.classifier import create_command_classifier
from .core.application import create_application, EXIT_FAILURE
from .errors import ConfigurationError
from .utils.logging import logger
from . import __version__

HELP_FLAGS = ("--help", "-h")
VERSION_FLAGS = ("--version", "-V")


def version_string() -> str:
    return f"helm-safe version {__version__}"


def show_help() -> None:
    """Print usage, including the commands that require safety checks."""
    classifier = create_command_classifier()
    
    print(f"{version_string()}\n")
    print("DESCRIPTION:")
    print("  helm-safe provides an interactive safety net for modifying Helm commands.")
    print("  It acts as a wrapper around destructive Helm operations to prevent common")
    print("  mistakes by requiring explicit --namespace and --kube-context flags.")
    print()
    print("USAGE:")
    print("  helm safe [HELM_COMMAND] [ARGS...]")
    print()
    print("EXAMPLES:")
    print("  helm safe install my-app ./chart --namespace my-ns --kube-context dev")
    print("  helm safe upgrade my-app ./chart --namespace my-ns --kube-context dev")
    print("  helm safe uninstall my-app --namespace my-ns --kube-context dev")
    print()
    print("MODIFYING COMMANDS (require safety checks):")
    
    commands = classifier.modifying_command_names()
    for start in range(0, len(commands), 4):
        row = commands[start:start + 4]
        print("  " + "".join(f"{name:<18}" for name in row))
    
    print()
    print("SAFE COMMANDS (pass through without checks):")
    print("  " + ", ".join(classifier.safe_command_names()))
    print()
    print("ENVIRONMENT:")
    print("  HELM_NAMESPACE, HELM_KUBECONTEXT  used when the flags are not given")
    print("  HELM_BIN                          helm binary to run (default: helm)")
    print("  HELM_SAFE_CONFIG                  configuration file path")
    print("  HELM_SAFE_DEBUG                   enable debug logging")
    print()


def main(args: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    colorama_init(autoreset=True)
    
    if args is None:
        args = sys.argv[1:]
    
    # Only the first argument is ours; everything else belongs to helm
    if args and args[0] in HELP_FLAGS:
        show_help()
        return
    
    if args and args[0] in VERSION_FLAGS:
        print(version_string())
        return
    
    try:
        app = create_application()
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(EXIT_FAILURE)
    
    sys.exit(app.run(args))


if __name__ == "__main__":
    main()
