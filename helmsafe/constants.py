"""Constants used throughout the helmsafe package."""

from pathlib import Path
from colorama import Fore, Style

# Package information
PACKAGE_NAME = "helm-safe"

# Configuration paths
CONFIG_DIR = Path.home() / ".config" / "helm-safe"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

# Environment variables (the first three are exported by helm to plugins)
ENV_NAMESPACE = "HELM_NAMESPACE"
ENV_KUBECONTEXT = "HELM_KUBECONTEXT"
ENV_HELM_BIN = "HELM_BIN"
ENV_CONFIG_FILE = "HELM_SAFE_CONFIG"
ENV_DEBUG = "HELM_SAFE_DEBUG"

# ANSI Color Codes (using colorama)
CLR_RESET = Style.RESET_ALL
CLR_RED = Fore.RED
CLR_BOLD_RED = Style.BRIGHT + Fore.LIGHTRED_EX
CLR_GREEN = Fore.GREEN
CLR_YELLOW = Fore.YELLOW
CLR_BOLD_YELLOW = Style.BRIGHT + Fore.LIGHTYELLOW_EX
CLR_BLUE = Fore.BLUE
CLR_MAGENTA = Fore.MAGENTA
CLR_CYAN = Fore.CYAN
CLR_BOLD_CYAN = Style.BRIGHT + Fore.CYAN
CLR_WHITE = Fore.WHITE
CLR_BOLD_WHITE = Style.BRIGHT + Fore.WHITE

# Default configuration values
DEFAULT_HELM_BIN = "helm"
DEFAULT_KUBECTL_BIN = "kubectl"
DEFAULT_ENABLE_DEBUG = False
DEFAULT_NAMESPACE = "default"
UNKNOWN_CONTEXT = "unknown"

# Flag names reported when a modifying command lacks a target
NAMESPACE_FLAG_LABEL = "--namespace/-n"
CONTEXT_FLAG_LABEL = "--kube-context"

# Context names containing any of these look like production
PRODUCTION_KEYWORDS = ("prod", "production", "live", "prd")

# Accepted answers at the confirmation prompt
CONFIRM_ANSWERS = ("y", "yes")
