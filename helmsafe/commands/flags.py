"""Permissive parsing of target flags and effective value resolution."""

from typing import Callable, List, Mapping, NamedTuple, Optional, Sequence

from ..constants import ENV_NAMESPACE, ENV_KUBECONTEXT
from ..utils.logging import logger

Provider = Callable[[], Optional[str]]

NAMESPACE_LONG = "namespace"
NAMESPACE_SHORT = "n"
CONTEXT_LONG = "kube-context"


class TargetFlags(NamedTuple):
    """Namespace and context given explicitly on the command line ("" if absent)."""
    namespace: str = ""
    kube_context: str = ""


def parse_target_flags(args: Sequence[str]) -> TargetFlags:
    """Collect --namespace/-n and --kube-context from a helm argument vector.
    
    Behaves like a pflag set with unknown flags whitelisted: unrecognized
    flags are skipped (swallowing a following non-flag token as their
    value), later occurrences win, and parsing stops at "--".
    
    Args:
        args: Argument vector, not modified
        
    Returns:
        TargetFlags with the values found
    """
    found = {"namespace": "", "kube_context": ""}
    i = 0
    
    while i < len(args):
        arg = args[i]
        i += 1
        
        if arg == "--":
            break
        
        if arg.startswith("--"):
            name, sep, value = arg[2:].partition("=")
            if name in (NAMESPACE_LONG, CONTEXT_LONG):
                if not sep:
                    if i >= len(args):
                        logger.debug(f"Flag --{name} has no value")
                        break
                    value = args[i]
                    i += 1
                key = "namespace" if name == NAMESPACE_LONG else "kube_context"
                found[key] = value
            elif not sep and i < len(args) and not args[i].startswith("-"):
                i += 1
        
        elif arg.startswith("-") and len(arg) > 1:
            shorthands = arg[1:]
            for pos, char in enumerate(shorthands):
                rest = shorthands[pos + 1:]
                if char == NAMESPACE_SHORT:
                    if rest:
                        found["namespace"] = rest[1:] if rest.startswith("=") else rest
                    elif i < len(args):
                        found["namespace"] = args[i]
                        i += 1
                    else:
                        logger.debug("Flag -n has no value")
                    break
                if rest.startswith("="):
                    break
                if not rest and i < len(args) and not args[i].startswith("-"):
                    i += 1
    
    return TargetFlags(**found)


def resolve_value(providers: Sequence[Provider]) -> str:
    """Return the first non-empty value produced by the providers, in order."""
    for provider in providers:
        value = provider()
        if value:
            return value
    return ""


def namespace_providers(flags: TargetFlags, environ: Mapping[str, str]) -> List[Provider]:
    """Flag, then HELM_NAMESPACE."""
    return [
        lambda: flags.namespace,
        lambda: environ.get(ENV_NAMESPACE, ""),
    ]


def context_providers(flags: TargetFlags, environ: Mapping[str, str]) -> List[Provider]:
    """Flag, then HELM_KUBECONTEXT."""
    return [
        lambda: flags.kube_context,
        lambda: environ.get(ENV_KUBECONTEXT, ""),
    ]
