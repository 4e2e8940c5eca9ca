"""kubectl configuration queries for helmsafe."""

import subprocess
from typing import List

from ..constants import DEFAULT_KUBECTL_BIN
from ..errors import ConfigQueryFailed
from ..utils.logging import logger


class KubeConfigClient:
    """Reads kube context information by running kubectl."""
    
    def __init__(self, kubectl_bin: str = DEFAULT_KUBECTL_BIN):
        """Initialize the client.
        
        Args:
            kubectl_bin: kubectl executable name or path
        """
        self.kubectl_bin = kubectl_bin
    
    def list_contexts(self) -> List[str]:
        """Return every context name known to the kubeconfig.
        
        Raises:
            ConfigQueryFailed: kubectl could not be run or exited non-zero
        """
        output = self._run_config("get-contexts", "-o", "name")
        contexts = [line.strip() for line in output.splitlines()]
        return [ctx for ctx in contexts if ctx]
    
    def current_context(self) -> str:
        """Return the kubeconfig's current context name.
        
        Raises:
            ConfigQueryFailed: kubectl could not be run or exited non-zero
        """
        return self._run_config("current-context").strip()
    
    def _run_config(self, *config_args: str) -> str:
        command = [self.kubectl_bin, "config", *config_args]
        logger.debug(f"Querying kubeconfig: {' '.join(command)}")
        
        try:
            process = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True
            )
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
            raise ConfigQueryFailed(detail, command) from e
        except OSError as e:
            raise ConfigQueryFailed(str(e), command) from e
        
        return process.stdout


def create_kubeconfig_client(kubectl_bin: str = DEFAULT_KUBECTL_BIN) -> KubeConfigClient:
    """Create a kubeconfig client for the given kubectl binary."""
    return KubeConfigClient(kubectl_bin)
