"""Delegation of the original command line to the helm binary."""

import os
import shutil
import subprocess
from typing import List, Mapping, Optional, Sequence

from ..constants import ENV_HELM_BIN, DEFAULT_HELM_BIN
from ..errors import SpawnFailed
from ..utils.logging import logger


class HelmExecutor:
    """Runs helm with the caller's argument vector and inherited stdio."""
    
    def __init__(self, default_binary: str = DEFAULT_HELM_BIN,
                 environ: Optional[Mapping[str, str]] = None):
        """Initialize the executor.
        
        Args:
            default_binary: Binary used when HELM_BIN is not set
            environ: Environment to read HELM_BIN from
        """
        self.default_binary = default_binary
        self.environ = os.environ if environ is None else environ
    
    def resolve_binary(self) -> str:
        """Resolve the helm executable: HELM_BIN, else the default looked up on PATH.
        
        Raises:
            SpawnFailed: The binary cannot be found
        """
        binary = self.environ.get(ENV_HELM_BIN) or self.default_binary
        resolved = shutil.which(binary)
        if resolved is None:
            raise SpawnFailed("executable not found", binary)
        return resolved
    
    def run(self, args: Sequence[str]) -> int:
        """Run helm with exactly the given arguments and wait for it.
        
        Args:
            args: Argument vector, forwarded unmodified
            
        Returns:
            helm's exit status (128+N if it was killed by signal N)
            
        Raises:
            SpawnFailed: helm could not be started
        """
        binary = self.resolve_binary()
        command: List[str] = [binary, *args]
        logger.debug(f"Executing: {' '.join(command)}")
        
        try:
            process = subprocess.Popen(command)
        except OSError as e:
            raise SpawnFailed(str(e), binary) from e
        
        # Ctrl+C reaches helm through the terminal; let it decide how to exit
        while True:
            try:
                returncode = process.wait()
                break
            except KeyboardInterrupt:
                logger.debug("Interrupt received, waiting for helm to exit")
        
        logger.debug(f"helm exited with status {returncode}")
        if returncode < 0:
            return 128 - returncode
        return returncode


def create_helm_executor(default_binary: str = DEFAULT_HELM_BIN,
                         environ: Optional[Mapping[str, str]] = None) -> HelmExecutor:
    """Create a helm executor."""
    return HelmExecutor(default_binary, environ)
