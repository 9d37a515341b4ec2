"""
Deployment Exceptions
Failure taxonomy for the deployment pipeline
"""

from typing import Optional


class DeploymentError(Exception):
    """Base exception for deployment failures"""

    pass


class ConfigurationError(DeploymentError):
    """Raised when a signer credential, endpoint or config file is missing or malformed"""

    pass


class ArtifactNotFoundError(DeploymentError):
    """Raised when a compiled contract artifact cannot be resolved"""

    def __init__(self, name: str, detail: str = "run 'npx hardhat compile' first"):
        self.name = name
        super().__init__(f"Artifact for contract '{name}' not found: {detail}")


class SubmissionError(DeploymentError):
    """Raised when the network rejects a transaction before inclusion"""

    pass


class ConfirmationTimeoutError(DeploymentError):
    """Raised when a transaction is neither confirmed nor rejected in time"""

    def __init__(self, tx_hash: str, timeout: float, detail: Optional[str] = None):
        self.tx_hash = tx_hash
        self.timeout = timeout
        message = (
            f"Transaction {tx_hash} not confirmed within {timeout}s; "
            "confirmation status unknown, it may still be mined"
        )
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class TransactionRevertedError(DeploymentError):
    """Raised when a deployment transaction is included but reverted"""

    def __init__(self, tx_hash: str, reason: Optional[str] = None):
        self.tx_hash = tx_hash
        self.reason = reason
        message = f"Transaction {tx_hash} reverted"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
