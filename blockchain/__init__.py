"""
Blockchain Interaction Package
Handles signer resolution, artifact loading and deployment transport
"""

from .artifacts import ArtifactResolver
from .exceptions import (
    ArtifactNotFoundError,
    ConfigurationError,
    ConfirmationTimeoutError,
    DeploymentError,
    SubmissionError,
    TransactionRevertedError
)
from .models import ContractArtifact, DeployedContract, DeploymentTransaction, TransactionStatus
from .signer import resolve_signer
from .transport import Web3Transport

__all__ = [
    'ArtifactResolver',
    'Web3Transport',
    'resolve_signer',
    'ContractArtifact',
    'DeployedContract',
    'DeploymentTransaction',
    'TransactionStatus',
    'DeploymentError',
    'ConfigurationError',
    'ArtifactNotFoundError',
    'SubmissionError',
    'ConfirmationTimeoutError',
    'TransactionRevertedError'
]
