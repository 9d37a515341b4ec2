"""
Deployment Data Model
Artifacts, pending deployment transactions and confirmed contracts
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple


class TransactionStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    REVERTED = "reverted"


@dataclass(frozen=True)
class ContractArtifact:
    """Compiled contract code plus its interface description"""

    name: str
    abi: List[Dict[str, Any]]
    bytecode: str
    source_path: Optional[Path] = None


@dataclass
class DeploymentTransaction:
    """A submitted request to create a new contract instance"""

    signer_address: str
    artifact_name: str
    tx_hash: str
    constructor_args: Tuple[Any, ...] = ()
    status: TransactionStatus = TransactionStatus.PENDING


@dataclass(frozen=True)
class DeployedContract:
    """
    Result of a confirmed deployment

    Only built from a successful receipt, so the address is always set.
    """

    address: str
    transaction_hash: str
    block_number: int
    gas_used: int
