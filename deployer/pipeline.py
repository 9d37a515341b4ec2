"""
Deployment Pipeline
Resolves signer and artifact, submits the deployment and reports the contract address
"""

from enum import Enum
from typing import Any, NamedTuple, Optional, Sequence, TextIO

from loguru import logger

from blockchain.exceptions import DeploymentError
from blockchain.models import DeployedContract
from blockchain.signer import resolve_signer

from .config import DEFAULT_CONFIRMATION_TIMEOUT


class PipelineState(Enum):
    INIT = "init"
    SIGNER_RESOLVED = "signer_resolved"
    ARTIFACT_RESOLVED = "artifact_resolved"
    SUBMITTED = "submitted"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class DeploymentResult(NamedTuple):
    address: Optional[str]
    exit_code: int


class DeploymentPipeline:
    """
    Deploys one contract exactly once per run

    INIT -> SIGNER_RESOLVED -> ARTIFACT_RESOLVED -> SUBMITTED -> CONFIRMED,
    with FAILED reachable from any non-terminal state. Nothing is retried:
    a failed submission may already have consumed a nonce.
    """

    def __init__(
        self,
        transport,
        artifact_resolver,
        accounts: Optional[Sequence[str]],
        contract_name: str = "lottery",
        constructor_args: Sequence[Any] = (),
        confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT,
        output: Optional[TextIO] = None
    ):
        """
        Initialize Deployment Pipeline

        Args:
            transport: Submits transactions and waits for receipts
            artifact_resolver: Resolves compiled artifacts by name
            accounts: Signer credentials (only the first is used)
            contract_name: Artifact to deploy
            constructor_args: Constructor arguments
            confirmation_timeout: Seconds to wait for the receipt
            output: Stream for progress lines (None = stdout)
        """
        self.transport = transport
        self.artifact_resolver = artifact_resolver
        self.accounts = accounts
        self.contract_name = contract_name
        self.constructor_args = tuple(constructor_args)
        self.confirmation_timeout = confirmation_timeout
        self.output = output

        self.state = PipelineState.INIT
        self.error: Optional[DeploymentError] = None
        self.deployed: Optional[DeployedContract] = None

    def run(self) -> DeploymentResult:
        """
        Execute the deployment sequence

        Returns:
            (contract address, 0) on success, (None, 1) on any deployment failure
        """
        if self.state is not PipelineState.INIT:
            raise RuntimeError(f"Pipeline already ran (state: {self.state.value})")

        try:
            self.deployed = self._execute()
        except DeploymentError as e:
            self.error = e
            self._transition(PipelineState.FAILED)
            logger.error(f"Deployment failed: {type(e).__name__}: {e}")
            return DeploymentResult(address=None, exit_code=1)
        except Exception:
            self._transition(PipelineState.FAILED)
            raise

        return DeploymentResult(address=self.deployed.address, exit_code=0)

    def _execute(self) -> DeployedContract:
        signer = resolve_signer(self.accounts)
        self._transition(PipelineState.SIGNER_RESOLVED)
        self._report(f"Deploying contracts with the account: {signer.address}")

        artifact = self.artifact_resolver.resolve(self.contract_name)
        self._transition(PipelineState.ARTIFACT_RESOLVED)

        transaction = self.transport.submit_deployment(signer, artifact, self.constructor_args)
        self._transition(PipelineState.SUBMITTED)

        contract = self.transport.wait_for_confirmation(transaction, self.confirmation_timeout)
        self._transition(PipelineState.CONFIRMED)

        self._report(f"{self._display_name()} address: {contract.address}")
        return contract

    def _transition(self, state: PipelineState):
        logger.debug(f"Pipeline state: {self.state.value} -> {state.value}")
        self.state = state

    def _report(self, line: str):
        print(line, file=self.output, flush=True)

    def _display_name(self) -> str:
        # "contracts/Lottery.sol:lottery" -> "Lottery"
        name = self.contract_name.rsplit(':', 1)[-1]
        return name[:1].upper() + name[1:]
