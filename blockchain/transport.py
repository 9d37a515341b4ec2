"""
Web3 Transport
Submits deployment transactions and waits for their receipts
"""

from decimal import Decimal
from typing import Any, Dict, Optional, Sequence

from eth_account.signers.local import LocalAccount
from loguru import logger
from requests.exceptions import RequestException
from web3 import Web3
from web3.exceptions import ContractLogicError, TimeExhausted, Web3Exception

from .exceptions import (
    ConfirmationTimeoutError,
    SubmissionError,
    TransactionRevertedError
)
from .models import (
    ContractArtifact,
    DeployedContract,
    DeploymentTransaction,
    TransactionStatus
)

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Errors web3 surfaces for RPC rejections and connectivity failures
NETWORK_ERRORS = (Web3Exception, RequestException, ValueError)


class Web3Transport:
    """
    Network collaborator for the deployment pipeline

    Wraps a Web3 instance; every web3/RPC failure is translated into the
    deployment error taxonomy at this boundary.
    """

    DEFAULT_GAS_LIMIT = 3000000

    def __init__(
        self,
        w3: Web3,
        chain_id: Optional[int] = None,
        gas_buffer: float = 1.2,
        poll_latency: float = 0.5
    ):
        """
        Initialize Web3 Transport

        Args:
            w3: Web3 instance
            chain_id: Expected chain id (None = ask the node)
            gas_buffer: Multiplier applied to the gas estimate
            poll_latency: Seconds between receipt polls
        """
        self.w3 = w3
        self.chain_id = chain_id
        self.gas_buffer = gas_buffer
        self.poll_latency = poll_latency

    @classmethod
    def from_endpoint(cls, endpoint: str, request_timeout: float = 30, **kwargs) -> "Web3Transport":
        """Create a transport over an HTTP JSON-RPC endpoint"""
        w3 = Web3(Web3.HTTPProvider(endpoint, request_kwargs={'timeout': request_timeout}))
        return cls(w3, **kwargs)

    def is_connected(self) -> bool:
        return self.w3.is_connected()

    def get_chain_id(self) -> int:
        return self.w3.eth.chain_id

    def get_balance(self, address: str) -> Decimal:
        """Native balance of an address in ether units"""
        balance_wei = self.w3.eth.get_balance(address)
        return Decimal(str(self.w3.from_wei(balance_wei, 'ether')))

    def submit_deployment(
        self,
        signer: LocalAccount,
        artifact: ContractArtifact,
        constructor_args: Sequence[Any] = ()
    ) -> DeploymentTransaction:
        """
        Build, sign and send a contract creation transaction

        Args:
            signer: Account paying for and signing the deployment
            artifact: Contract to deploy
            constructor_args: Constructor arguments

        Returns:
            Pending deployment transaction

        Raises:
            SubmissionError: Endpoint unreachable or transaction rejected
        """
        try:
            if not self.w3.is_connected():
                raise SubmissionError("Network unreachable: RPC endpoint did not respond")

            Contract = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
            constructor = Contract.constructor(*constructor_args)

            logger.info("Building deployment transaction...")

            chain_id = self.chain_id if self.chain_id is not None else self.w3.eth.chain_id
            nonce = self.w3.eth.get_transaction_count(signer.address, 'pending')
            gas_price = self.w3.eth.gas_price
            gas_limit = self._estimate_gas(constructor, signer.address)

            logger.info(f"Gas limit: {gas_limit}")
            logger.info(f"Gas price: {self.w3.from_wei(gas_price, 'gwei')} gwei")

            transaction = constructor.build_transaction({
                'from': signer.address,
                'nonce': nonce,
                'gas': gas_limit,
                'gasPrice': gas_price,
                'chainId': chain_id
            })

            signed_tx = signer.sign_transaction(transaction)

            logger.info("Sending deployment transaction...")
            tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)

        except SubmissionError:
            raise
        except NETWORK_ERRORS as e:
            raise SubmissionError(f"Deployment transaction rejected: {e}") from e

        tx_hash_hex = Web3.to_hex(tx_hash)
        logger.info(f"Transaction sent: {tx_hash_hex}")

        return DeploymentTransaction(
            signer_address=signer.address,
            artifact_name=artifact.name,
            tx_hash=tx_hash_hex,
            constructor_args=tuple(constructor_args)
        )

    def _estimate_gas(self, constructor, sender: str) -> int:
        try:
            gas_estimate = constructor.estimate_gas({'from': sender})
        except ContractLogicError as e:
            raise SubmissionError(f"Contract construction would revert: {e}") from e
        except NETWORK_ERRORS as e:
            logger.warning(f"Gas estimation failed: {e}, using default")
            return self.DEFAULT_GAS_LIMIT

        return int(gas_estimate * self.gas_buffer)

    def wait_for_confirmation(
        self,
        transaction: DeploymentTransaction,
        timeout: float
    ) -> DeployedContract:
        """
        Block until the deployment transaction is mined

        Args:
            transaction: Pending deployment transaction
            timeout: Seconds to wait before giving up

        Returns:
            Deployed contract

        Raises:
            ConfirmationTimeoutError: No receipt within timeout
            TransactionRevertedError: Mined with failed status
        """
        tx_hash = transaction.tx_hash
        logger.info(f"Waiting for confirmation (timeout {timeout}s)...")

        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(
                tx_hash,
                timeout=timeout,
                poll_latency=self.poll_latency
            )
        except TimeExhausted as e:
            raise ConfirmationTimeoutError(tx_hash, timeout) from e
        except NETWORK_ERRORS as e:
            raise ConfirmationTimeoutError(tx_hash, timeout, f"lost contact with node: {e}") from e

        if receipt['status'] != 1:
            transaction.status = TransactionStatus.REVERTED
            raise TransactionRevertedError(tx_hash, self._revert_reason(tx_hash, receipt))

        contract_address = receipt.get('contractAddress')
        if not contract_address or contract_address == ZERO_ADDRESS:
            transaction.status = TransactionStatus.REVERTED
            raise TransactionRevertedError(tx_hash, "receipt carries no contract address")

        transaction.status = TransactionStatus.CONFIRMED

        logger.success(f"Contract deployed at {contract_address}")
        logger.info(f"Gas used: {receipt['gasUsed']}")

        return DeployedContract(
            address=Web3.to_checksum_address(contract_address),
            transaction_hash=tx_hash,
            block_number=receipt['blockNumber'],
            gas_used=receipt['gasUsed']
        )

    def _revert_reason(self, tx_hash: str, receipt: Dict) -> Optional[str]:
        """Replay the creation call at the parent block to recover the revert message"""
        try:
            tx = self.w3.eth.get_transaction(tx_hash)
            self.w3.eth.call(
                {'from': tx['from'], 'data': tx['input'], 'gas': tx['gas']},
                receipt['blockNumber'] - 1
            )
        except ContractLogicError as e:
            return str(e) or None
        except NETWORK_ERRORS as e:
            logger.debug(f"Could not recover revert reason: {e}")
            return None

        return None
