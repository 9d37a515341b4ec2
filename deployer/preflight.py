"""
Preflight Check
Verifies credentials, RPC connection, deployer balance and artifacts before deploying
"""

from decimal import Decimal
from typing import Optional

from eth_account.signers.local import LocalAccount
from loguru import logger

from blockchain.exceptions import ArtifactNotFoundError, ConfigurationError
from blockchain.signer import resolve_signer
from blockchain.transport import NETWORK_ERRORS

from .config import NetworkConfig


def check_credentials(config: NetworkConfig) -> Optional[LocalAccount]:
    """Check that a usable signer credential is configured"""
    logger.info("Checking signer credential...")

    try:
        signer = resolve_signer(config.accounts)
    except ConfigurationError as e:
        logger.error(f"  ✗ {e}")
        return None

    logger.success(f"✓ Deployer account: {signer.address}")
    return signer


def check_rpc_connection(transport, config: NetworkConfig) -> bool:
    """Check the RPC endpoint answers and serves the expected chain"""
    logger.info(f"Checking RPC connection ({config.name})...")

    try:
        if not transport.is_connected():
            logger.error(f"  ✗ {config.name}: Connection failed")
            return False

        chain_id = transport.get_chain_id()
    except NETWORK_ERRORS as e:
        logger.error(f"  ✗ {config.name}: {e}")
        return False

    if config.chain_id is not None and chain_id != config.chain_id:
        logger.error(f"  ✗ Chain id mismatch: node reports {chain_id}, expected {config.chain_id}")
        return False

    logger.success(f"✓ {config.name}: Connected (chain id: {chain_id})")
    return True


def check_deployer_balance(transport, address: str, min_balance: float) -> bool:
    """
    Check the deployer can pay for gas

    An empty account fails; a balance under min_balance only warns.
    """
    logger.info("Checking deployer balance...")

    try:
        balance = transport.get_balance(address)
    except NETWORK_ERRORS as e:
        logger.error(f"  ✗ Balance lookup failed: {e}")
        return False

    if balance <= 0:
        logger.error("  ✗ Deployer balance is zero")
        return False

    if balance < Decimal(str(min_balance)):
        logger.warning(f"  Low balance: {balance} (minimum {min_balance}); deployment may run out of gas")
    else:
        logger.success(f"✓ Deployer balance: {balance}")

    return True


def check_artifact(artifact_resolver, contract_name: str) -> bool:
    """Check the contract has been compiled"""
    logger.info(f"Checking artifact for '{contract_name}'...")

    try:
        artifact = artifact_resolver.resolve(contract_name)
    except ArtifactNotFoundError as e:
        logger.error(f"  ✗ {e}")
        return False

    logger.success(f"✓ Artifact: {artifact.source_path}")
    return True


def run_preflight(config: NetworkConfig, transport, artifact_resolver) -> bool:
    """
    Run every check; never submits a transaction

    Returns:
        True if all required checks passed
    """
    results = []

    signer = check_credentials(config)
    results.append(signer is not None)

    connected = check_rpc_connection(transport, config)
    results.append(connected)

    if signer is not None and connected:
        results.append(check_deployer_balance(transport, signer.address, config.min_balance))

    results.append(check_artifact(artifact_resolver, config.contract_name))

    passed = all(results)
    if passed:
        logger.success("All checks passed - ready to deploy")
    else:
        logger.error("Preflight check failed")

    return passed
