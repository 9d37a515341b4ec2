"""
Deployment Configuration
Loads network, account and explorer settings from config/network_config.json and .env
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv
from loguru import logger

from blockchain.exceptions import ConfigurationError

DEFAULT_CONFIG_PATH = "config/network_config.json"
DEFAULT_CONFIRMATION_TIMEOUT = 300
DEFAULT_POLL_LATENCY = 0.5
DEFAULT_GAS_BUFFER = 1.2
DEFAULT_MIN_BALANCE = 0.01


@dataclass
class NetworkConfig:
    """Resolved configuration for a single deployment run"""

    name: str
    endpoint: str
    accounts: List[str] = field(default_factory=list, repr=False)
    chain_id: Optional[int] = None
    explorer_api_key: Optional[str] = field(default=None, repr=False)
    artifacts_dir: str = "artifacts"
    contract_name: str = "lottery"
    confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT
    poll_latency: float = DEFAULT_POLL_LATENCY
    gas_buffer: float = DEFAULT_GAS_BUFFER
    min_balance: float = DEFAULT_MIN_BALANCE


def load_network_config(
    config_path: Optional[Union[str, Path]] = None,
    network: Optional[str] = None
) -> NetworkConfig:
    """
    Load configuration for the selected network

    Args:
        config_path: JSON config file (None = DEPLOY_CONFIG_PATH or the default)
        network: Network name (None = DEPLOY_NETWORK or default_network)

    Returns:
        Network configuration with credentials read from the environment

    Raises:
        ConfigurationError: File missing or malformed, unknown network, no endpoint
    """
    load_dotenv()

    path = Path(config_path or os.getenv('DEPLOY_CONFIG_PATH') or DEFAULT_CONFIG_PATH)

    try:
        with open(path, 'r') as f:
            config = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Config file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in config file {path}: {e}") from e

    networks = config.get('networks') or {}
    network_name = network or os.getenv('DEPLOY_NETWORK') or config.get('default_network')

    if not network_name or network_name not in networks:
        available = ', '.join(sorted(networks)) or 'none'
        raise ConfigurationError(f"Unknown network '{network_name}' (available: {available})")

    network_config = networks[network_name]

    endpoint = os.getenv('DEPLOY_RPC_URL') or network_config.get('url')
    if not endpoint:
        raise ConfigurationError(f"No RPC endpoint configured for network '{network_name}'")

    # Missing keys are left empty; the pipeline reports them when resolving the signer
    accounts = [os.getenv(var, '') for var in network_config.get('accounts_env', [])]

    explorer_env = (config.get('explorer') or {}).get('api_key_env')
    deployment = config.get('deployment') or {}

    try:
        network_cfg = NetworkConfig(
            name=network_name,
            endpoint=endpoint,
            accounts=accounts,
            chain_id=_optional_int(network_config.get('chain_id')),
            explorer_api_key=os.getenv(explorer_env) if explorer_env else None,
            artifacts_dir=(config.get('paths') or {}).get('artifacts', 'artifacts'),
            contract_name=deployment.get('contract_name', 'lottery'),
            confirmation_timeout=float(deployment.get('confirmation_timeout', DEFAULT_CONFIRMATION_TIMEOUT)),
            poll_latency=float(deployment.get('poll_latency', DEFAULT_POLL_LATENCY)),
            gas_buffer=float(deployment.get('gas_buffer', DEFAULT_GAS_BUFFER)),
            min_balance=float(deployment.get('min_balance', DEFAULT_MIN_BALANCE))
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid deployment settings in {path}: {e}") from e

    if network_cfg.confirmation_timeout <= 0:
        raise ConfigurationError("confirmation_timeout must be positive")

    logger.info(f"Network: {network_cfg.name} (chain id: {network_cfg.chain_id or 'from node'})")
    return network_cfg


def _optional_int(value) -> Optional[int]:
    if value is None:
        return None
    return int(value)
