"""
System Check Script
Verifies configuration, RPC connection, deployer balance and artifacts before deploying

Run from the project root: python -m scripts.check_system
"""

import sys

from loguru import logger

from blockchain.artifacts import ArtifactResolver
from blockchain.exceptions import ConfigurationError
from blockchain.transport import Web3Transport
from deployer.config import load_network_config
from deployer.logging_config import configure_logging
from deployer.preflight import run_preflight


def main() -> int:
    configure_logging()

    logger.info("=" * 70)
    logger.info("Lottery Deployer System Check")
    logger.info("=" * 70)

    try:
        config = load_network_config()
    except ConfigurationError as e:
        logger.error(f"✗ {e}")
        return 1

    transport = Web3Transport.from_endpoint(config.endpoint, chain_id=config.chain_id)
    resolver = ArtifactResolver(config.artifacts_dir)

    return 0 if run_preflight(config, transport, resolver) else 1


if __name__ == "__main__":
    sys.exit(main())
