"""
Lottery Contract Deployment
Deploys the compiled lottery contract to the configured network
"""

import sys

from loguru import logger

from blockchain.artifacts import ArtifactResolver
from blockchain.exceptions import ConfigurationError
from blockchain.transport import Web3Transport
from deployer.config import NetworkConfig, load_network_config
from deployer.logging_config import configure_logging
from deployer.pipeline import DeploymentPipeline


def build_pipeline(config: NetworkConfig) -> DeploymentPipeline:
    """Wire the pipeline's collaborators from configuration"""
    transport = Web3Transport.from_endpoint(
        config.endpoint,
        chain_id=config.chain_id,
        gas_buffer=config.gas_buffer,
        poll_latency=config.poll_latency
    )

    return DeploymentPipeline(
        transport=transport,
        artifact_resolver=ArtifactResolver(config.artifacts_dir),
        accounts=config.accounts,
        contract_name=config.contract_name,
        confirmation_timeout=config.confirmation_timeout
    )


def main() -> int:
    """Deploy once; returns the process exit code"""
    configure_logging()

    logger.info("=" * 70)
    logger.info("Lottery Contract Deployment")
    logger.info("=" * 70)

    try:
        config = load_network_config()
        pipeline = build_pipeline(config)
        result = pipeline.run()
    except ConfigurationError as e:
        logger.error(f"Deployment failed: ConfigurationError: {e}")
        return 1
    except Exception:
        logger.exception("Unexpected error during deployment")
        return 1

    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
