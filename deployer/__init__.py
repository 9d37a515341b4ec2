"""
Lottery Deployer Package
Configuration, deployment pipeline and preflight checks
"""

from .config import NetworkConfig, load_network_config
from .pipeline import DeploymentPipeline, DeploymentResult, PipelineState
from .preflight import run_preflight

__all__ = [
    'NetworkConfig',
    'load_network_config',
    'DeploymentPipeline',
    'DeploymentResult',
    'PipelineState',
    'run_preflight'
]
