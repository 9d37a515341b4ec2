"""
Deployment Entry Point Tests
"""

from unittest.mock import Mock

import pytest

import deploy
from blockchain.exceptions import ConfigurationError
from deployer.config import NetworkConfig
from deployer.pipeline import DeploymentResult

from conftest import CONTRACT_ADDRESS, TEST_PRIVATE_KEY


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(deploy, 'configure_logging', lambda: None)


@pytest.fixture
def config(artifacts_dir):
    return NetworkConfig(
        name="localhost",
        endpoint="http://127.0.0.1:8545",
        accounts=[TEST_PRIVATE_KEY],
        chain_id=31337,
        artifacts_dir=str(artifacts_dir),
        confirmation_timeout=60,
        poll_latency=0.2,
        gas_buffer=1.5
    )


def test_build_pipeline_wires_config(config):
    pipeline = deploy.build_pipeline(config)

    assert pipeline.accounts == [TEST_PRIVATE_KEY]
    assert pipeline.contract_name == "lottery"
    assert pipeline.confirmation_timeout == 60
    assert pipeline.transport.chain_id == 31337
    assert pipeline.transport.poll_latency == 0.2
    assert pipeline.transport.gas_buffer == 1.5
    assert str(pipeline.artifact_resolver.artifacts_dir) == config.artifacts_dir


def test_success_exit_code(monkeypatch, config):
    pipeline = Mock()
    pipeline.run.return_value = DeploymentResult(address=CONTRACT_ADDRESS, exit_code=0)
    monkeypatch.setattr(deploy, 'load_network_config', lambda: config)
    monkeypatch.setattr(deploy, 'build_pipeline', lambda cfg: pipeline)

    assert deploy.main() == 0


def test_pipeline_failure_exit_code(monkeypatch, config):
    pipeline = Mock()
    pipeline.run.return_value = DeploymentResult(address=None, exit_code=1)
    monkeypatch.setattr(deploy, 'load_network_config', lambda: config)
    monkeypatch.setattr(deploy, 'build_pipeline', lambda cfg: pipeline)

    assert deploy.main() == 1


def test_configuration_error_exit_code(monkeypatch):
    def broken():
        raise ConfigurationError("Config file not found")

    monkeypatch.setattr(deploy, 'load_network_config', broken)

    assert deploy.main() == 1


def test_unexpected_error_exit_code(monkeypatch, config):
    pipeline = Mock()
    pipeline.run.side_effect = RuntimeError("boom")
    monkeypatch.setattr(deploy, 'load_network_config', lambda: config)
    monkeypatch.setattr(deploy, 'build_pipeline', lambda cfg: pipeline)

    assert deploy.main() == 1


def test_missing_credential_prints_no_address(monkeypatch, config, capsys):
    config.accounts = []
    monkeypatch.setattr(deploy, 'load_network_config', lambda: config)

    assert deploy.main() == 1
    assert capsys.readouterr().out == ""
