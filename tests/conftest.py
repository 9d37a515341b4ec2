"""Shared fixtures for deployer tests."""

import json
from pathlib import Path
from unittest.mock import Mock

import pytest

from blockchain.artifacts import ArtifactResolver
from blockchain.models import DeployedContract, DeploymentTransaction
from blockchain.transport import Web3Transport

# Hardhat's first default account
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

CONTRACT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
TX_HASH = "0x" + "ab" * 32

LOTTERY_ABI = [
    {"inputs": [], "stateMutability": "nonpayable", "type": "constructor"},
    {
        "inputs": [],
        "name": "enter",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function"
    }
]
LOTTERY_BYTECODE = "0x6080604052348015600f57600080fd5b50603f80601d6000396000f3fe"


def write_artifact(artifacts_dir: Path, source: str, name: str, **overrides) -> Path:
    """Write a Hardhat-style artifact under artifacts_dir/<source>/<name>.json"""
    artifact = {
        "_format": "hh-sol-artifact-1",
        "contractName": name,
        "sourceName": source,
        "abi": LOTTERY_ABI,
        "bytecode": LOTTERY_BYTECODE,
        "deployedBytecode": "0x6080",
        "linkReferences": {},
        "deployedLinkReferences": {}
    }
    artifact.update(overrides)

    path = artifacts_dir / source / f"{name}.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(artifact))
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep deployment settings from the developer's shell out of tests"""
    for var in ('pk', 'scanApi', 'DEPLOY_NETWORK', 'DEPLOY_RPC_URL', 'DEPLOY_CONFIG_PATH'):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr('deployer.config.load_dotenv', lambda: None)


@pytest.fixture
def artifacts_dir(tmp_path):
    """Artifacts tree containing a compiled lottery contract"""
    root = tmp_path / "artifacts"
    write_artifact(root, "contracts/Lottery.sol", "lottery")
    return root


@pytest.fixture
def resolver(artifacts_dir):
    return ArtifactResolver(artifacts_dir)


@pytest.fixture
def transport():
    """Transport double that confirms every deployment"""
    transport = Mock(spec=Web3Transport)

    def submit(signer, artifact, constructor_args=()):
        return DeploymentTransaction(
            signer_address=signer.address,
            artifact_name=artifact.name,
            tx_hash=TX_HASH,
            constructor_args=tuple(constructor_args)
        )

    transport.submit_deployment.side_effect = submit
    transport.wait_for_confirmation.return_value = DeployedContract(
        address=CONTRACT_ADDRESS,
        transaction_hash=TX_HASH,
        block_number=1,
        gas_used=250000
    )
    return transport
