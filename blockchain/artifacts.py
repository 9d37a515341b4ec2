"""
Artifact Resolver
Locates compiled Hardhat artifacts by contract name
"""

import json
from pathlib import Path
from typing import List, Union

from loguru import logger

from .exceptions import ArtifactNotFoundError
from .models import ContractArtifact


class ArtifactResolver:
    """
    Resolves contract artifacts from a Hardhat artifacts directory

    Artifacts live at artifacts/<source path>.sol/<ContractName>.json.
    A name can be bare ("lottery") or fully qualified
    ("contracts/Lottery.sol:lottery") when several sources declare it.
    """

    def __init__(self, artifacts_dir: Union[str, Path] = "artifacts"):
        """
        Initialize Artifact Resolver

        Args:
            artifacts_dir: Root of the compiled artifacts tree
        """
        self.artifacts_dir = Path(artifacts_dir)

    def resolve(self, name: str) -> ContractArtifact:
        """
        Load the artifact for a contract

        Args:
            name: Contract name, bare or fully qualified

        Returns:
            Contract artifact with ABI and creation bytecode

        Raises:
            ArtifactNotFoundError: Missing, ambiguous, unreadable or not deployable
        """
        path = self._find(name)

        try:
            with open(path, 'r') as f:
                artifact_json = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ArtifactNotFoundError(name, f"unreadable artifact {path}: {e}") from e

        abi = artifact_json.get('abi')
        bytecode = artifact_json.get('bytecode')

        if not isinstance(abi, list) or not isinstance(bytecode, str):
            raise ArtifactNotFoundError(name, f"{path} is missing 'abi' or 'bytecode'")

        # Add 0x prefix if not present
        if not bytecode.startswith('0x'):
            bytecode = '0x' + bytecode

        if bytecode == '0x':
            raise ArtifactNotFoundError(name, "no bytecode (abstract contract or interface)")

        if '__$' in bytecode:
            raise ArtifactNotFoundError(name, "bytecode has unlinked library references")

        logger.debug(f"Loaded artifact {path}")
        return ContractArtifact(
            name=artifact_json.get('contractName', name),
            abi=abi,
            bytecode=bytecode,
            source_path=path
        )

    def _find(self, name: str) -> Path:
        """Find the single artifact file matching a contract name"""
        if not self.artifacts_dir.is_dir():
            raise ArtifactNotFoundError(name, f"no artifacts directory at {self.artifacts_dir}")

        if ':' in name:
            source, contract = name.rsplit(':', 1)
            path = self.artifacts_dir / source / f"{contract}.json"
            if not path.is_file():
                raise ArtifactNotFoundError(name)
            return path

        matches = self._candidates(name)

        if not matches:
            raise ArtifactNotFoundError(name)

        if len(matches) > 1:
            sources = ', '.join(str(p.parent.relative_to(self.artifacts_dir)) for p in matches)
            raise ArtifactNotFoundError(
                name,
                f"ambiguous, declared in {sources}; use a fully qualified name"
            )

        return matches[0]

    def _candidates(self, name: str) -> List[Path]:
        # build-info holds compiler I/O, not contract artifacts
        return sorted(
            p for p in self.artifacts_dir.rglob(f"{name}.json")
            if p.is_file() and p.parent.suffix == '.sol'
        )
