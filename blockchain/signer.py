"""
Signer Resolution
Turns configured account credentials into a signing account
"""

import re
from typing import Optional, Sequence

from eth_account import Account
from eth_account.signers.local import LocalAccount
from loguru import logger

from .exceptions import ConfigurationError

PRIVATE_KEY_PATTERN = re.compile(r"^(0x)?[0-9a-fA-F]{64}$")


def resolve_signer(accounts: Optional[Sequence[str]]) -> LocalAccount:
    """
    Resolve the active signer from an ordered list of credentials

    Only the first credential is used.

    Args:
        accounts: Private keys (hex, with or without 0x prefix)

    Returns:
        Local account able to sign transactions

    Raises:
        ConfigurationError: No credential configured, or it is malformed
    """
    if not accounts or not accounts[0]:
        raise ConfigurationError(
            "No signer credential configured (set the account private key in .env)"
        )

    credential = accounts[0].strip()

    # never echo the key itself
    if not PRIVATE_KEY_PATTERN.match(credential):
        raise ConfigurationError(
            "Signer credential is malformed: expected a 32-byte hex private key"
        )

    if not credential.startswith("0x"):
        credential = "0x" + credential

    try:
        account = Account.from_key(credential)
    except Exception as e:
        raise ConfigurationError(f"Signer credential rejected: {type(e).__name__}") from e

    if len(accounts) > 1:
        logger.debug(f"{len(accounts) - 1} additional account(s) configured, using the first")

    return account
