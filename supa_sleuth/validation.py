"""Solana address shape validation."""

import re

# Base-58 alphabet: no 0, O, I or l.
ADDRESS_PATTERN = re.compile(r"[1-9A-HJ-NP-Za-km-z]{32,44}")


def is_valid_address(address: str) -> bool:
    """
    Check whether a string looks like a Solana account address.

    Only the length and alphabet are checked. No checksum is verified,
    so well-formed addresses of accounts that don't exist still pass.

    Args:
        address: Candidate address, already stripped by the caller

    Returns:
        True if the address has a valid shape
    """
    return ADDRESS_PATTERN.fullmatch(address) is not None
