"""Pytest fixtures shared by the `celo_tx` unit tests."""

import secrets

import pytest


@pytest.fixture
def address() -> str:
    """A random, non-zero 20-byte address as a hex string."""
    return "0x" + (b"\x01" + secrets.token_bytes(19)).hex()


@pytest.fixture
def eip1559_fees() -> dict[str, int]:
    """Non-zero EIP-1559 fee fields."""
    return {"maxFeePerGas": 123, "maxPriorityFeePerGas": 456}
