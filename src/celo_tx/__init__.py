"""
Transaction variant detection for Celo.

Inspects a transaction request before signing and tells whether it is a
legacy, EIP-1559, CIP-42 or CIP-64 transaction.
"""

from .emptiness import is_empty, is_present
from .transaction import TransactionFields, TransactionRecord
from .variants import (
    TransactionVariant,
    classify,
    is_cip42,
    is_cip64,
    is_eip1559,
    variant_from_envelope_type,
)

__version__ = "0.1.0"

__all__ = [
    "TransactionFields",
    "TransactionRecord",
    "TransactionVariant",
    "classify",
    "is_cip42",
    "is_cip64",
    "is_eip1559",
    "is_empty",
    "is_present",
    "variant_from_envelope_type",
]
