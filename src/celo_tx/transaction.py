"""Typed view over the fields of a transaction record used for detection."""

from collections.abc import Mapping
from typing import Any

from pydantic import Field

from .base_types import CamelModel

TransactionRecord = Mapping[str, Any]
"""
Loosely-typed transaction request as prepared by a wallet or client, keyed
by camelCase field names.
"""


class TransactionFields(CamelModel, extra="ignore"):
    """
    The subset of a transaction record that determines its variant.

    Values are kept exactly as supplied; interpreting them is left to
    `celo_tx.emptiness`.
    """

    type: Any = None
    from_: Any = Field(None, alias="from")
    max_fee_per_gas: Any = None
    max_priority_fee_per_gas: Any = None
    fee_currency: Any = None
    gateway_fee_recipient: Any = None
    gateway_fee: Any = None

    @classmethod
    def from_record(
        cls, tx: "TransactionRecord | TransactionFields | None"
    ) -> "TransactionFields":
        """
        Build the field view from a record.

        Only camelCase keys are read. Anything that is not a mapping yields a
        view with every field unset.
        """
        if isinstance(tx, TransactionFields):
            return tx
        if not isinstance(tx, Mapping):
            return cls()
        return cls.model_validate(
            {
                key: value
                for key, value in tx.items()
                if isinstance(key, str) and key in RECORD_KEYS
            }
        )


RECORD_KEYS = frozenset(
    field.alias or name
    for name, field in TransactionFields.model_fields.items()
)
"""camelCase keys read from a record; every other key is ignored."""
