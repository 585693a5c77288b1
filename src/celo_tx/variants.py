"""
Detection of the fee/format variant of a transaction record.

Celo accepts, on top of legacy and [EIP-1559] transactions, two envelopes
that let the sender pay fees in a currency other than CELO:

- [CIP-42]: EIP-1559 fields plus `feeCurrency`, `gatewayFeeRecipient` and
  `gatewayFee`.
- [CIP-64]: EIP-1559 fields plus `feeCurrency` only.

The predicates below are not mutually exclusive. `classify` applies the
precedence a serializer needs.

[EIP-1559]: https://eips.ethereum.org/EIPS/eip-1559
[CIP-42]: https://github.com/celo-org/celo-proposals/blob/master/CIPs/cip-0042.md
[CIP-64]: https://github.com/celo-org/celo-proposals/blob/master/CIPs/cip-0064.md
"""  # noqa: E501

from enum import Enum
from numbers import Integral
from typing import Any

from ethereum_types.numeric import U8

from .emptiness import is_present
from .logging import get_logger
from .transaction import TransactionFields, TransactionRecord

logger = get_logger(__name__)


class TransactionVariant(str, Enum):
    """
    Fee/format variant of a transaction, valued by the tag used in a
    record's `type` field.
    """

    LEGACY = "legacy"
    EIP1559 = "eip1559"
    CIP42 = "cip42"
    CIP64 = "cip64"

    @property
    def envelope_type(self) -> U8:
        """EIP-2718 type byte that prefixes the serialized transaction."""
        return ENVELOPE_TYPES[self]

    def __str__(self) -> str:
        return self.value


ENVELOPE_TYPES = {
    TransactionVariant.LEGACY: U8(0x00),
    TransactionVariant.EIP1559: U8(0x02),
    TransactionVariant.CIP64: U8(0x7B),
    TransactionVariant.CIP42: U8(0x7C),
}


def variant_from_envelope_type(value: Any) -> TransactionVariant | None:
    """
    Map an envelope type, as found in the `type` field of an RPC response,
    to its variant.

    Accepts integral values (including `U8`) and hex strings such as
    `"0x7b"`. Returns None for unknown or malformed values.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = int(value, 16) if value[:2].lower() == "0x" else None
        except ValueError:
            return None
    if not isinstance(value, Integral):
        return None
    for variant, envelope_type in ENVELOPE_TYPES.items():
        if int(envelope_type) == int(value):
            return variant
    return None


def _is_forced(
    fields: TransactionFields, variant: TransactionVariant
) -> bool:
    # Only an exact tag counts; "CIP42" or 0x7c do not force anything.
    return isinstance(fields.type, str) and fields.type == variant.value


def is_eip1559(tx: TransactionRecord | TransactionFields) -> bool:
    """
    Return True if both `maxFeePerGas` and `maxPriorityFeePerGas` are
    present. The `type` field is not consulted.
    """
    fields = TransactionFields.from_record(tx)
    return is_present(fields.max_fee_per_gas) and is_present(
        fields.max_priority_fee_per_gas
    )


def is_cip42(tx: TransactionRecord | TransactionFields) -> bool:
    """
    Return True if the record is a CIP-42 transaction.

    A `type` of `"cip42"` forces the answer regardless of the other fields.
    Otherwise the record must be EIP-1559 shaped and carry at least one of
    `feeCurrency`, `gatewayFeeRecipient` or `gatewayFee`.
    """
    fields = TransactionFields.from_record(tx)
    if _is_forced(fields, TransactionVariant.CIP42):
        return True
    return is_eip1559(fields) and (
        is_present(fields.fee_currency)
        or is_present(fields.gateway_fee_recipient)
        or is_present(fields.gateway_fee)
    )


def is_cip64(tx: TransactionRecord | TransactionFields) -> bool:
    """
    Return True if the record is a CIP-64 transaction.

    A `type` of `"cip64"` forces the answer regardless of the other fields.
    Otherwise the record must be EIP-1559 shaped and carry `feeCurrency`;
    gateway fee fields alone do not qualify.
    """
    fields = TransactionFields.from_record(tx)
    if _is_forced(fields, TransactionVariant.CIP64):
        return True
    return is_eip1559(fields) and is_present(fields.fee_currency)


def classify(
    tx: TransactionRecord | TransactionFields,
) -> TransactionVariant:
    """
    Pick the single, most specific variant of a record.

    An explicit `"cip64"` or `"cip42"` in `type` wins. Otherwise the
    predicates are tried from most to least specific: CIP-64, CIP-42,
    EIP-1559, and finally legacy.
    """
    fields = TransactionFields.from_record(tx)

    if _is_forced(fields, TransactionVariant.CIP64):
        variant = TransactionVariant.CIP64
    elif _is_forced(fields, TransactionVariant.CIP42):
        variant = TransactionVariant.CIP42
    elif is_cip64(fields):
        variant = TransactionVariant.CIP64
    elif is_cip42(fields):
        variant = TransactionVariant.CIP42
    elif is_eip1559(fields):
        variant = TransactionVariant.EIP1559
    else:
        variant = TransactionVariant.LEGACY

    logger.verbose(
        "Classified transaction from %s as %s.", fields.from_, variant
    )
    return variant
