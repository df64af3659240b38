from eth_typing import BLSPubkey, BLSSignature, Hash32

from deposit_contract.constants import (
    AMOUNT_LENGTH,
    GWEI,
    MAX_GWEI_AMOUNT,
    MIN_DEPOSIT_AMOUNT,
    PUBKEY_LENGTH,
    SIGNATURE_LENGTH,
    WITHDRAWAL_CREDENTIALS_LENGTH,
)
from deposit_contract.encoding import to_little_endian_64
from deposit_contract.exceptions import (
    InvalidPubkeyLength,
    InvalidSignatureLength,
    InvalidWithdrawalCredentialsLength,
    ValueNotMultipleOfUnit,
    ValueTooHigh,
    ValueTooLow,
)
from deposit_contract.utils.hash_function import ZERO_BYTES32, hash
from deposit_contract.utils.ssz import Bytes32, Bytes48, Bytes96, Container, uint64


class DepositData(Container):
    pubkey: Bytes48
    withdrawal_credentials: Bytes32
    amount: uint64  # Gwei
    signature: Bytes96


def build_deposit_data(pubkey: BLSPubkey,
                       withdrawal_credentials: Hash32,
                       amount: int,
                       signature: BLSSignature) -> DepositData:
    return DepositData(
        pubkey=pubkey,
        withdrawal_credentials=withdrawal_credentials,
        amount=amount,
        signature=signature,
    )


def validate_deposit_value(value: int, min_deposit_amount: int = MIN_DEPOSIT_AMOUNT) -> int:
    """
    Check a deposit ``value`` in wei and return the deposit amount in Gwei.
    """
    if value < min_deposit_amount * GWEI:
        raise ValueTooLow()
    if value % GWEI != 0:
        raise ValueNotMultipleOfUnit()
    deposit_amount = value // GWEI
    if deposit_amount > MAX_GWEI_AMOUNT:
        raise ValueTooHigh()
    return deposit_amount


def validate_deposit_fields(pubkey: bytes, withdrawal_credentials: bytes, signature: bytes) -> None:
    if len(pubkey) != PUBKEY_LENGTH:
        raise InvalidPubkeyLength()
    if len(withdrawal_credentials) != WITHDRAWAL_CREDENTIALS_LENGTH:
        raise InvalidWithdrawalCredentialsLength()
    if len(signature) != SIGNATURE_LENGTH:
        raise InvalidSignatureLength()


def compute_deposit_data_root(pubkey: BLSPubkey,
                              withdrawal_credentials: Hash32,
                              amount: int,
                              signature: BLSSignature) -> Bytes32:
    """
    Compute the ``DepositData`` hash tree root from its fields, ``amount`` being in Gwei.
    Fields are expected to have already passed ``validate_deposit_fields``.
    """
    pubkey_root = hash(pubkey + ZERO_BYTES32[:64 - PUBKEY_LENGTH])
    signature_root = hash(
        hash(signature[:64])
        + hash(signature[64:SIGNATURE_LENGTH] + ZERO_BYTES32)
    )
    return hash(
        hash(pubkey_root + withdrawal_credentials)
        + hash(to_little_endian_64(amount) + ZERO_BYTES32[:32 - AMOUNT_LENGTH] + signature_root)
    )
