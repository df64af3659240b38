import pytest

from deposit_contract.constants import (  # noqa: F401
    DEPOSIT_CONTRACT_TREE_DEPTH,
    FULL_DEPOSIT_AMOUNT,
    GWEI,
    MIN_DEPOSIT_AMOUNT,
)
from deposit_contract.contract import DepositContract
from deposit_contract.deposit_data import DepositData
from deposit_contract.tree import TreeState
from deposit_contract.utils.ssz import hash_tree_root


TWO_TO_POWER_OF_TREE_DEPTH = 2**DEPOSIT_CONTRACT_TREE_DEPTH

SAMPLE_PUBKEY = b'\x11' * 48
SAMPLE_WITHDRAWAL_CREDENTIALS = b'\x22' * 32
SAMPLE_VALID_SIGNATURE = b'\x33' * 96


def make_deposit_input(amount, pubkey=SAMPLE_PUBKEY,
                       withdrawal_credentials=SAMPLE_WITHDRAWAL_CREDENTIALS,
                       signature=SAMPLE_VALID_SIGNATURE):
    """
    pubkey: bytes[48]
    withdrawal_credentials: bytes[32]
    signature: bytes[96]
    deposit_data_root: bytes[32]
    """
    return (
        pubkey,
        withdrawal_credentials,
        signature,
        hash_tree_root(
            DepositData(
                pubkey=pubkey,
                withdrawal_credentials=withdrawal_credentials,
                amount=amount,
                signature=signature,
            ),
        )
    )


@pytest.fixture
def amount():
    return FULL_DEPOSIT_AMOUNT


@pytest.fixture
def deposit_input(amount):
    return make_deposit_input(amount)


@pytest.fixture
def registration_contract():
    return DepositContract()


@pytest.fixture
def full_registration_contract():
    return DepositContract(TreeState(deposit_count=TWO_TO_POWER_OF_TREE_DEPTH - 1))


@pytest.fixture
def assert_tx_failed():
    def assert_tx_failed(contract, function_to_test, exception):
        state_before = contract.serialize_state()
        logs_before = list(contract.logs)
        with pytest.raises(exception):
            function_to_test()
        assert contract.serialize_state() == state_before
        assert contract.logs == logs_before
    return assert_tx_failed


def deposit(contract, deposit_input, amount):
    return contract.deposit(*deposit_input, value=amount * GWEI)
