import pytest

from deposit_contract.events import DepositEvent
from deposit_contract.exceptions import EventOutOfOrder
from deposit_contract.tracker import DepositTracker
from deposit_contract.utils.merkle_minimal import is_valid_merkle_branch
from tests.contracts.conftest import (
    DEPOSIT_CONTRACT_TREE_DEPTH,
    FULL_DEPOSIT_AMOUNT,
    MIN_DEPOSIT_AMOUNT,
    deposit,
    make_deposit_input,
)


def make_deposits(contract, count):
    for i in range(count):
        amount = MIN_DEPOSIT_AMOUNT + i
        deposit(contract, make_deposit_input(amount, pubkey=bytes([i]) * 48), amount)


def test_tracker_follows_contract(registration_contract):
    make_deposits(registration_contract, 3)
    tracker = DepositTracker.follow(registration_contract)
    assert tracker.get_deposit_count() == 3
    assert tracker.get_deposit_root() == registration_contract.get_deposit_root()

    for i in range(3, 6):
        deposit(registration_contract, make_deposit_input(FULL_DEPOSIT_AMOUNT, pubkey=bytes([i]) * 48), FULL_DEPOSIT_AMOUNT)
    assert tracker.sync() == 3
    assert tracker.get_deposit_count() == 6
    assert tracker.get_deposit_root() == registration_contract.get_deposit_root()
    assert tracker.get_ssz_deposit_root() == registration_contract.get_deposit_root()


def test_empty_tracker(registration_contract):
    tracker = DepositTracker()
    assert tracker.get_deposit_root() == registration_contract.get_deposit_root()
    with pytest.raises(ValueError):
        tracker.sync()


@pytest.mark.parametrize('count', [1, 2, 5, 9])
def test_tracker_proofs(registration_contract, count):
    make_deposits(registration_contract, count)
    tracker = DepositTracker.follow(registration_contract)
    root = registration_contract.get_deposit_root()
    for index in range(count):
        proof = tracker.get_proof(index)
        assert len(proof) == DEPOSIT_CONTRACT_TREE_DEPTH + 1
        assert is_valid_merkle_branch(tracker.leaves[index], proof, DEPOSIT_CONTRACT_TREE_DEPTH + 1, index, root)
    with pytest.raises(IndexError):
        tracker.get_proof(count)


def test_tracker_rejects_gaps(registration_contract):
    make_deposits(registration_contract, 2)
    events = registration_contract.create_filter(from_latest=False).get_all_entries()
    tracker = DepositTracker()
    with pytest.raises(EventOutOfOrder):
        tracker.process_event(events[1])
    tracker.process_event(events[0])
    with pytest.raises(EventOutOfOrder):
        tracker.process_event(events[0])
    assert tracker.get_deposit_count() == 1


def test_event_dict_round_trip(registration_contract):
    make_deposits(registration_contract, 1)
    event = registration_contract.logs[0]
    obj = event.to_dict()
    assert obj['index'] == '0x' + '00' * 8
    assert DepositEvent.from_dict(obj) == event
    assert event.amount_gwei == MIN_DEPOSIT_AMOUNT
