import logging
from typing import Iterable, List, Optional

from deposit_contract.constants import DEPOSIT_CONTRACT_TREE_DEPTH
from deposit_contract.deposit_data import DepositData, build_deposit_data
from deposit_contract.events import DepositEvent, DepositLogFilter
from deposit_contract.exceptions import EventOutOfOrder
from deposit_contract.utils.merkle_minimal import (
    calc_merkle_tree_from_leaves,
    get_merkle_proof,
    get_merkle_root,
    mix_in_length,
)
from deposit_contract.utils.ssz import Bytes32, List as SSZList, hash_tree_root

logger = logging.getLogger(__name__)


class DepositTracker(object):
    """
    Off-chain follower of the deposit contract logs.

    Rebuilds the full list of ``DepositData`` from ``DepositEvent`` records, so it can
    recompute the deposit root from scratch and produce Merkle proofs for single deposits.
    """

    def __init__(self, log_filter: Optional[DepositLogFilter] = None):
        self.deposits: List[DepositData] = []
        self.leaves: List[Bytes32] = []
        self.log_filter = log_filter

    @classmethod
    def follow(cls, contract) -> "DepositTracker":
        tracker = cls(contract.create_filter(from_latest=False))
        tracker.sync()
        return tracker

    def sync(self) -> int:
        if self.log_filter is None:
            raise ValueError("tracker is not following a contract")
        return self.process_events(self.log_filter.get_new_entries())

    def process_events(self, events: Iterable[DepositEvent]) -> int:
        processed = 0
        for event in events:
            self.process_event(event)
            processed += 1
        return processed

    def process_event(self, event: DepositEvent) -> None:
        if event.deposit_index != len(self.deposits):
            raise EventOutOfOrder(
                f"{EventOutOfOrder.reason}: got index {event.deposit_index}, expected {len(self.deposits)}"
            )
        deposit_data = build_deposit_data(
            pubkey=event.pubkey,
            withdrawal_credentials=event.withdrawal_credentials,
            amount=event.amount_gwei,
            signature=event.signature,
        )
        self.deposits.append(deposit_data)
        self.leaves.append(hash_tree_root(deposit_data))
        logger.debug("tracked deposit %d", event.deposit_index)

    def get_deposit_count(self) -> int:
        return len(self.deposits)

    def get_deposit_root(self) -> Bytes32:
        root = get_merkle_root(self.leaves, pad_to=2**DEPOSIT_CONTRACT_TREE_DEPTH)
        return Bytes32(mix_in_length(root, len(self.leaves)))

    def get_ssz_deposit_root(self) -> Bytes32:
        """
        Same root as ``get_deposit_root``, computed as the SSZ root of the deposit list.
        """
        deposit_list = SSZList[DepositData, 2**DEPOSIT_CONTRACT_TREE_DEPTH](*self.deposits)
        return hash_tree_root(deposit_list)

    def get_proof(self, index: int) -> List[Bytes32]:
        """
        Merkle branch of the deposit at ``index`` against ``get_deposit_root()``,
        verifiable with ``is_valid_merkle_branch`` at depth ``DEPOSIT_CONTRACT_TREE_DEPTH + 1``.
        """
        if not 0 <= index < len(self.leaves):
            raise IndexError(f"no deposit at index {index}")
        tree = calc_merkle_tree_from_leaves(self.leaves, DEPOSIT_CONTRACT_TREE_DEPTH)
        proof = get_merkle_proof(tree, item_index=index, tree_len=DEPOSIT_CONTRACT_TREE_DEPTH)
        return [Bytes32(node) for node in proof] + [Bytes32(len(self.leaves).to_bytes(32, "little"))]
