from deposit_contract.contract import DepositContract
from deposit_contract.deposit_data import DepositData, build_deposit_data, compute_deposit_data_root
from deposit_contract.events import DepositEvent
from deposit_contract.tracker import DepositTracker
from deposit_contract.tree import IncrementalMerkleTree, TreeState

__all__ = [
    "DepositContract",
    "DepositData",
    "DepositEvent",
    "DepositTracker",
    "IncrementalMerkleTree",
    "TreeState",
    "build_deposit_data",
    "compute_deposit_data_root",
]
