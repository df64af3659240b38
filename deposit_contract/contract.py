import logging
from typing import Any, Dict, List, Optional

from eth_typing import BLSPubkey, BLSSignature, Hash32
from eth_utils import encode_hex

from deposit_contract.config import check_structural_constants, load_config
from deposit_contract.constants import MIN_DEPOSIT_AMOUNT
from deposit_contract.deposit_data import (
    compute_deposit_data_root,
    validate_deposit_fields,
    validate_deposit_value,
)
from deposit_contract.encoding import to_little_endian_64
from deposit_contract.events import DepositEvent, DepositLogFilter
from deposit_contract.exceptions import DepositContractError, RootMismatch, TreeFull
from deposit_contract.tree import IncrementalMerkleTree, TreeState
from deposit_contract.utils.ssz import Bytes32

logger = logging.getLogger(__name__)


class DepositContract(object):
    """
    Validator deposit contract: validates deposits, logs them and accumulates their roots.

    Every call to ``deposit`` either succeeds as a whole or raises a ``DepositContractError``
    before anything is written, so a rejected deposit leaves no state change and no event.
    """

    def __init__(self, state: Optional[TreeState] = None, config: Optional[Dict[str, Any]] = None):
        if config is None:
            config = load_config()
        else:
            check_structural_constants(config)
        self.config = config
        self.min_deposit_amount = config.get("MIN_DEPOSIT_AMOUNT", MIN_DEPOSIT_AMOUNT)
        self.tree = IncrementalMerkleTree(state)
        self.logs: List[DepositEvent] = []

    @classmethod
    def from_state_bytes(cls, data: bytes, config: Optional[Dict[str, Any]] = None) -> "DepositContract":
        return cls(TreeState.decode_bytes(data), config=config)

    def serialize_state(self) -> bytes:
        return self.tree.serialize_state()

    def get_deposit_root(self) -> Bytes32:
        return self.tree.get_root()

    def get_deposit_count(self) -> bytes:
        return to_little_endian_64(self.tree.count())

    def create_filter(self, from_latest: bool = True) -> DepositLogFilter:
        return DepositLogFilter(self.logs, from_index=len(self.logs) if from_latest else 0)

    def deposit(self,
                pubkey: BLSPubkey,
                withdrawal_credentials: Hash32,
                signature: BLSSignature,
                deposit_data_root: Hash32,
                value: int) -> DepositEvent:
        """
        Make a deposit of ``value`` wei.
        :param deposit_data_root: the expected ``DepositData`` hash tree root, as computed by the depositor
        :return: the emitted ``DepositEvent``
        """
        try:
            # Avoid overflowing the Merkle tree (and prevent edge case in computing `branch`)
            if self.tree.is_full:
                raise TreeFull()

            deposit_amount = validate_deposit_value(value, self.min_deposit_amount)
            validate_deposit_fields(pubkey, withdrawal_credentials, signature)

            node = compute_deposit_data_root(pubkey, withdrawal_credentials, deposit_amount, signature)
            # Verify computed and expected deposit data roots match
            if node != deposit_data_root:
                raise RootMismatch()
        except DepositContractError as e:
            logger.warning("deposit rejected: %s", e)
            raise

        event = DepositEvent(
            pubkey=bytes(pubkey),
            withdrawal_credentials=bytes(withdrawal_credentials),
            amount=to_little_endian_64(deposit_amount),
            signature=bytes(signature),
            index=self.get_deposit_count(),
        )
        self.logs.append(event)

        # Add deposit data root to Merkle tree (update a single `branch` node)
        self.tree.insert(node)
        logger.info(
            "deposit %d accepted: pubkey=%s amount=%d gwei",
            event.deposit_index, encode_hex(event.pubkey), deposit_amount,
        )
        return event
