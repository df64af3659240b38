import logging
from typing import Optional, Tuple

from deposit_contract.constants import (
    DEPOSIT_CONTRACT_TREE_DEPTH,
    MAX_DEPOSIT_COUNT,
)
from deposit_contract.encoding import to_little_endian_64
from deposit_contract.exceptions import TreeFull
from deposit_contract.utils.hash_function import ZERO_BYTES32, hash
from deposit_contract.utils.ssz import Bytes32, Container, Vector, serialize, uint64

logger = logging.getLogger(__name__)


class TreeState(Container):
    branch: Vector[Bytes32, DEPOSIT_CONTRACT_TREE_DEPTH]
    deposit_count: uint64


def compute_zero_hashes() -> Tuple[Bytes32, ...]:
    """
    Roots of the empty subtrees, ``zero_hashes[h]`` being the root of an empty subtree of height ``h``.
    """
    zero_hashes = [Bytes32(ZERO_BYTES32)]
    for i in range(DEPOSIT_CONTRACT_TREE_DEPTH - 1):
        zero_hashes.append(hash(zero_hashes[i] + zero_hashes[i]))
    return tuple(zero_hashes)


class IncrementalMerkleTree(object):
    """
    Append-only Merkle tree of depth ``DEPOSIT_CONTRACT_TREE_DEPTH`` that only keeps one node per level.

    ``branch[h]`` is the root of the last completed left subtree at height ``h``,
    meaningful only when bit ``h`` of ``deposit_count`` is set. Inserting is O(log n),
    and the root is recomputed from the branch and the zero hashes on demand.
    """

    def __init__(self, state: Optional[TreeState] = None):
        self.zero_hashes = compute_zero_hashes()
        if state is None:
            state = TreeState()
        elif state.deposit_count > MAX_DEPOSIT_COUNT:
            raise ValueError(f"deposit count {int(state.deposit_count)} overflows the deposit tree")
        else:
            state = state.copy()
        self.state = state

    @classmethod
    def from_state_bytes(cls, data: bytes) -> "IncrementalMerkleTree":
        return cls(TreeState.decode_bytes(data))

    def serialize_state(self) -> bytes:
        return serialize(self.state)

    def count(self) -> int:
        return int(self.state.deposit_count)

    @property
    def is_full(self) -> bool:
        return self.state.deposit_count >= MAX_DEPOSIT_COUNT

    def get_root(self) -> Bytes32:
        node = Bytes32(ZERO_BYTES32)
        size = int(self.state.deposit_count)
        branch = self.state.branch
        for height in range(DEPOSIT_CONTRACT_TREE_DEPTH):
            if size & 1 == 1:
                node = hash(branch[height] + node)
            else:
                node = hash(node + self.zero_hashes[height])
            size //= 2
        return hash(node + to_little_endian_64(int(self.state.deposit_count)) + ZERO_BYTES32[:24])

    def insert(self, leaf: bytes) -> None:
        # Avoid overflowing the Merkle tree (and prevent edge case in computing `branch`)
        if self.is_full:
            raise TreeFull()

        self.state.deposit_count += 1
        node = Bytes32(leaf)
        size = int(self.state.deposit_count)
        for height in range(DEPOSIT_CONTRACT_TREE_DEPTH):
            if size & 1 == 1:
                self.state.branch[height] = node
                logger.debug("deposit %d stored at branch height %d", size - 1, height)
                break
            node = hash(self.state.branch[height] + node)
            size //= 2
