from typing import Any, Dict, List, NamedTuple

from eth_utils import decode_hex, encode_hex

from deposit_contract.encoding import from_little_endian_64

EVENT_FIELDS = ("pubkey", "withdrawal_credentials", "amount", "signature", "index")


class DepositEvent(NamedTuple):
    pubkey: bytes
    withdrawal_credentials: bytes
    amount: bytes  # little-endian Gwei
    signature: bytes
    index: bytes  # little-endian deposit count before the deposit

    @property
    def amount_gwei(self) -> int:
        return from_little_endian_64(self.amount)

    @property
    def deposit_index(self) -> int:
        return from_little_endian_64(self.index)

    def to_dict(self) -> Dict[str, str]:
        return {k: encode_hex(getattr(self, k)) for k in EVENT_FIELDS}

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> "DepositEvent":
        return cls(**{k: decode_hex(obj[k]) for k in EVENT_FIELDS})


class DepositLogFilter(object):
    """
    Cursor over an append-only event log, returning what was emitted since the last poll.
    """

    def __init__(self, log: List[DepositEvent], from_index: int = 0):
        self._log = log
        self._cursor = from_index

    def get_new_entries(self) -> List[DepositEvent]:
        entries = self._log[self._cursor:]
        self._cursor += len(entries)
        return entries

    def get_all_entries(self) -> List[DepositEvent]:
        return self._log[:]
