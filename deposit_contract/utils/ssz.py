# ruff: noqa: F401

from remerkleable.basic import uint64
from remerkleable.byte_arrays import Bytes32, Bytes48, Bytes96
from remerkleable.complex import Container, List, Vector
from remerkleable.core import View


def serialize(obj: View) -> bytes:
    return obj.encode_bytes()


def hash_tree_root(obj: View) -> Bytes32:
    return Bytes32(obj.get_backing().merkle_root())
