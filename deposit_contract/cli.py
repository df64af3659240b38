import argparse
import json
import logging
import sys
from pathlib import Path

from eth_utils import decode_hex, encode_hex

from deposit_contract.config import load_config_file
from deposit_contract.contract import DepositContract
from deposit_contract.constants import GWEI
from deposit_contract.deposit_data import (
    compute_deposit_data_root,
    validate_deposit_fields,
    validate_deposit_value,
)
from deposit_contract.events import DepositEvent
from deposit_contract.exceptions import DepositContractError
from deposit_contract.tracker import DepositTracker


def data_root(args) -> dict:
    pubkey = decode_hex(args.pubkey)
    withdrawal_credentials = decode_hex(args.withdrawal_credentials)
    signature = decode_hex(args.signature)
    amount = validate_deposit_value(args.amount * GWEI)
    validate_deposit_fields(pubkey, withdrawal_credentials, signature)
    root = compute_deposit_data_root(pubkey, withdrawal_credentials, amount, signature)
    return {'deposit_data_root': encode_hex(root)}


def replay(args) -> dict:
    with open(args.path) as f:
        events = [DepositEvent.from_dict(obj) for obj in json.load(f)]
    config = load_config_file(args.config) if args.config else None
    contract = DepositContract(config=config)
    tracker = DepositTracker()
    for event in events:
        tracker.process_event(event)
        contract.deposit(
            event.pubkey,
            event.withdrawal_credentials,
            event.signature,
            tracker.leaves[-1],
            value=event.amount_gwei * GWEI,
        )
    return {
        'deposit_count': contract.tree.count(),
        'deposit_root': encode_hex(contract.get_deposit_root()),
    }


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog='deposit-contract')
    parser.add_argument("-v", "--verbose", action="store_true", help="log every deposit")
    subparsers = parser.add_subparsers(dest="command", required=True)

    root_parser = subparsers.add_parser("data-root", help="compute a deposit data root")
    root_parser.add_argument("--pubkey", required=True, help="hex encoded 48 byte BLS pubkey")
    root_parser.add_argument("--withdrawal-credentials", required=True, help="hex encoded 32 bytes")
    root_parser.add_argument("--signature", required=True, help="hex encoded 96 byte BLS signature")
    root_parser.add_argument("--amount", type=int, required=True, help="deposit amount in Gwei")
    root_parser.set_defaults(func=data_root)

    replay_parser = subparsers.add_parser("replay", help="rebuild the deposit root from a JSON list of deposit events")
    replay_parser.add_argument("path", type=str, help="the path of the deposit events file")
    replay_parser.add_argument("--config", type=Path, default=None, help="the path of a contract config file")
    replay_parser.set_defaults(func=replay)

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)
    try:
        result = args.func(args)
    except DepositContractError as e:
        print(str(e), file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2))
    return 0
