import io

import pytest

from deposit_contract.config import load_config, load_config_file
from deposit_contract.contract import DepositContract
from deposit_contract.exceptions import ValueTooLow
from tests.contracts.conftest import MIN_DEPOSIT_AMOUNT, deposit, make_deposit_input


def test_load_mainnet_config():
    config = load_config('mainnet')
    assert config['CONFIG_NAME'] == 'mainnet'
    assert config['MIN_DEPOSIT_AMOUNT'] == MIN_DEPOSIT_AMOUNT
    assert config['DEPOSIT_CONTRACT_TREE_DEPTH'] == 32
    assert config['PUBKEY_LENGTH'] == 48


def test_unknown_config():
    with pytest.raises(ValueError):
        load_config('does-not-exist')


def test_config_vars_parsing():
    config = load_config_file(io.StringIO(
        "CONFIG_NAME: 'testnet'\n"
        "MIN_DEPOSIT_AMOUNT: '2000000000'\n"
        "GENESIS_FORK_VERSION: 0x00001020\n"
    ))
    assert config['CONFIG_NAME'] == 'testnet'
    assert config['MIN_DEPOSIT_AMOUNT'] == 2000000000
    assert config['GENESIS_FORK_VERSION'] == bytes.fromhex('00001020')


@pytest.mark.parametrize(
    'yaml_text',
    [
        "DEPOSIT_CONTRACT_TREE_DEPTH: 16\n",
        "PUBKEY_LENGTH: 32\n",
        "MIN_DEPOSIT_AMOUNT: 0\n",
        "MIN_DEPOSIT_AMOUNT: 0x01\n",
        "MIN_DEPOSIT_AMOUNT: lots\n",
        "MIN_DEPOSIT_AMOUNT:\n  gwei: 1\n",
        "- 1\n- 2\n",
        "",
    ]
)
def test_invalid_config(yaml_text):
    with pytest.raises(ValueError):
        load_config_file(io.StringIO(yaml_text))


def test_contract_min_deposit_from_config():
    config = load_config_file(io.StringIO("CONFIG_NAME: 'testnet'\nMIN_DEPOSIT_AMOUNT: 2000000000\n"))
    contract = DepositContract(config=config)
    with pytest.raises(ValueTooLow):
        deposit(contract, make_deposit_input(MIN_DEPOSIT_AMOUNT), MIN_DEPOSIT_AMOUNT)
    deposit(contract, make_deposit_input(2 * MIN_DEPOSIT_AMOUNT), 2 * MIN_DEPOSIT_AMOUNT)
    assert contract.get_deposit_count() == (1).to_bytes(8, 'little')


def test_contract_rejects_bad_config():
    with pytest.raises(ValueError):
        DepositContract(config={'DEPOSIT_CONTRACT_TREE_DEPTH': 33})
