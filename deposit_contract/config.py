from pathlib import Path
from typing import Any, BinaryIO, Dict, TextIO, Union

from ruamel.yaml import YAML

from deposit_contract.constants import STRUCTURAL_CONSTANTS

CONFIGS_DIR = Path(__file__).parent / "configs"


def parse_config_vars(conf: Dict[str, Any]) -> Dict[str, Any]:
    """
    Parses a dict of basic str/int types into more detailed python types
    """
    out: Dict[str, Any] = dict()
    for k, v in conf.items():
        if isinstance(v, str) and v.startswith("0x"):
            out[k] = bytes.fromhex(v[2:])
        elif k != "CONFIG_NAME":
            try:
                out[k] = int(v)
            except (TypeError, ValueError):
                raise ValueError(f"config var {k} must be an integer, got {v!r}")
        else:
            out[k] = v
    return out


def check_structural_constants(config: Dict[str, Any]) -> None:
    for k, expected in STRUCTURAL_CONSTANTS.items():
        if k in config and config[k] != expected:
            raise ValueError(f"config var {k} must be {expected}, got {config[k]}")
    min_deposit_amount = config.get("MIN_DEPOSIT_AMOUNT", 1)
    if not isinstance(min_deposit_amount, int):
        raise ValueError(f"config var MIN_DEPOSIT_AMOUNT must be an integer, got {min_deposit_amount!r}")
    if min_deposit_amount < 1:
        raise ValueError("config var MIN_DEPOSIT_AMOUNT must be positive")


def load_config_file(config_path: Union[Path, BinaryIO, TextIO]) -> Dict[str, Any]:
    """
    Loads the given configuration file.
    """
    yaml = YAML(typ="base")
    config_data = yaml.load(config_path)
    if config_data is None:  # for empty YAML files
        raise ValueError(f"empty deposit contract config: {config_path}")
    if not isinstance(config_data, dict):
        raise ValueError(f"deposit contract config must be a mapping: {config_path}")
    config = parse_config_vars(config_data)
    check_structural_constants(config)
    return config


def load_config(name: str = "mainnet") -> Dict[str, Any]:
    """
    Loads one of the configs shipped with the package, by name.
    """
    path = CONFIGS_DIR / f"{name}.yaml"
    if not path.exists():
        raise ValueError(f"unknown deposit contract config: {name}")
    return load_config_file(path)
