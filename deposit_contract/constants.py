from eth_utils import denoms

DEPOSIT_CONTRACT_TREE_DEPTH = 32
MAX_DEPOSIT_COUNT = 2**DEPOSIT_CONTRACT_TREE_DEPTH - 1

PUBKEY_LENGTH = 48  # bytes
WITHDRAWAL_CREDENTIALS_LENGTH = 32  # bytes
SIGNATURE_LENGTH = 96  # bytes
AMOUNT_LENGTH = 8  # bytes

GWEI = denoms.gwei  # wei per gwei
MIN_DEPOSIT_AMOUNT = 1000000000  # Gwei, i.e. 1 ether
FULL_DEPOSIT_AMOUNT = 32000000000  # Gwei
MAX_GWEI_AMOUNT = 2**64 - 1

# Constants that fix the shape of the tree and of the hashed DepositData
STRUCTURAL_CONSTANTS = {
    "DEPOSIT_CONTRACT_TREE_DEPTH": DEPOSIT_CONTRACT_TREE_DEPTH,
    "PUBKEY_LENGTH": PUBKEY_LENGTH,
    "WITHDRAWAL_CREDENTIALS_LENGTH": WITHDRAWAL_CREDENTIALS_LENGTH,
    "SIGNATURE_LENGTH": SIGNATURE_LENGTH,
    "AMOUNT_LENGTH": AMOUNT_LENGTH,
}
