class DepositContractError(Exception):
    """
    Base class for a rejected deposit contract call. The message is the revert reason.
    """
    reason = "DepositContract: call rejected"

    def __init__(self, reason=None):
        super().__init__(reason if reason is not None else self.reason)


class TreeFull(DepositContractError):
    reason = "DepositContract: merkle tree full"


class ValueTooLow(DepositContractError):
    reason = "DepositContract: deposit value too low"


class ValueNotMultipleOfUnit(DepositContractError):
    reason = "DepositContract: deposit value not multiple of gwei"


class ValueTooHigh(DepositContractError):
    reason = "DepositContract: deposit value too high"


class InvalidPubkeyLength(DepositContractError):
    reason = "DepositContract: invalid pubkey length"


class InvalidWithdrawalCredentialsLength(DepositContractError):
    reason = "DepositContract: invalid withdrawal_credentials length"


class InvalidSignatureLength(DepositContractError):
    reason = "DepositContract: invalid signature length"


class RootMismatch(DepositContractError):
    reason = "DepositContract: reconstructed DepositData does not match supplied deposit_data_root"


class EventOutOfOrder(DepositContractError):
    reason = "DepositTracker: deposit event index does not follow the tracked deposit count"
