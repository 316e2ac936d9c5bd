from enum import Enum


class TransactOutcome(str, Enum):
    """予約トランザクションの結果区分"""

    SUCCESS = "SUCCESS"
    PRECONDITION_FAILED = "PRECONDITION_FAILED"
    TRANSACTION_CANCELLED = "TRANSACTION_CANCELLED"
    GENERIC_FAILURE = "GENERIC_FAILURE"
