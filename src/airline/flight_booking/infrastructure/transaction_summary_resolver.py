from botocore.exceptions import BotoCoreError, ClientError

from airline.flight_booking.domain.value_object import TransactSummary

TRANSACTION_CANCELED = "TransactionCanceledException"
CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailed"

PRECONDITION_FAILED_REASON = (
    "Optimistic locking failed: another actor modified the flight concurrently."
)


def resolve_transact_summary(
    error: ClientError | BotoCoreError | None = None,
) -> TransactSummary:
    """ストアの例外を TransactSummary に分類する

    - 例外なし: SUCCESS
    - TransactionCanceledException かつ理由に ConditionalCheckFailed を含む: PRECONDITION_FAILED
    - その他の TransactionCanceledException: TRANSACTION_CANCELLED
    - その他の ClientError / BotoCoreError: GENERIC_FAILURE
    """
    if error is None:
        return TransactSummary.succeeded()

    if isinstance(error, ClientError) and _error_code(error) == TRANSACTION_CANCELED:
        if CONDITIONAL_CHECK_FAILED in cancellation_codes(error):
            return TransactSummary.precondition_failure(PRECONDITION_FAILED_REASON)
        return TransactSummary.cancelled(f"Transaction canceled: {_message(error)}")

    return TransactSummary.failed(f"Transaction failed: {_message(error)}")


def cancellation_codes(error: ClientError) -> list[str]:
    """トランザクションの各アイテムのキャンセル理由コード"""
    reasons = error.response.get("CancellationReasons") or []
    return [reason.get("Code", "None") for reason in reasons]


def _error_code(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Code", "")


def _message(error: ClientError | BotoCoreError) -> str:
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Message") or str(error)
    return str(error)
