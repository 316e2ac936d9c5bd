from __future__ import annotations

from dataclasses import dataclass

from airline.flight_booking.domain.enum import TransactOutcome


@dataclass(frozen=True)
class TransactSummary:
    """予約トランザクションの結果サマリ

    | 結果 | 呼び出し側の扱い |
    |---|---|
    | SUCCESS | 予約は永続化済み |
    | PRECONDITION_FAILED | 条件式の不成立。事前に読み込んだ場合のみ再読込して再試行してよい |
    | TRANSACTION_CANCELLED | その他の理由によるキャンセル。バックオフ付きで再試行してよい |
    | GENERIC_FAILURE | 通信・スロットリング等。黙って再試行しない |

    PRECONDITION_FAILED はキャンセルの一種なので transaction_cancelled も True になる。
    """

    outcome: TransactOutcome
    failure_reason: str | None = None

    @property
    def success(self) -> bool:
        return self.outcome == TransactOutcome.SUCCESS

    @property
    def precondition_failed(self) -> bool:
        return self.outcome == TransactOutcome.PRECONDITION_FAILED

    @property
    def transaction_cancelled(self) -> bool:
        return self.outcome in (
            TransactOutcome.PRECONDITION_FAILED,
            TransactOutcome.TRANSACTION_CANCELLED,
        )

    @property
    def generic_failure(self) -> bool:
        return self.outcome == TransactOutcome.GENERIC_FAILURE

    @classmethod
    def succeeded(cls) -> TransactSummary:
        return cls(outcome=TransactOutcome.SUCCESS)

    @classmethod
    def precondition_failure(cls, reason: str) -> TransactSummary:
        return cls(outcome=TransactOutcome.PRECONDITION_FAILED, failure_reason=reason)

    @classmethod
    def cancelled(cls, reason: str) -> TransactSummary:
        return cls(outcome=TransactOutcome.TRANSACTION_CANCELLED, failure_reason=reason)

    @classmethod
    def failed(cls, reason: str) -> TransactSummary:
        return cls(outcome=TransactOutcome.GENERIC_FAILURE, failure_reason=reason)
