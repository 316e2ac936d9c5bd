from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class BookingId:
    """予約ID（bookings テーブルのソートキー）

    呼び出し側で採番する一意な値。通常は UUID 文字列。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("BookingId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> BookingId:
        """UUID4 で新しい予約IDを採番する"""
        return cls(value=str(uuid.uuid4()))
