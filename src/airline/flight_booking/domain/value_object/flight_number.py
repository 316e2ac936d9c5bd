import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class FlightNumber:
    """フライト番号

    IATA 航空会社コード（英数字2文字）+ 便名番号（1-4桁）の形式。
    例: BA123, KL456, U21234
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Z0-9]{2}\d{1,4}$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(
                f"Invalid flight number: {self.value}. "
                "Expected an IATA designator followed by 1-4 digits (e.g. BA123)"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
