import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Pnr:
    """予約番号（Passenger Name Record）

    利用者に提示する予約番号。"PNR" + 6桁の数字。
    例: PNR482913
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^PNR\d{6}$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(
                f"Invalid PNR format: {self.value}. "
                "Expected format: PNR123456 (PNR + 6 digits)"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
