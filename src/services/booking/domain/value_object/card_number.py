from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, repr=False)
class CardNumber:
    """カード番号

    決済ゲートウェイ連携までの仮実装のため、桁数以外は検証しない。
    """

    MIN_LENGTH: ClassVar[int] = 10

    value: str

    def __post_init__(self) -> None:
        if len(self.value) < self.MIN_LENGTH:
            raise ValueError("Invalid Card")

    def __repr__(self) -> str:
        return f"CardNumber(****{self.value[-4:]})"

    def __str__(self) -> str:
        return f"****{self.value[-4:]}"
