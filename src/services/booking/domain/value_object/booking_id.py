from dataclasses import dataclass


@dataclass(frozen=True)
class BookingId:
    """予約ID（内部用）

    例: "0b7c6a8e-8d0f-4f57-9d55-3f1f0a9a5c21"
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("BookingId cannot be empty")

    def __str__(self) -> str:
        return self.value
