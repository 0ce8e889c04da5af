from dataclasses import dataclass


@dataclass(frozen=True)
class SupportTicketId:
    """問い合わせチケットID

    例: "TKT3F2A9C0D1E2B4C5DA6B7C8D9E0F1A2B3"
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("SupportTicketId cannot be empty")

    def __str__(self) -> str:
        return self.value
