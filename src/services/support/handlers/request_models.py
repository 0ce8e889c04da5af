from pydantic import Field, field_validator

from services.shared.utils import CamelModel, strip_text


class CreateSupportTicketRequest(CamelModel):
    """問い合わせ作成リクエストモデル

    PNR は予約の存在確認をしない。
    """

    pnr: str = Field(default="", examples=["PNR123456"])
    issue_type: str = Field(..., min_length=1, examples=["BAGGAGE"])
    details: str = Field(default="", max_length=2000)

    @field_validator("pnr", "issue_type", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        return strip_text(v)
