from pydantic import Field, field_validator

from services.shared.utils import CamelModel, strip_text


class SearchFlightsRequest(CamelModel):
    """便検索のクエリパラメータ"""

    origin: str = Field(..., min_length=1, examples=["NYC"])
    destination: str = Field(..., min_length=1, examples=["LON"])
    date: str = Field(
        ...,
        min_length=1,
        description="出発日（YYYY-MM-DD）",
        examples=["2025-10-15"],
    )

    @field_validator("origin", "destination", "date", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        return strip_text(v)
