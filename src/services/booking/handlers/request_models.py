from pydantic import Field, field_validator

from services.shared.utils import CamelModel, strip_text


class CreateBookingRequest(CamelModel):
    """予約作成リクエストモデル"""

    flight_id: str = Field(..., min_length=1, examples=["FL001"])
    passenger_name: str = Field(..., min_length=1, examples=["Alice"])
    email: str = Field(..., min_length=3, examples=["alice@example.com"])
    passport: str = Field(..., min_length=1, examples=["P1234567"])

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "flightId": "FL001",
                    "passengerName": "Alice",
                    "email": "alice@example.com",
                    "passport": "P1234567",
                }
            ]
        },
    }

    @field_validator("flight_id", "passenger_name", "email", "passport", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        return strip_text(v)


class PaymentRequest(CamelModel):
    """決済リクエストモデル

    カード番号の桁数チェックはドメイン側で行う（InvalidCard として返すため）。
    """

    pnr: str = Field(..., min_length=1, examples=["PNR123456"])
    card_number: str = Field(..., examples=["4111111111111111"])


class CheckInRequest(CamelModel):
    """チェックインリクエストモデル"""

    pnr: str = Field(..., min_length=1)
    passport: str = Field(..., min_length=1)

    @field_validator("passport", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        return strip_text(v)


class CancelBookingRequest(CamelModel):
    """キャンセルリクエストモデル"""

    pnr: str = Field(..., min_length=1)
