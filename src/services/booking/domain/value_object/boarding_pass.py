from dataclasses import dataclass


@dataclass(frozen=True)
class BoardingPass:
    """搭乗券

    チェックイン時に発行する。予約には保存しない。
    """

    passenger_name: str
    flight_id: str
    seat: str
    gate: str
    boarding_time: str
    boarding_token: str
