from dataclasses import dataclass


@dataclass(frozen=True)
class SeatAssignment:
    """座席・搭乗口の割り当て結果"""

    seat: str
    gate: str
    boarding_time: str
