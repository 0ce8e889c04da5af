from services.shared.domain.exception import ResourceUnavailableException


class FlightUnavailableException(ResourceUnavailableException):
    """便が予約できない場合

    呼び出し側には区別せず「予約不可」として返す。
    """


class FlightNotFoundException(FlightUnavailableException):
    """便が存在しない場合"""


class NoSeatsAvailableException(FlightUnavailableException):
    """残席がない場合"""
