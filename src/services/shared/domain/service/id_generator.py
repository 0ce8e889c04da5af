from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """識別子の採番を抽象化する

    テストでは決定的な実装を差し込めるよう、乱数による採番は
    infrastructure 側の実装に閉じ込める。
    """

    @abstractmethod
    def booking_id(self) -> str:
        """内部用の予約IDを採番する"""
        raise NotImplementedError

    @abstractmethod
    def pnr(self) -> str:
        """PNR（"PNR" + 6桁の数字）の候補を採番する

        一意性は保証しない。衝突判定は呼び出し側が行う。
        """
        raise NotImplementedError

    @abstractmethod
    def ticket_id(self) -> str:
        """決済完了時に発行する航空券IDを採番する"""
        raise NotImplementedError

    @abstractmethod
    def boarding_token(self) -> str:
        """搭乗券のトークン（QRコードの中身）を採番する"""
        raise NotImplementedError

    @abstractmethod
    def support_ticket_id(self) -> str:
        """問い合わせチケットIDを採番する"""
        raise NotImplementedError
