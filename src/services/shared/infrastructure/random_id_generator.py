import secrets
import uuid

from services.shared.domain.service import IdGenerator


class RandomIdGenerator(IdGenerator):
    """uuid4 と secrets による IdGenerator の具象実装"""

    def booking_id(self) -> str:
        return str(uuid.uuid4())

    def pnr(self) -> str:
        # 100000-999999 の6桁
        return f"PNR{100000 + secrets.randbelow(900000)}"

    def ticket_id(self) -> str:
        return str(uuid.uuid4())

    def boarding_token(self) -> str:
        return secrets.token_urlsafe(16)

    def support_ticket_id(self) -> str:
        return f"TKT{uuid.uuid4().hex.upper()}"
