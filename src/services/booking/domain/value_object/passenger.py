from dataclasses import dataclass


@dataclass(frozen=True)
class Passenger:
    """搭乗者情報"""

    name: str
    email: str
    passport: str

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Passenger name cannot be empty")
        if "@" not in self.email:
            raise ValueError(f"Invalid email address: {self.email}")
        if not self.passport.strip():
            raise ValueError("Passport number cannot be empty")

    def matches_passport(self, passport: str) -> bool:
        """本人確認（旅券番号の完全一致）"""
        return self.passport == passport
