from decimal import Decimal


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する
    （float の誤差を持ち込まないため）。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def strip_text(v: object) -> object:
    """文字列の前後の空白を取り除く

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    文字列以外はそのまま返し、型エラーは Pydantic に任せる。
    """
    if isinstance(v, str):
        return v.strip()
    return v
