from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON のキーを camelCase で受け渡しするモデル

    Python 側はスネークケースのフィールド名のまま扱う。
    """

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    def to_payload(self) -> dict:
        """レスポンスボディ用の辞書に変換する"""
        return self.model_dump(mode="json", by_alias=True)
