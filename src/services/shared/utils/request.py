from typing import TypeVar

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def parse_body(event: APIGatewayProxyEventV2, model: type[T]) -> T:
    """リクエストボディ（JSON）をモデルに変換する

    ボディが空の場合は空オブジェクトとして検証する。
    不正な JSON や必須項目の欠落は pydantic.ValidationError になる。
    """
    return model.model_validate_json(event.decoded_body or "{}")


def parse_query(event: APIGatewayProxyEventV2, model: type[T]) -> T:
    """クエリ文字列をモデルに変換する"""
    return model.model_validate(event.query_string_parameters or {})
