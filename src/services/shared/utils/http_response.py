import json

from pydantic import ValidationError

from services.shared.domain.exception import DomainException, ErrorKind

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNAVAILABLE: 400,
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.INVALID_STATE: 400,
}


def api_response(status_code: int, body: dict | list) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def status_code_for(kind: ErrorKind) -> int:
    """エラー種別を HTTP ステータスコードに変換する"""
    return _STATUS_BY_KIND[kind]


def error_response(error: DomainException, message: str | None = None) -> dict:
    """ドメイン例外をエラーレスポンスに変換する

    message を指定した場合は例外メッセージの代わりに返す（在庫切れと
    フライト不在を呼び出し側に区別させない場合など）。
    """
    return api_response(
        status_code_for(error.kind),
        {"message": message or error.message, "kind": error.kind.value},
    )


def validation_error_response(error: ValidationError) -> dict:
    """リクエストの検証エラーを 400 レスポンスに変換する"""
    return api_response(
        400,
        {
            "message": "Invalid request",
            "kind": ErrorKind.INVALID_INPUT.value,
            "errors": [
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                for err in error.errors()
            ],
        },
    )


def internal_error_response() -> dict:
    return api_response(500, {"message": "Internal server error"})
