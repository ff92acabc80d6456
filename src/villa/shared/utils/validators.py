from decimal import Decimal, InvalidOperation
from typing import TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    変換できない値は ValueError にして Pydantic のエラー一覧に載せる。
    """
    if isinstance(v, Decimal):
        return v
    if isinstance(v, bool) or v is None:
        raise ValueError("must be a decimal number")
    try:
        return Decimal(str(v).strip())
    except InvalidOperation:
        raise ValueError("must be a decimal number") from None


def parse_json_body(model: type[ModelT], body: str | None) -> ModelT:
    """リクエストボディ(JSON文字列)をモデルに変換する

    ボディが空の場合は空オブジェクトとして扱い、必須項目のエラーをまとめて返す。
    """
    return model.model_validate_json(body or "{}")


def format_validation_errors(error: ValidationError) -> list[dict[str, str]]:
    """ValidationError を項目ごとのエラー一覧に変換する"""
    return [
        {
            "field": ".".join(str(part) for part in detail["loc"]) or "body",
            "message": detail["msg"],
        }
        for detail in error.errors(include_url=False)
    ]
