"""
User-facing message catalog.

Status messages shown after a save and the inline text for field validation
errors, in English and Japanese. Lookups fall back to English for unknown
locales and to the key itself for unknown keys.
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from app.config import settings
from domain.enums import UpsertAction

DEFAULT_LOCALE = "en"

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        # save status
        "saved": "Saved",
        "updated": "Updated",
        "save_failed": "Failed to save",
        "update_failed": "Failed to update",
        "load_failed": "Failed to load entry",
        "not_found": "No entry for {key}",
        # field validation
        "required": "This field is required",
        "invalid_date": "Enter a valid date",
        "not_a_number": "Enter a number",
        "not_an_integer": "Enter a whole number",
        "min_value": "Enter a value of {ge} or more",
        "max_decimals": "Use at most {decimal_places} decimal places",
        "amount_too_large": "Amount is too large",
        "total_too_large": "Total must be less than {limit}",
        "too_long": "Must be {max_length} characters or less",
        "items_min": "Add at least one item",
        "invalid_choice": "Choose one of: {expected}",
        "invalid": "Invalid value",
    },
    "ja": {
        "saved": "保存しました",
        "updated": "更新しました",
        "save_failed": "保存に失敗しました",
        "update_failed": "更新に失敗しました",
        "load_failed": "読み込みに失敗しました",
        "not_found": "{key} の記録はありません",
        "required": "必須項目です",
        "invalid_date": "日付を正しく入力してください",
        "not_a_number": "数字で入力してください",
        "not_an_integer": "整数で入力してください",
        "min_value": "{ge}以上の値を入力してください",
        "max_decimals": "小数点以下{decimal_places}桁まで入力できます",
        "amount_too_large": "金額が大きすぎます",
        "total_too_large": "合計は{limit}未満にしてください",
        "too_long": "{max_length}文字以内で入力してください",
        "items_min": "明細を1件以上追加してください",
        "invalid_choice": "{expected} から選択してください",
        "invalid": "入力内容が正しくありません",
    },
}

# pydantic error type -> catalog key
_ERROR_KEYS = {
    "missing": "required",
    "string_too_short": "required",
    "string_too_long": "too_long",
    "date_type": "invalid_date",
    "date_parsing": "invalid_date",
    "date_from_datetime_parsing": "invalid_date",
    "date_from_datetime_inexact": "invalid_date",
    "decimal_type": "not_a_number",
    "decimal_parsing": "not_a_number",
    "float_type": "not_a_number",
    "float_parsing": "not_a_number",
    "finite_number": "not_a_number",
    "int_type": "not_an_integer",
    "int_parsing": "not_an_integer",
    "int_from_float": "not_an_integer",
    "greater_than_equal": "min_value",
    "decimal_max_places": "max_decimals",
    "decimal_max_digits": "amount_too_large",
    "decimal_whole_digits": "amount_too_large",
    "total_too_large": "total_too_large",
    "too_short": "items_min",
    "enum": "invalid_choice",
}


def translate(key: str, locale: Optional[str] = None, /, **params: Any) -> str:
    """Return the catalog text for ``key`` formatted with ``params``."""
    catalog = MESSAGES.get(locale or settings.locale, MESSAGES[DEFAULT_LOCALE])
    template = catalog.get(key) or MESSAGES[DEFAULT_LOCALE].get(key, key)
    try:
        return template.format(**params)
    except (KeyError, IndexError):
        return template


# operation -> catalog key of the message shown when it fails
_FAILURE_KEYS = {
    "select": "load_failed",
    "insert": "save_failed",
    "update": "update_failed",
}


def status_message(action: UpsertAction, locale: Optional[str] = None) -> str:
    """"Saved" for a new record, "Updated" for an existing one"""
    key = "saved" if UpsertAction(action) is UpsertAction.CREATED else "updated"
    return translate(key, locale)


def failure_message(operation: Optional[str], locale: Optional[str] = None) -> str:
    """Short text for a failed store operation; never includes the cause"""
    return translate(_FAILURE_KEYS.get(operation or "", "save_failed"), locale)


def field_path(loc: Iterable[Any]) -> str:
    """Join a pydantic error location into a dotted path (``items.0.amount``)."""
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or "__root__"


def describe_error(error: Mapping[str, Any], locale: Optional[str] = None) -> str:
    """Localized text for a single pydantic error dict."""
    error_type = error.get("type", "")
    if error.get("input") in ("", None) and error_type != "too_short":
        key = "required"
    else:
        key = _ERROR_KEYS.get(error_type, "invalid")
    ctx = dict(error.get("ctx") or {})
    return translate(key, locale, **{k: v for k, v in ctx.items()})


def describe_errors(
    errors: Iterable[Mapping[str, Any]], locale: Optional[str] = None
) -> Dict[str, str]:
    """
    Map each failing field to one localized message.

    The first error reported for a field wins, so a field that is both empty
    and malformed shows the "required" message.
    """
    described: Dict[str, str] = {}
    for error in errors:
        path = field_path(error.get("loc", ()))
        if path not in described:
            described[path] = describe_error(error, locale)
    return described
