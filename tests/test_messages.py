"""
Tests for the user-facing message catalog and error descriptions.
"""

import pytest
from pydantic import ValidationError

from app.messages import (
    translate,
    describe_errors,
    failure_message,
    field_path,
    status_message,
)
from domain.enums import UpsertAction
from domain.schemas import ExpenseCreate, JournalCreate


def test_translate_status_messages():
    """
    Verifies:
    - English and Japanese status messages
    - Unknown locales fall back to English
    """
    assert translate("saved", "en") == "Saved"
    assert translate("updated", "en") == "Updated"
    assert translate("saved", "ja") == "保存しました"
    assert translate("updated", "ja") == "更新しました"
    assert translate("update_failed", "ja") == "更新に失敗しました"
    assert translate("saved", "fr") == "Saved"


def test_translate_uses_configured_locale_by_default():
    """Tests run with LOCALE=en"""
    assert translate("save_failed") == "Failed to save"


def test_translate_unknown_key_returns_key():
    assert translate("no_such_message", "en") == "no_such_message"


def test_translate_formats_parameters():
    assert translate("too_long", "en", max_length=1000) == "Must be 1000 characters or less"
    assert translate("not_found", "ja", key="2024-01-01") == "2024-01-01 の記録はありません"


def test_field_path_strips_request_location():
    assert field_path(("body", "items", 0, "amount")) == "items.0.amount"
    assert field_path(("date",)) == "date"
    assert field_path(()) == "__root__"


def test_describe_errors_one_message_per_field():
    """
    Verifies:
    - Each failing field gets exactly one localized message
    - Nested item fields use dotted paths
    """
    with pytest.raises(ValidationError) as exc_info:
        ExpenseCreate.model_validate(
            {"date": "", "items": [{"name": "", "amount": "abc"}]}
        )

    errors = describe_errors(exc_info.value.errors(), "en")

    assert errors["date"] == "This field is required"
    assert errors["items.0.name"] == "This field is required"
    assert errors["items.0.amount"] == "Enter a number"


def test_describe_errors_japanese():
    with pytest.raises(ValidationError) as exc_info:
        ExpenseCreate.model_validate({"date": "2024-01-01", "items": []})

    errors = describe_errors(exc_info.value.errors(), "ja")

    assert errors == {"items": "明細を1件以上追加してください"}


def test_describe_errors_length_limit():
    with pytest.raises(ValidationError) as exc_info:
        JournalCreate.model_validate({"date": "2024-01-01", "content": "x" * 1001})

    errors = describe_errors(exc_info.value.errors(), "en")

    assert errors == {"content": "Must be 1000 characters or less"}


def test_describe_errors_amount_precision():
    with pytest.raises(ValidationError) as exc_info:
        ExpenseCreate.model_validate(
            {
                "date": "2024-01-01",
                "items": [
                    {"name": "a", "amount": "0.004"},
                    {"name": "b", "amount": "12345678901"},
                ],
            }
        )

    assert describe_errors(exc_info.value.errors(), "en") == {
        "items.0.amount": "Use at most 2 decimal places",
        "items.1.amount": "Amount is too large",
    }
    assert describe_errors(exc_info.value.errors(), "ja")["items.0.amount"] == (
        "小数点以下2桁まで入力できます"
    )


def test_describe_errors_total_too_large():
    with pytest.raises(ValidationError) as exc_info:
        ExpenseCreate.model_validate(
            {
                "date": "2024-01-01",
                "items": [{"name": "a", "amount": "9999999999"}, {"name": "b", "amount": "1"}],
            }
        )

    assert describe_errors(exc_info.value.errors(), "en") == {
        "items": "Total must be less than 10000000000"
    }


def test_status_and_failure_messages_follow_locale():
    assert status_message(UpsertAction.CREATED, "ja") == "保存しました"
    assert status_message("updated", "en") == "Updated"
    assert failure_message("insert", "ja") == "保存に失敗しました"
    assert failure_message("update", "en") == "Failed to update"
    assert failure_message("select", "en") == "Failed to load entry"
    assert failure_message(None, "en") == "Failed to save"
