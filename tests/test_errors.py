import pytest

from gfastkit.errors import AppError, ensure_no_error, ensure_not_none


def test_error_text_used_without_message():
    original = ValueError("boom")
    with pytest.raises(AppError) as info:
        ensure_no_error(original)
    assert str(info.value) == "boom"
    assert info.value.__cause__ is original


def test_custom_message_replaces_error_text():
    original = RuntimeError("db down")
    with pytest.raises(AppError) as info:
        ensure_no_error(original, "query failed")
    assert str(info.value) == "query failed"
    assert info.value.__cause__ is original


def test_non_exception_error_is_stringified():
    with pytest.raises(AppError) as info:
        ensure_no_error("plain failure")
    assert str(info.value) == "plain failure"


def test_empty_message_is_still_used():
    with pytest.raises(AppError) as info:
        ensure_no_error(ValueError("inner"), "")
    assert str(info.value) == ""


def test_ensure_not_none_raises_with_message():
    with pytest.raises(AppError, match="missing record"):
        ensure_not_none(None, "missing record")


@pytest.mark.parametrize("value", [0, "", [], False])
def test_ensure_not_none_passes_falsy_values_through(value):
    assert ensure_not_none(value, "unused") == value