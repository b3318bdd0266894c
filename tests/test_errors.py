import pytest

from irpfm.errors import CodedError, ErrorCode, IrpError, error_message


def test_syntax_message():
    assert error_message(ErrorCode.SYNTAX) == "error 0: syntax error"


def test_internal_message_from_int():
    assert error_message(13) == "error 13: internal compiler error"


def test_return_code_reports_unknown():
    assert ErrorCode.RETURN.describe() == "unknown error"


def test_out_of_range_code_is_unknown():
    assert error_message(99).endswith("unknown error")
    assert error_message(99).startswith("error 99:")


@pytest.mark.parametrize("code", list(ErrorCode))
def test_message_prefix_has_number(code):
    assert error_message(code).startswith(f"error {int(code)}: ")
    assert error_message(code).endswith(code.describe())


def test_irp_error_without_detail():
    err = IrpError("String literal too long")
    assert str(err) == "String literal too long"
    assert err.detail is None


def test_irp_error_with_detail():
    err = IrpError("Unrecognized character", "@")
    assert str(err) == "Unrecognized character: @"


def test_coded_error_carries_code():
    err = CodedError(ErrorCode.LIMIT)
    assert err.code == ErrorCode.LIMIT
    assert str(err) == "error 12: limit exceeded"


def test_coded_error_is_irp_error():
    err = CodedError(ErrorCode.FILE)
    assert isinstance(err, IrpError)
    assert str(err) == "error 9: file operation failed"