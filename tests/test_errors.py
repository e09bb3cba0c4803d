from pastebox.paste import ClassificationError, PayloadTooLargeError, UnauthorizedError, ValidationError, is_client_error


def test_paste_errors_are_client_faults():
    for exc in (ClassificationError("x"), ValidationError("x"), UnauthorizedError("x"), PayloadTooLargeError(2, 1)):
        assert is_client_error(exc)


def test_filesystem_and_unexpected_errors_are_server_faults():
    assert not is_client_error(PermissionError("denied"))
    assert not is_client_error(RuntimeError("boom"))


def test_payload_error_message():
    assert str(PayloadTooLargeError(11, 10)) == "Payload of 11 bytes exceeds the 10 byte limit"
