import pytest

from pcskit.errmsg import (
    get_buy_errmsg_by_errno,
    get_download_errmsg_by_errno,
    get_errmsg_by_errno,
    get_login_errmsg,
    get_record_errmsg_by_errno,
    get_share_errmsg_by_errno,
)


@pytest.mark.parametrize(
    "code, message",
    [
        (-1, "System error, try again later"),
        (0, "Success"),
        (4, "Wrong password"),
        (120019, "See popped out window."),
        (400031, "See popped out window."),
        (500010, "Login too frequently, please try again after 24 hours."),
    ],
)
def test_login_messages(code, message):
    assert get_login_errmsg(code) == message


@pytest.mark.parametrize("code", [18, 400032, 400034, 400037, 400401])
def test_login_codes_without_message(code):
    assert get_login_errmsg(code) == ""


def test_login_unknown():
    assert get_login_errmsg(99) == "Unknown error."


def test_login_captcha_codes_share_message():
    assert get_login_errmsg(6) == get_login_errmsg(257) == "Wrong captcha."


@pytest.mark.parametrize(
    "code, message",
    [
        (0, "Success."),
        (31116, "You have been reach the quota. Buy more!"),
        (-8, "This file is already exists in this directory"),
        (600, "json parse error"),
    ],
)
def test_general_messages(code, message):
    assert get_errmsg_by_errno(code) == message


@pytest.mark.parametrize("code", [14, 201, 202, 203, 204, 205])
def test_general_system_error_group(code):
    assert get_errmsg_by_errno(code) == "System error"


def test_general_unknown():
    assert get_errmsg_by_errno(12345) == "Unknown error"


def test_share_messages():
    assert get_share_errmsg_by_errno(0) == "Success"
    assert get_share_errmsg_by_errno(-9) == "Access password error"
    assert get_share_errmsg_by_errno(-7) == get_share_errmsg_by_errno(-8)
    assert get_share_errmsg_by_errno(1) == "Unknow error"


def test_download_messages():
    assert get_download_errmsg_by_errno(-19) == "Please enter the verification code"
    assert get_download_errmsg_by_errno(36000) == get_download_errmsg_by_errno(36031)
    assert get_download_errmsg_by_errno(36026) == "Link malformed"
    assert get_download_errmsg_by_errno(36011) == "Unknow error"


def test_buy_messages():
    assert get_buy_errmsg_by_errno(36013) == "The order can not be re-paid"
    assert get_buy_errmsg_by_errno(3002) == get_buy_errmsg_by_errno(36014)
    assert get_buy_errmsg_by_errno(1002) == get_buy_errmsg_by_errno(1005)
    assert get_buy_errmsg_by_errno(36004) == "Unknow error"


def test_record_messages():
    assert get_record_errmsg_by_errno(36000) == "Internal error"
    assert get_record_errmsg_by_errno(36039) == "Price does not exist"
    assert get_record_errmsg_by_errno(36004) == "Unknow error"


def test_same_code_differs_between_tables():
    assert get_download_errmsg_by_errno(36002) == "appid error"
    assert get_record_errmsg_by_errno(36002) == "Parameter error"
    assert get_buy_errmsg_by_errno(36002) != get_record_errmsg_by_errno(36002)