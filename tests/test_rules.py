import pytest

from form_validation.fields import parse_form_config
from form_validation.rules import validate_all, validate_field

CONFIG = parse_form_config(
    {
        "email": {"type": "email", "label": "Email", "required": True},
        "password": {
            "type": "password",
            "minLength": 8,
            "minSpecialChars": 1,
            "minUppercase": 1,
            "minNumbers": 2,
        },
        "repeatPassword": {"type": "repeatPassword", "matchField": "password"},
        "bio": {"type": "textarea", "minLength": 3, "maxLength": 5},
        "nickname": {"type": "text", "minLength": 2, "maxLength": 6},
        "pin": {"type": "number", "minLength": 3, "maxLength": 4},
        "city": {"type": "text", "required": True},
    }
)


def check(name, value, values=None):
    return validate_field(CONFIG, name, value, values or {})


def test_required_uses_label_then_key():
    assert check("email", "") == "Email is required."
    assert check("city", "") == "city is required."


@pytest.mark.parametrize("name", ["password", "repeatPassword", "bio", "nickname", "pin"])
def test_empty_optional_field_is_valid(name):
    assert check(name, "") is None


@pytest.mark.parametrize(
    "value, expected",
    [
        ("a@b.com", None),
        ("first.last+tag@mail.example.org", None),
        ("not-an-email", "Invalid email format."),
        ("a@b.com!", "Invalid email format."),
        ("a@b.c", "Invalid email format."),
        ("a%b@c.com", "Email contains invalid characters."),
    ],
)
def test_email(value, expected):
    assert check("email", value) == expected


def test_email_trailing_newline_is_rejected():
    assert check("email", "a@b.com\n") == "Invalid email format."


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Ab1!", "Password must be at least 8 characters."),
        ("abcdefgh", "Password must contain at least 1 special character(s)."),
        ("abcdef1!", "Password must contain at least 1 uppercase letter(s)."),
        ("Abcdef1!", "Password must contain at least 2 number(s)."),
        ("Abcdef12!", None),
    ],
)
def test_password_checks_in_fixed_order(value, expected):
    assert check("password", value) == expected


def test_password_without_bounds_accepts_anything():
    config = parse_form_config({"password": {"type": "password"}})
    assert validate_field(config, "password", "x", {}) is None


def test_repeat_password_compares_stored_value():
    values = {"password": "X1"}
    assert check("repeatPassword", "X1", values) is None
    assert check("repeatPassword", "X2", values) == "Passwords do not match."


def test_repeat_password_defaults_to_password_field():
    config = parse_form_config(
        {"password": {"type": "password"}, "confirm": {"type": "repeatPassword"}}
    )
    assert validate_field(config, "confirm", "pw", {"password": "pw"}) is None
    assert validate_field(config, "confirm", "pw", {"password": "other"}) == "Passwords do not match."


def test_repeat_password_dangling_target_never_matches():
    config = parse_form_config({"confirm": {"type": "repeatPassword", "matchField": "secret"}})
    assert validate_field(config, "confirm", "pw", {}) == "Passwords do not match."


def test_text_rejects_digits_only_before_length():
    assert check("nickname", "12345") == "Text cannot be only numbers."


def test_text_length_bounds():
    assert check("nickname", "a") == "Text must be at least 2 characters."
    assert check("nickname", "abcdefg") == "Text must be at most 6 characters."
    assert check("nickname", "abc1") is None


def test_textarea_allows_digits_only():
    assert check("bio", "123") is None
    assert check("bio", "12") == "Textarea must be at least 3 characters."
    assert check("bio", "123456") == "Textarea must be at most 5 characters."


def test_number():
    assert check("pin", "12a") == "Only numbers are allowed."
    assert check("pin", "-12") == "Only numbers are allowed."
    assert check("pin", "12") == "Number must be at least 3 digits."
    assert check("pin", "12345") == "Number must be at most 4 digits."
    assert check("pin", "0012") is None


def test_unknown_field_is_not_an_error():
    assert check("nope", "anything") is None


def test_validate_all_covers_every_key():
    errors, valid = validate_all(CONFIG, {"email": "a@b.com", "city": "Pune"})

    assert list(errors) == list(CONFIG)
    assert valid is True

    errors, valid = validate_all(CONFIG, {})
    assert valid is False
    assert errors["email"] == "Email is required."
    assert errors["pin"] is None


def test_lengths_count_utf16_code_units():
    assert check("bio", "\U0001F600") == "Textarea must be at least 3 characters."
    assert check("bio", "\U0001F600a") is None
    assert check("bio", "\U0001F600\U0001F600\U0001F600") == "Textarea must be at most 5 characters."
    assert check("password", "Ab12\U0001F600\U0001F600") is None


def test_astral_character_counts_as_two_special_characters():
    config = parse_form_config({"password": {"type": "password", "minSpecialChars": 2}})

    assert validate_field(config, "password", "abc\U0001F600", {}) is None
    assert validate_field(config, "password", "abc!", {}) == (
        "Password must contain at least 2 special character(s)."
    )


def test_lone_surrogate_does_not_raise():
    assert check("bio", "ab\ud800") is None
