import re
from typing import Dict, Mapping, Optional, Tuple

from form_validation.fields import (
    BaseFieldConfig,
    EmailFieldConfig,
    NumberFieldConfig,
    PasswordFieldConfig,
    RepeatPasswordFieldConfig,
    TextareaFieldConfig,
    TextFieldConfig,
)

EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
EMAIL_INVALID_CHAR_RE = re.compile(r"[^a-zA-Z0-9@._\-+]")
SPECIAL_CHAR_RE = re.compile(r"[^a-zA-Z0-9]")
UPPERCASE_RE = re.compile(r"[A-Z]")
DIGIT_RE = re.compile(r"[0-9]")
DIGITS_ONLY_RE = re.compile(r"[0-9]+")
NON_DIGIT_RE = re.compile(r"[^0-9]")


def text_length(value: str) -> int:
    """Length in UTF-16 code units, the way browsers count input length."""
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def _length_error(noun: str, unit: str, value: str, field) -> Optional[str]:
    if field.min_length and text_length(value) < field.min_length:
        return f"{noun} must be at least {field.min_length} {unit}."
    if field.max_length and text_length(value) > field.max_length:
        return f"{noun} must be at most {field.max_length} {unit}."
    return None


def check_email(field: EmailFieldConfig, value: str, values: Mapping[str, str]) -> Optional[str]:
    if not EMAIL_RE.fullmatch(value):
        return "Invalid email format."
    if EMAIL_INVALID_CHAR_RE.search(value):
        return "Email contains invalid characters."
    return None


def check_password(field: PasswordFieldConfig, value: str, values: Mapping[str, str]) -> Optional[str]:
    if field.min_length and text_length(value) < field.min_length:
        return f"Password must be at least {field.min_length} characters."
    specials = "".join(SPECIAL_CHAR_RE.findall(value))
    if field.min_special_chars and text_length(specials) < field.min_special_chars:
        return f"Password must contain at least {field.min_special_chars} special character(s)."
    if field.min_uppercase and len(UPPERCASE_RE.findall(value)) < field.min_uppercase:
        return f"Password must contain at least {field.min_uppercase} uppercase letter(s)."
    if field.min_numbers and len(DIGIT_RE.findall(value)) < field.min_numbers:
        return f"Password must contain at least {field.min_numbers} number(s)."
    return None


def check_repeat_password(
    field: RepeatPasswordFieldConfig, value: str, values: Mapping[str, str]
) -> Optional[str]:
    if value != values.get(field.target):
        return "Passwords do not match."
    return None


def check_text(field: TextFieldConfig, value: str, values: Mapping[str, str]) -> Optional[str]:
    if DIGITS_ONLY_RE.fullmatch(value):
        return "Text cannot be only numbers."
    return _length_error("Text", "characters", value, field)


def check_textarea(field: TextareaFieldConfig, value: str, values: Mapping[str, str]) -> Optional[str]:
    return _length_error("Textarea", "characters", value, field)


def check_number(field: NumberFieldConfig, value: str, values: Mapping[str, str]) -> Optional[str]:
    if NON_DIGIT_RE.search(value):
        return "Only numbers are allowed."
    return _length_error("Number", "digits", value, field)


RULES = {
    "email": check_email,
    "password": check_password,
    "repeatPassword": check_repeat_password,
    "text": check_text,
    "textarea": check_textarea,
    "number": check_number,
}


def validate_field(
    config: Mapping[str, BaseFieldConfig],
    name: str,
    value: str,
    values: Mapping[str, str],
) -> Optional[str]:
    """
    Return the first failing rule's message for one field, or None.

    Order: required, then (for non-empty values only) the kind's own rules.
    Unknown field names are never an error.
    """
    field = config.get(name)
    if field is None:
        return None

    if not value:
        if field.required:
            return f"{field.display_name(name)} is required."
        return None

    return RULES[field.type](field, value, values)


def validate_all(
    config: Mapping[str, BaseFieldConfig], values: Mapping[str, str]
) -> Tuple[Dict[str, Optional[str]], bool]:
    errors: Dict[str, Optional[str]] = {}
    for name in config:
        errors[name] = validate_field(config, name, values.get(name, ""), values)

    return errors, all(error is None for error in errors.values())
