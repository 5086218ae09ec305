from typing import Annotated, Any, Dict, Literal, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel

from form_validation.errors import ConfigError


class BaseFieldConfig(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    label: Optional[str] = Field(default=None, description="Display name used in messages")
    required: bool = Field(default=False, description="Empty value is an error when set")

    @field_validator(
        "label",
        "required",
        "min_length",
        "max_length",
        "min_special_chars",
        "min_uppercase",
        "min_numbers",
        "match_field",
        mode="wrap",
        check_fields=False,
    )
    @classmethod
    def _default_when_malformed(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        # a malformed optional member means the rule does not apply
        try:
            return handler(value)
        except ValidationError:
            return cls.model_fields[info.field_name].default

    def display_name(self, key: str) -> str:
        return self.label or key


class EmailFieldConfig(BaseFieldConfig):
    type: Literal["email"] = "email"


class PasswordFieldConfig(BaseFieldConfig):
    type: Literal["password"] = "password"

    min_length: Optional[int] = None
    min_special_chars: Optional[int] = None
    min_uppercase: Optional[int] = None
    min_numbers: Optional[int] = None


class RepeatPasswordFieldConfig(BaseFieldConfig):
    type: Literal["repeatPassword"] = "repeatPassword"

    match_field: Optional[str] = Field(
        default="password", description="Key of the field this value must equal"
    )

    @property
    def target(self) -> str:
        return self.match_field or "password"


class TextFieldConfig(BaseFieldConfig):
    type: Literal["text"] = "text"

    min_length: Optional[int] = None
    max_length: Optional[int] = None


class TextareaFieldConfig(BaseFieldConfig):
    type: Literal["textarea"] = "textarea"

    min_length: Optional[int] = None
    max_length: Optional[int] = None


class NumberFieldConfig(BaseFieldConfig):
    """Digit-string field; bounds are digit counts, not numeric values."""

    type: Literal["number"] = "number"

    min_length: Optional[int] = None
    max_length: Optional[int] = None


FieldConfig = Annotated[
    Union[
        EmailFieldConfig,
        PasswordFieldConfig,
        RepeatPasswordFieldConfig,
        TextFieldConfig,
        TextareaFieldConfig,
        NumberFieldConfig,
    ],
    Field(discriminator="type"),
]

FormConfig = Dict[str, FieldConfig]

_form_config_adapter = TypeAdapter(FormConfig)


def parse_form_config(raw: Mapping[str, Any]) -> Dict[str, BaseFieldConfig]:
    """
    Build an ordered FormConfig from a mapping of field key -> field config.

    Values may be plain dicts (camelCase or snake_case keys) or already-built
    field config models. Declared key order is preserved. Bounds that do not
    belong to a field's kind are dropped, malformed ones fall back to their
    defaults; only a missing or unknown `type` is rejected.
    """
    if not isinstance(raw, Mapping):
        raise ConfigError(f"Form config must be a mapping, got {type(raw).__name__}")

    try:
        return _form_config_adapter.validate_python(dict(raw))
    except ValidationError as exc:
        raise ConfigError(f"Invalid form config: {exc}") from exc
