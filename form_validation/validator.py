import logging
from typing import Any, Dict, Mapping, Optional

from config.settings import ValidatorSettings
from form_validation.errors import ConfigError
from form_validation.fields import BaseFieldConfig, RepeatPasswordFieldConfig, parse_form_config
from form_validation import rules

logger = logging.getLogger(__name__)


class FieldValidator:
    """
    Owns a form's field configuration, value store and error store.

    values always holds exactly the configured keys. errors is filled per
    field by update(), replaced wholesale by validate_all(), emptied by reset().
    """

    def __init__(self, config: Mapping[str, Any], strict_config: bool = False):
        self.config: Dict[str, BaseFieldConfig] = parse_form_config(config)

        if not self.config:
            raise ConfigError("Form config must declare at least one field.")

        self._check_match_fields(strict_config)

        self._initial_values: Dict[str, str] = {name: "" for name in self.config}
        self._values: Dict[str, str] = dict(self._initial_values)
        self._errors: Dict[str, Optional[str]] = {}

    @classmethod
    def create(
        cls, config: Mapping[str, Any], settings: Optional[ValidatorSettings] = None
    ) -> "FieldValidator":
        settings = settings or ValidatorSettings.from_env()
        return cls(config, strict_config=settings.strict_config)

    def _check_match_fields(self, strict: bool) -> None:
        for name, field in self.config.items():
            if not isinstance(field, RepeatPasswordFieldConfig):
                continue
            if field.target in self.config:
                continue
            if strict:
                raise ConfigError(
                    f"Field '{name}' must match '{field.target}', which is not a declared field."
                )
            logger.warning(
                "Field %r matches undeclared field %r; non-empty values will never match.",
                name,
                field.target,
            )

    @property
    def values(self) -> Dict[str, str]:
        return dict(self._values)

    @property
    def errors(self) -> Dict[str, Optional[str]]:
        return dict(self._errors)

    def validate_field(self, name: str, value: str) -> Optional[str]:
        return rules.validate_field(self.config, name, value, self._values)

    def update(self, name: str, value: str) -> None:
        if name not in self.config:
            logger.debug("Ignoring update for unknown field %r", name)
            return

        self._values[name] = value
        self._errors[name] = self.validate_field(name, value)
        logger.debug("Updated %r, error=%r", name, self._errors[name])

    def validate_all(self) -> bool:
        self._errors, valid = rules.validate_all(self.config, self._values)
        logger.debug(
            "Validated %d fields, valid=%s", len(self._errors), valid
        )
        return valid

    def reset(self) -> None:
        self._values = dict(self._initial_values)
        self._errors = {}

    def set_values(self, values: Mapping[str, str]) -> None:
        """Overwrite stored values without validating them. Unknown keys are ignored."""
        for name, value in values.items():
            if name in self.config:
                self._values[name] = value

    def set_errors(self, errors: Mapping[str, Optional[str]]) -> None:
        """Replace the error store. Unknown keys are ignored."""
        self._errors = {name: error for name, error in errors.items() if name in self.config}
