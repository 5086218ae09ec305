import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class ValidatorSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    strict_config: bool = False
    log_level: LogLevel = "INFO"

    @classmethod
    def from_env(cls) -> "ValidatorSettings":
        return cls(
            strict_config=os.getenv("FORM_VALIDATION_STRICT_CONFIG", "false"),
            log_level=os.getenv("FORM_VALIDATION_LOG_LEVEL", "INFO").upper(),
        )
