from typing import Dict, Optional
from pydantic import BaseModel, Field


class FormSessionState(BaseModel):
    values: Dict[str, str] = Field(default_factory=dict, description="Current field values")
    errors: Dict[str, Optional[str]] = Field(default_factory=dict, description="Current field errors")

    changes: Dict[str, str] = Field(default_factory=dict, description="Pending field changes")
    submit: bool = Field(default=False, description="Run a full validation pass")
    reset: bool = Field(default=False, description="Restore the initial values first")

    valid: Optional[bool] = Field(default=None, description="Result of the last full pass")
    completed: bool = False
