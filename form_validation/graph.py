from typing import Any, Dict, Literal, Optional
from langgraph.graph import StateGraph, START, END

from form_validation import rules
from form_validation.state import FormSessionState
from form_validation.validator import FieldValidator


class FormGraphFactory:
    """
    Builds a form session graph around a validator's field configuration.

    Every invoke applies pending changes with update() semantics and, when
    submit is set, runs a full pass. Sessions live in the checkpointer, one
    per thread_id; the validator's own stores are never touched.
    """

    def __init__(self, validator: FieldValidator):
        self.validator = validator

    def initial_values(self) -> Dict[str, str]:
        return {name: "" for name in self.validator.config}

    def collect_node(self, state: FormSessionState) -> Dict[str, Any]:
        config = self.validator.config

        if state.reset or not state.values:
            values = self.initial_values()
            errors: Dict[str, Optional[str]] = {}
        else:
            values = dict(state.values)
            errors = dict(state.errors)

        for name, value in state.changes.items():
            if name not in config:
                continue
            values[name] = value
            errors[name] = rules.validate_field(config, name, value, values)

        return {
            "values": values,
            "errors": errors,
            "changes": {},
            "reset": False,
            "completed": False,
        }

    def validate_node(self, state: FormSessionState) -> Dict[str, Any]:
        if not state.submit:
            return {"valid": None}

        errors, valid = rules.validate_all(self.validator.config, state.values)
        return {"errors": errors, "valid": valid, "submit": False}

    @staticmethod
    def should_complete(state: FormSessionState) -> Literal["end", "complete"]:
        return "complete" if state.valid else "end"

    @staticmethod
    def complete_node(state: FormSessionState) -> Dict[str, Any]:
        """
        Final point. Only reached after a full pass with no errors.
        """
        return {"completed": True}

    def build(self) -> StateGraph:
        g = StateGraph(FormSessionState)

        g.add_node("collect", self.collect_node)
        g.add_node("validate", self.validate_node)
        g.add_node("complete", self.complete_node)

        g.add_edge(START, "collect")
        g.add_edge("collect", "validate")

        g.add_conditional_edges(
            "validate",
            self.should_complete,
            {"end": END, "complete": "complete"},
        )
        g.add_edge("complete", END)

        return g

    def compile(self, checkpointer: Any = None):
        return self.build().compile(checkpointer=checkpointer)
