import logging

from langgraph.checkpoint.memory import InMemorySaver

from config.settings import ValidatorSettings
from form_validation.graph import FormGraphFactory
from form_validation.validator import FieldValidator

SIGNUP_FORM = {
    "name": {"type": "text", "label": "Name", "required": True, "minLength": 2, "maxLength": 40},
    "email": {"type": "email", "label": "Email", "required": True},
    "password": {
        "type": "password",
        "label": "Password",
        "required": True,
        "minLength": 8,
        "minSpecialChars": 1,
        "minUppercase": 1,
        "minNumbers": 2,
    },
    "repeatPassword": {"type": "repeatPassword", "label": "Repeat password", "required": True},
    "phone": {"type": "number", "label": "Phone", "minLength": 10, "maxLength": 10},
}


def main():
    settings = ValidatorSettings.from_env()
    logging.basicConfig(level=settings.log_level)

    patches = [
        {"changes": {"name": "K", "email": "khushi@gmail", "password": "secret"}},
        {"changes": {"name": "Khushi", "email": "khushi@gmail.com", "password": "Secret12!"}},
        {"changes": {"repeatPassword": "Secret12!", "phone": "9999999999"}, "submit": True},
    ]

    config = {"configurable": {"thread_id": "signup_demo_1"}}

    # build validator + graph
    validator = FieldValidator.create(SIGNUP_FORM, settings=settings)
    graph = FormGraphFactory(validator).compile(checkpointer=InMemorySaver())

    for i, patch in enumerate(patches, 1):
        graph.invoke(patch, config)
        snapshot = graph.get_state(config).values
        print(f"\nINVOKE #{i}")
        print("errors:", snapshot["errors"])

    latest = graph.get_state(config).values
    print("\nvalid:", latest["valid"], "completed:", latest["completed"])


if __name__ == "__main__":
    main()
