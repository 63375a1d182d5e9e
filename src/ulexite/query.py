"""Send one free-text message straight to the completion service."""

from ulexite.client import DEF_MODEL, query
from ulexite.log import log_warning
from ulexite.personas import DEFAULT_PERSONA, PERSONAS

QUERY_MAX_TOKENS = 1024


def read_message(arg, stdin) -> str:
    """Positional message, or all of stdin when it is missing or '-'."""
    if arg is None or arg == "" or arg == "-":
        return stdin.read()
    return arg


def persona_instruction(name: str, personas=PERSONAS) -> str:
    """Unknown personas give an empty instruction, not an error."""
    instruction = personas.get(name)
    if instruction is None:
        log_warning(f"unknown persona '{name}', sending no system instruction")
        return ""
    return instruction


def run_query(client, message: str, *, persona: str = DEFAULT_PERSONA, personas=PERSONAS, model: str = DEF_MODEL) -> str:
    return query(
        client,
        persona_instruction(persona, personas),
        message,
        max_tokens=QUERY_MAX_TOKENS,
        model=model,
    )
