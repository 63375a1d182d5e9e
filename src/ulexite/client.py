"""
Thin boundary around an OpenAI-compatible chat completion endpoint.

Sampling is pinned (temperature 0, top-p 0.95, fixed seed) so that the same
input tends to produce the same summary.
"""

import openai

from ulexite.errors import CompletionError
from ulexite.log import log_error

# ─── defaults ───────────────────────────────────────────────────────────────
DEF_ENDPOINT = "http://localhost:8080/v1"
DEF_MODEL = "default"
PLACEHOLDER_KEY = "sk-no-key-required"  # local servers don't check it
SEED = 420
TEMPERATURE = 0.0
TOP_P = 0.95
STOP = ["</s>"]
SMALLEST_FLOAT32 = 1.401298464324817e-45
# ────────────────────────────────────────────────────────────────────────────


def no_omit_float(f: float) -> float:
    """Some transports drop zero-valued sampling params; nudge them off zero."""
    if f == 0.0:
        return SMALLEST_FLOAT32
    return f


def make_client(endpoint: str = DEF_ENDPOINT, api_key: str | None = None) -> openai.OpenAI:
    return openai.OpenAI(base_url=endpoint, api_key=api_key or PLACEHOLDER_KEY)


def query(client, system_message: str, user_message: str, *, max_tokens: int, model: str = DEF_MODEL) -> str:
    """Send one system+user exchange and return the trimmed reply text."""
    try:
        resp = client.chat.completions.create(
            model=model,
            temperature=no_omit_float(TEMPERATURE),
            top_p=no_omit_float(TOP_P),
            max_tokens=max_tokens,
            seed=SEED,
            stop=STOP,
            messages=[
                {"role": "system", "content": system_message},
                {"role": "user", "content": user_message},
            ],
        )
    except openai.OpenAIError as e:
        log_error(f"ChatCompletion error: {e}")
        raise CompletionError(str(e)) from e

    choices = getattr(resp, "choices", None)
    if not choices:
        raise CompletionError("completion response contained no choices")
    content = choices[0].message.content
    if content is None:
        raise CompletionError("completion response contained no message content")
    return content.strip()
