from typing import Callable, Any

PROMPTS: dict[str, Callable[..., str]] = {}

def register(kind: str):
    def deco(fn: Callable[..., str]):
        PROMPTS[kind] = fn
        return fn
    return deco

def get_prompt_builder(kind: str) -> Callable[..., str]:
    if kind not in PROMPTS:
        raise KeyError(f"Unknown prompt kind: {kind}. Known: {list(PROMPTS.keys())}")
    return PROMPTS[kind]

def build_prompt(kind: str, payload: Any) -> str:
    return get_prompt_builder(kind)(payload)
