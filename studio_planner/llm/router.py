"""
LLM call wrapper and it does:
- Sends prompts to the Gemini generateContent endpoint
- Returns the plain text of the first candidate
- Handles retries on transient errors

Main purpose:
Central interface for all model calls.
"""


import asyncio
import httpx

from studio_planner.core.config import settings
from studio_planner.core.logging import get_logger

log = get_logger("llm.router")


class LLMError(RuntimeError):
    pass


def _safe_snippet(text: str, n: int = 400) -> str:
    return (text or "")[:n].replace("\n", "\\n").replace("\r", "\\r")


def _candidate_text(data: dict) -> str:
    try:
        parts = data["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        raise LLMError(f"Unexpected Gemini response: {_safe_snippet(str(data))}")
    return "".join(p.get("text", "") for p in parts)


async def _gemini_generate(prompt: str) -> str:
    if not settings.GEMINI_API_KEY:
        raise LLMError("Missing GEMINI_API_KEY. Put it in your .env")

    url = f"{settings.GEMINI_BASE_URL.rstrip('/')}/models/{settings.LLM_MODEL}:generateContent"
    headers = {"x-goog-api-key": settings.GEMINI_API_KEY}
    payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

    timeout = httpx.Timeout(60.0, connect=10.0)

    last_err: Exception | None = None
    for attempt in range(3):
        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                r = await client.post(url, headers=headers, json=payload)
        except httpx.HTTPError as e:
            last_err = e
            backoff = 0.6 * (2**attempt)
            log.warning(f"Gemini call failed: {e}. retrying in {backoff:.1f}s (attempt {attempt+1}/3)")
            await asyncio.sleep(backoff)
            continue

        # Retry transient errors
        if r.status_code in (429, 500, 502, 503, 504):
            msg = f"Gemini transient {r.status_code}: {_safe_snippet(r.text)}"
            last_err = LLMError(msg)
            backoff = 0.6 * (2**attempt)
            log.warning(f"{msg}. retrying in {backoff:.1f}s (attempt {attempt+1}/3)")
            await asyncio.sleep(backoff)
            continue

        if r.status_code >= 400:
            raise LLMError(f"Gemini error {r.status_code}: {_safe_snippet(r.text)}")

        return _candidate_text(r.json())

    raise LLMError(f"Gemini call failed after retries: {last_err}")


def _mock_text(prompt: str) -> str:
    if "separated by the \"|\" character" in prompt:
        return "Mock suggestion one|Mock suggestion two|Mock suggestion three"
    return "# Mock Report\n\nGenerated without an LLM key.\n\n- " + _safe_snippet(prompt, 120)


async def llm_text(prompt: str) -> str:
    """
    Sends one prompt and returns the model text.
    Raises LLMError when the provider keeps failing.
    """
    provider = (settings.LLM_PROVIDER or "").lower().strip()

    if provider == "mock":
        return _mock_text(prompt)

    if provider != "gemini":
        raise LLMError(f"Unsupported LLM_PROVIDER={settings.LLM_PROVIDER}. Use gemini or mock.")

    return await _gemini_generate(prompt)
