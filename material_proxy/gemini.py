# created: 10/19/2026
# last updated: 10/19/2026
# functions on the prompt to gemini

import json
import logging
import re
from typing import Any, Callable, Dict, Optional

import requests

from material_proxy.config import Settings
from material_proxy.errors import ErrorKind, ProxyError
from material_proxy.recommendation import validate_recommendation

logger = logging.getLogger(__name__)

#-----------------------------------------------------------------
# prompt
#-----------------------------------------------------------------
SYSTEM_PROMPT = """You are an expert material scientist specializing in polymers.
For a given product, identify the single most suitable plastic material and its common grade.
Then, list its key advantages and disadvantages for that specific application.
Respond ONLY with a JSON object in the following format, with no extra text or explanations. The response must be in Persian:
{
  "material": "نام ماده (فرمول شیمیایی)",
  "grade": "نام گرید رایج",
  "advantages": ["مزیت اول", "مزیت دوم", "..."],
  "disadvantages": ["عیب اول", "عیب دوم", "..."]
}"""


def build_payload(query: str) -> Dict[str, Any]:
    return {
        "contents": [{"parts": [{"text": f'Product: "{query}"'}]}],
        "systemInstruction": {"parts": [{"text": SYSTEM_PROMPT}]},
        "generationConfig": {"responseMimeType": "application/json"},
    }


#-----------------------------------------------------------------
# reading the answer
#-----------------------------------------------------------------
def strip_code_fences(text: str) -> str:
    s = text.strip()

    # Remove leading ```... language fences
    # e.g. ```json\n or ```\n
    s = re.sub(r"^```[a-zA-Z]*\s*", "", s)

    # Remove trailing ```
    s = re.sub(r"\s*```$", "", s)

    return s


def extract_answer_text(envelope: Any) -> str:
    try:
        text = envelope["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise ProxyError(
            ErrorKind.MALFORMED_UPSTREAM_PAYLOAD,
            f"unexpected envelope shape: {e!r}")
    if not isinstance(text, str):
        raise ProxyError(ErrorKind.MALFORMED_UPSTREAM_PAYLOAD, "candidate text is not a string")
    return text


def parse_answer(text: str) -> Dict[str, Any]:
    try:
        data = json.loads(strip_code_fences(text))
    except ValueError as e:
        raise ProxyError(
            ErrorKind.MALFORMED_UPSTREAM_PAYLOAD,
            f"candidate text is not valid JSON: {e}")
    rec = validate_recommendation(data)
    logger.info("Gemini recommended %s (%s)", rec.material, rec.grade)
    return data


#-----------------------------------------------------------------
# the one outbound call
#-----------------------------------------------------------------
def ask_gemini(query: str, settings: Settings,
               post: Optional[Callable[..., requests.Response]] = None) -> Dict[str, Any]:
    """Ask Gemini for a material recommendation for `query`.

    Returns the parsed answer object exactly as the model produced it.
    Raises ProxyError for a rejected call, a transport failure or a
    malformed answer. Nothing is retried.
    """
    post = post or requests.post

    try:
        resp = post(
            settings.endpoint,
            params={"key": settings.api_key},
            headers={"Content-Type": "application/json"},
            data=json.dumps(build_payload(query)),
            timeout=settings.timeout_seconds,
        )
    except requests.RequestException as e:
        raise ProxyError(ErrorKind.TRANSPORT, f"{type(e).__name__}: {e}")

    if not resp.ok:
        logger.error("Gemini API error (%s): %s", resp.status_code, resp.text)
        raise ProxyError(
            ErrorKind.UPSTREAM_REJECTED,
            f"upstream status {resp.status_code}",
            status=resp.status_code)

    try:
        envelope = resp.json()
    except ValueError as e:
        raise ProxyError(ErrorKind.MALFORMED_UPSTREAM_PAYLOAD, f"envelope is not JSON: {e}")

    return parse_answer(extract_answer_text(envelope))
