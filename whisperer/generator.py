"""
Generation orchestrator.

One chat completion per request (no retries). Any GenerationFailure is
logged and, unless the caller opts out, replaced by local fallback copy.
"""

import json
import logging
import random
import time
import uuid
from typing import Any, Dict, List, Optional

import httpx
import openai
from openai import OpenAI

from . import config
from .errors import (
    EmptyResultError,
    GenerationFailure,
    MalformedResponseError,
    ServiceUnavailableError,
    TransportError,
)
from .fallback import build_fallback
from .models import GeneratedArgument, GenerationRequest, GenerationResult
from .prompt import build_prompt

logger = logging.getLogger(__name__)


def get_client() -> OpenAI:
    """Create an OpenAI client, or raise ServiceUnavailableError if no key is configured."""
    api_key = config.get_api_key()
    if not api_key:
        logger.error("OPENAI_CLIENT_UNAVAILABLE reason=missing_api_key")
        raise ServiceUnavailableError()
    timeout = config.get_timeout()
    if timeout is None:
        return OpenAI(api_key=api_key)
    return OpenAI(api_key=api_key, timeout=timeout)


def build_user_content(request: GenerationRequest) -> List[Dict[str, Any]]:
    content: List[Dict[str, Any]] = [{"type": "text", "text": build_prompt(request)}]
    if request.image_present:
        content.append({"type": "image_url", "image_url": {"url": request.image_data_url}})
    return content


def parse_variants(content: Optional[str]) -> List[str]:
    """
    Parse the model's JSON body and return its variants.

    Raises:
        MalformedResponseError: body is not a JSON object.
        EmptyResultError: "variants" is missing, not a list, or has no usable first entry.
    """
    try:
        parsed = json.loads(content or "{}")
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"Response is not valid JSON: {e}") from e
    if not isinstance(parsed, dict):
        raise MalformedResponseError(f"Response JSON is {type(parsed).__name__}, expected object")

    variants = parsed.get("variants")
    if not isinstance(variants, list) or len(variants) < 1:
        raise EmptyResultError("No variants returned.")
    first = variants[0]
    if not isinstance(first, str) or not first.strip():
        raise EmptyResultError("First variant is empty.")
    return variants


def request_variant(client: OpenAI, request: GenerationRequest, request_id: str = "-") -> str:
    """Make the single completion call and return the first variant."""
    model = config.get_model()
    t0 = time.time()
    logger.info(f"OPENAI_CALL_START request_id={request_id} model={model} image={request.image_present}")
    try:
        completion = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": config.SYSTEM_MESSAGE},
                {"role": "user", "content": build_user_content(request)},
            ],
            response_format={"type": "json_object"},
            temperature=config.get_temperature(),
        )
    except (openai.OpenAIError, httpx.HTTPError) as e:
        elapsed_ms = int((time.time() - t0) * 1000)
        logger.error(f"OPENAI_CALL_ERROR request_id={request_id} elapsed_ms={elapsed_ms} err={e}")
        raise TransportError(f"OpenAI request failed: {e}") from e

    elapsed_ms = int((time.time() - t0) * 1000)
    choices = getattr(completion, "choices", None) or []
    content = choices[0].message.content if choices else None
    logger.info(f"OPENAI_CALL_END request_id={request_id} elapsed_ms={elapsed_ms} raw_len={len(content or '')}")

    variants = parse_variants(content)
    if len(variants) > 1:
        logger.info(f"VARIANTS_TRIMMED request_id={request_id} returned={len(variants)} kept=1")
    return variants[0].strip()


def generate_argument(
    request: GenerationRequest,
    client: Optional[OpenAI] = None,
    fallback: bool = True,
    rng: Optional[random.Random] = None,
    request_id: Optional[str] = None,
) -> GenerationResult:
    """
    Produce one argument for a validated request.

    Args:
        request: The structured feature request.
        client: OpenAI client; created from the environment when omitted.
        fallback: When False, GenerationFailure is re-raised instead of
            being replaced by local copy.
        rng: Random source for fallback phrase selection.
        request_id: Correlation id for log lines.

    Raises:
        ValidationError: feature shorter than 3 characters (no call made).
        ServiceUnavailableError: no API key configured (no call made).
        GenerationFailure: only when fallback=False.
    """
    request.validate()
    rid = request_id or str(uuid.uuid4())
    if client is None:
        client = get_client()

    logger.info(f"GENERATE_START request_id={rid} length={request.length} image={request.image_present}")
    try:
        text = request_variant(client, request, request_id=rid)
    except GenerationFailure as e:
        logger.error(f"GENERATE_FAILED request_id={rid} reason={type(e).__name__} err={e.message}")
        if not fallback:
            raise
        text = build_fallback(request, rng=rng)
        logger.warning(f"GENERATE_FALLBACK request_id={rid} reason={type(e).__name__}")
        return GenerationResult(GeneratedArgument(text), error=e)

    logger.info(f"GENERATE_DONE request_id={rid} chars={len(text)}")
    return GenerationResult(GeneratedArgument(text))
