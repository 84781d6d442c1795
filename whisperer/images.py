"""
Image intake for the optional feature screenshot.

Server side: decide whether a client-supplied data URL is forwarded to the model.
Client side: turn a local image file into a data URL, with the same limits the web form applies.
"""

import base64
import binascii
import io
import logging
import os
from typing import Optional, Tuple

from PIL import Image

from . import config
from .errors import ValidationError

logger = logging.getLogger(__name__)

DATA_URL_PREFIX = "data:image/"


def _split_data_url(value: str) -> Tuple[str, str]:
    """Return (header, payload) for 'data:image/png;base64,<payload>'."""
    header, sep, payload = value.partition(",")
    if not sep:
        raise ValueError("data URL has no payload")
    if ";base64" not in header:
        raise ValueError("data URL is not base64-encoded")
    return header, payload


def decode_data_url(value: str) -> bytes:
    _, payload = _split_data_url(value)
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"invalid base64 payload: {e}") from e


def accept_image_data_url(value, max_bytes: Optional[int] = None) -> Optional[str]:
    """
    Return the data URL if it should be forwarded to the model, else None.

    Anything that is not a decodable image under the size limit is ignored so
    the request behaves exactly like one without an image.
    """
    if not value:
        return None
    if not isinstance(value, str) or not value.startswith(DATA_URL_PREFIX):
        logger.warning("IMAGE_IGNORED reason=not_image_data_url")
        return None

    limit = max_bytes if max_bytes is not None else config.get_max_image_bytes()
    try:
        raw = decode_data_url(value)
    except ValueError as e:
        logger.warning(f"IMAGE_IGNORED reason=decode_failed err={e}")
        return None
    if len(raw) > limit:
        logger.warning(f"IMAGE_IGNORED reason=too_large bytes={len(raw)} limit={limit}")
        return None

    try:
        with Image.open(io.BytesIO(raw)) as img:
            img.verify()
            fmt = img.format
    except Exception as e:
        logger.warning(f"IMAGE_IGNORED reason=not_an_image err={e}")
        return None

    logger.info(f"IMAGE_ACCEPTED format={fmt} bytes={len(raw)}")
    return value


def image_to_data_url(path: str, max_bytes: Optional[int] = None) -> str:
    """Read a local image file and return it as a base64 data URL."""
    limit = max_bytes if max_bytes is not None else config.get_max_image_bytes()
    with open(path, "rb") as f:
        raw = f.read()

    try:
        with Image.open(io.BytesIO(raw)) as img:
            fmt = img.format
    except Exception as e:
        logger.warning(f"IMAGE_REJECTED path={os.path.basename(path)} err={e}")
        raise ValidationError("Please upload an image file.") from e
    mime = Image.MIME.get(fmt or "")
    if not mime or not mime.startswith("image/"):
        raise ValidationError("Please upload an image file.")

    if len(raw) > limit:
        raise ValidationError(f"Image too large. Please use a file under {limit // (1024 * 1024)}MB.")

    encoded = base64.b64encode(raw).decode("ascii")
    return f"data:{mime};base64,{encoded}"
