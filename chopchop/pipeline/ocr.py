"""
Text extraction — a single Tesseract pass over the uploaded receipt image.
"""
from __future__ import annotations

import io
import logging
from dataclasses import dataclass

import pytesseract
from PIL import Image, UnidentifiedImageError

from chopchop.config import settings
from chopchop.errors import OcrFailure

logger = logging.getLogger(__name__)


@dataclass
class ReceiptImage:
    data: bytes
    mime_type: str = "image/jpeg"


def extract_text(image: ReceiptImage, lang: str | None = None) -> str:
    """Return the recognized text, raising ``OcrFailure`` if there is none."""
    try:
        img = Image.open(io.BytesIO(image.data))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        logger.warning("Cannot open %s image: %s", image.mime_type, e)
        raise OcrFailure(f"Cannot read the uploaded image: {e}") from e

    # Palette/CMYK modes confuse Tesseract
    if img.mode not in ("RGB", "L", "RGBA"):
        img = img.convert("RGB")

    text = pytesseract.image_to_string(img, lang=lang or settings.OCR_LANG)
    if not text.strip():
        logger.warning("OCR produced no text (%d bytes in)", len(image.data))
        raise OcrFailure("No text extracted from the image.")

    logger.info("OCR extracted %d characters", len(text))
    return text
