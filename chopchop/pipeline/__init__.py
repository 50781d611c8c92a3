"""
ChopChop core pipelines.

Scan:    OCR → LLM item extraction (via relay) → normalize → batched insert.
Recipes: fridge names → LLM recipe prompt (via relay) → split per recipe.

Stages run strictly in sequence; any stage failure aborts the run.
"""
import logging
from datetime import datetime
from typing import Callable, Iterable, Optional

from chopchop.errors import NoAuthenticatedUser
from chopchop.pipeline.bridge import LlmBridge
from chopchop.pipeline.normalizer import parse_items, split_recipes
from chopchop.pipeline.ocr import ReceiptImage, extract_text
from chopchop.pipeline.writer import InventoryWriter
from chopchop.schemas import RecipeResponse, ScanResponse

logger = logging.getLogger(__name__)


def scan_receipt(
    image: ReceiptImage,
    user_id: Optional[str],
    bridge: LlmBridge,
    writer: InventoryWriter,
    ocr: Callable[[ReceiptImage], str] = extract_text,
    now: Optional[datetime] = None,
) -> ScanResponse:
    """Run the full receipt ingestion pipeline for one uploaded image."""
    # Identity is checked before OCR and the LLM call
    if not user_id:
        raise NoAuthenticatedUser()

    logger.info("Scan start — OCR (%s, %d bytes)", image.mime_type, len(image.data))
    text = ocr(image)

    logger.info("Scan — LLM item extraction")
    raw = bridge.extract_items(text)

    logger.info("Scan — normalize")
    items = parse_items(raw)
    logger.info("Normalized %d items", len(items))

    logger.info("Scan — write inventory")
    records = writer.write(user_id, items, now=now)
    return ScanResponse(items=items, records=records)


def generate_recipes(
    ingredients: Iterable[str],
    filters: Iterable[str],
    bridge: LlmBridge,
    count: int = 3,
) -> RecipeResponse:
    """Ask for *count* recipes built from *ingredients* and split the reply."""
    ingredients = list(ingredients)
    filters = list(filters)
    logger.info(
        "Recipes start — %d ingredients, filters=%s", len(ingredients), filters or "any"
    )
    markdown = bridge.suggest_recipes(ingredients, filters, count)
    recipes = split_recipes(markdown)
    logger.info("Recipes — split into %d blocks", len(recipes))
    return RecipeResponse(ingredients=ingredients, recipes=recipes)
