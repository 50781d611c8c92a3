"""
Pipeline endpoints.

POST /api/scan     — receipt image → fridge rows
POST /api/recipes  — fridge contents → markdown recipe blocks
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from chopchop.config import settings
from chopchop.deps import get_bridge, get_store, require_user_id
from chopchop.errors import PipelineError
from chopchop.pipeline import generate_recipes, scan_receipt
from chopchop.pipeline.bridge import LlmBridge
from chopchop.pipeline.ocr import ReceiptImage
from chopchop.pipeline.writer import InventoryWriter
from chopchop.schemas import RecipeRequest, RecipeResponse, ScanResponse
from chopchop.store import InventoryStore

logger = logging.getLogger(__name__)
router = APIRouter()


# ── POST /api/scan ───────────────────────────────────────────────────────
@router.post("/scan", response_model=ScanResponse)
def scan(
    file: UploadFile = File(...),
    user_id: str = Depends(require_user_id),
    store: InventoryStore = Depends(get_store),
    bridge: LlmBridge = Depends(get_bridge),
):
    content_type = file.content_type or "application/octet-stream"
    if not content_type.startswith("image/"):
        raise HTTPException(status_code=400, detail="Upload must be an image")
    data = file.file.read()
    if not data:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")

    logger.info("Scan: file=%s  type=%s  size=%d", file.filename, content_type, len(data))
    try:
        return scan_receipt(
            ReceiptImage(data=data, mime_type=content_type),
            user_id,
            bridge,
            InventoryWriter(store),
        )
    except PipelineError as e:
        logger.warning("Scan failed (%s): %s", type(e).__name__, e)
        raise HTTPException(status_code=e.status_code, detail=str(e))


# ── POST /api/recipes ────────────────────────────────────────────────────
@router.post("/recipes", response_model=RecipeResponse)
def recipes(
    req: RecipeRequest,
    user_id: str = Depends(require_user_id),
    store: InventoryStore = Depends(get_store),
    bridge: LlmBridge = Depends(get_bridge),
):
    ingredients = store.item_names(user_id)
    if not ingredients:
        raise HTTPException(status_code=400, detail="Your fridge is empty")

    try:
        return generate_recipes(
            ingredients,
            [f.value for f in req.filters],
            bridge,
            count=settings.RECIPE_COUNT,
        )
    except PipelineError as e:
        logger.warning("Recipe generation failed (%s): %s", type(e).__name__, e)
        raise HTTPException(status_code=e.status_code, detail=str(e))
