"""Diff API endpoints"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool

from models.diff import DiffRequest, DiffResult, PatchRequest, SideBySideResult, ViewMode
from services.config_manager import ConfigManager
from services.diff_engine import DiffEngine, generate_patch, render_unified_text

router = APIRouter()


def get_engine() -> DiffEngine:
    """Build an engine from the current diff settings"""
    settings = ConfigManager.get_instance().get_diff_settings()
    return DiffEngine.from_settings(settings)


# Large inputs can take up to the diff budget, so every computation runs in
# the threadpool instead of on the event loop.


@router.post("/unified", response_model=DiffResult, response_model_exclude_none=True)
async def unified_diff(request: DiffRequest) -> DiffResult:
    """Unified view: one list with old and new line numbers"""
    engine = get_engine()
    return await run_in_threadpool(engine.compute, ViewMode.UNIFIED, request.old_text, request.new_text)


@router.post("/side-by-side", response_model=SideBySideResult, response_model_exclude_none=True)
async def side_by_side_diff(request: DiffRequest) -> SideBySideResult:
    """Side-by-side view: two gap-padded columns"""
    engine = get_engine()
    return await run_in_threadpool(engine.compute, ViewMode.SIDE_BY_SIDE, request.old_text, request.new_text)


@router.post("/inline", response_model=DiffResult, response_model_exclude_none=True)
async def inline_diff(request: DiffRequest) -> DiffResult:
    """Inline view: modified lines are merged into one annotated line"""
    engine = get_engine()
    return await run_in_threadpool(engine.compute, ViewMode.INLINE, request.old_text, request.new_text)


@router.post("/render")
async def render_diff(request: DiffRequest) -> dict[str, str]:
    """Unified view as prefixed plain text"""
    engine = get_engine()
    result = await run_in_threadpool(engine.unified, request.old_text, request.new_text)
    return {"text": render_unified_text(result)}


@router.post("/patch")
async def patch_diff(request: PatchRequest) -> dict[str, str]:
    """Standard unified patch"""
    patch = await run_in_threadpool(
        generate_patch,
        request.old_text,
        request.new_text,
        request.from_file,
        request.to_file,
        request.context_lines,
    )
    return {"patch": patch}
