"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from services.config_manager import ConfigManager, is_valid_timeout

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    diff: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    diff: dict
    server: dict


def validate_diff_settings(settings: dict[str, Any]) -> dict[str, Any]:
    """Check a "diff" section; raises HTTPException on bad values"""
    if "timeout" in settings and not is_valid_timeout(settings["timeout"]):
        raise HTTPException(status_code=400, detail="timeout must be a non-negative number")
    return settings


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        diff=config.get("diff", {}),
        server=config.get("server", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    if request.diff:
        validate_diff_settings(request.diff)
        current_config["diff"] = {**current_config.get("diff", {}), **request.diff}

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"status": "success", "message": "Configuration updated"}
