"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any, Literal

from fastapi import APIRouter
from pydantic import BaseModel

from models.config import ColorScheme, DiffStyle, FormatType
from services.config_manager import ConfigManager

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update stored defaults, only provided fields change"""

    style: Literal["line", "side"] | None = None
    color_scheme: ColorScheme | None = None
    summary: Literal["closed", "open", "hidden"] | None = None
    diff_style: DiffStyle | None = None
    file_content_toggle: bool | None = None
    synchronised_scroll: bool | None = None
    highlight_code: bool | None = None
    max_line_length_highlight: int | None = None
    format: FormatType | None = None
    ignore: list[str] | None = None


@router.get("")
async def get_config() -> dict[str, Any]:
    """Get current configuration"""
    return ConfigManager.get_instance().get_config()


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    current_config.update(request.model_dump(mode="json", exclude_none=True))
    config_manager.save_config(current_config)

    return {"status": "success", "message": "Configuration updated"}
