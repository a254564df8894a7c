"""Render and publish API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel

from models.config import Configuration, DiffyType, FormatType, RenderOptions
from services.diffy import post_to_diffy
from services.errors import ParseError, ReadError, RemoteError, TemplateNotFoundError
from services.output import get_output

router = APIRouter()

MEDIA_TYPES = {
    FormatType.HTML: "text/html",
    FormatType.JSON: "application/json",
}


class RenderRequest(BaseModel):
    """Request to render a unified diff"""

    diff: str
    format: FormatType = FormatType.HTML
    options: RenderOptions = RenderOptions()
    title: str | None = None
    commit_message: str = ""
    show_files_open: bool = False
    file_content_toggle: bool = True
    synchronised_scroll: bool = True
    highlight_code: bool = True


class DiffyRequest(BaseModel):
    """Request to publish a diff to diffy.org"""

    diff: str


class DiffyResponse(BaseModel):
    url: str


def build_configuration(request: RenderRequest) -> Configuration:
    config = Configuration(
        format_type=request.format,
        commit_message=request.commit_message,
        show_files_open=request.show_files_open,
        file_content_toggle=request.file_content_toggle,
        synchronised_scroll=request.synchronised_scroll,
        highlight_code=request.highlight_code,
    )
    if request.title:
        config.page_title = request.title
        config.page_header = request.title
    return config


@router.post("")
def render(request: RenderRequest) -> Response:
    """Render a diff to a standalone HTML page or to the JSON diff model"""
    config = build_configuration(request)

    try:
        output = get_output(request.options, config, request.diff)
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except (ParseError, ReadError) as e:
        raise HTTPException(status_code=400, detail=e.message)

    return Response(content=output, media_type=MEDIA_TYPES[request.format])


@router.post("/diffy", response_model=DiffyResponse)
async def publish(request: DiffyRequest) -> DiffyResponse:
    """Publish a diff to diffy.org and return its link"""
    if not request.diff.strip():
        raise HTTPException(status_code=400, detail="Diff is required")

    try:
        url = await post_to_diffy(request.diff, DiffyType.PRINT)
    except RemoteError as e:
        raise HTTPException(status_code=502, detail=e.message)

    return DiffyResponse(url=url)
