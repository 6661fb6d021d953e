from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from app.database.supabase_client import get_supabase
from app.modules.prompts.schemas import PromptWithTagsResponse
from app.modules.prompts.service import PromptService
from app.core.errors import NotFound
from app.core.sanitizer import render_markdown
from supabase import Client
import html
import logging

logger = logging.getLogger(__name__)

# JSON lookup, mounted under /api/v1
router = APIRouter(prefix="/public", tags=["public"])

# Shareable page, mounted at the site root
page_router = APIRouter(tags=["public"])

PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<article>
<h1>{title}</h1>
{tags}
{body}
</article>
</body>
</html>
"""

NOT_FOUND_PAGE = """<!doctype html>
<html lang="en">
<head><meta charset="utf-8"><title>Prompt not found</title></head>
<body><h1>Prompt not found</h1><p>This link is invalid or the prompt is no longer public.</p></body>
</html>
"""


def get_prompt_service(supabase: Client = Depends(get_supabase)) -> PromptService:
    return PromptService(supabase)


@router.get("/prompts/{slug}", response_model=PromptWithTagsResponse)
async def get_public_prompt(
    slug: str,
    service: PromptService = Depends(get_prompt_service)
):
    """Unauthenticated lookup of a public prompt by slug"""
    return service.get_prompt_by_slug(slug)


def render_prompt_page(prompt: PromptWithTagsResponse) -> str:
    tags = ""
    if prompt.tags:
        tags = "<ul>" + "".join(f"<li>{html.escape(t.name)}</li>" for t in prompt.tags) + "</ul>"
    return PAGE_TEMPLATE.format(
        title=html.escape(prompt.title),
        tags=tags,
        body=render_markdown(prompt.body_md)
    )


@page_router.get("/p/{slug}", response_class=HTMLResponse)
async def public_prompt_page(
    slug: str,
    service: PromptService = Depends(get_prompt_service)
):
    try:
        prompt = service.get_prompt_by_slug(slug)
    except NotFound:
        return HTMLResponse(NOT_FOUND_PAGE, status_code=404)
    return HTMLResponse(render_prompt_page(prompt))
