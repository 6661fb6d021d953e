"""
JSON export/import of a team's prompts.

Only title, body, visibility and timestamps travel; folders and tags do not.
Import is best-effort: a record that fails to create is logged, counted as
skipped, and the rest of the batch carries on.
"""

from datetime import datetime, timezone
from typing import Any, Dict
import logging

from pydantic import ValidationError as SchemaValidationError
from supabase import Client

from app.config import settings
from app.core.errors import PromptStashError, ValidationError, require_user
from app.modules.prompts.lifecycle import PromptLifecycle
from app.modules.prompts.schemas import (
    PromptCreate, PromptExport, ExportedPrompt, ImportResult
)

logger = logging.getLogger(__name__)


class PromptTransferService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.lifecycle = PromptLifecycle(supabase)

    def export_prompts(self, team_id: str) -> PromptExport:
        prompts = self.lifecycle.prompts.list_prompts(team_id)
        return PromptExport(
            version=settings.export_format_version,
            exportDate=datetime.now(timezone.utc),
            prompts=[
                ExportedPrompt(
                    title=p.title,
                    body_md=p.body_md,
                    visibility=p.visibility,
                    created_at=p.created_at,
                    updated_at=p.updated_at
                )
                for p in prompts
            ]
        )

    def import_prompts(self, team_id: str, document: Dict[str, Any], user_id: str) -> ImportResult:
        require_user(user_id)
        records = document.get("prompts") if isinstance(document, dict) else None
        if not isinstance(records, list):
            raise ValidationError("Invalid export file format")

        imported = 0
        for index, record in enumerate(records):
            try:
                if not isinstance(record, dict):
                    raise ValidationError("Prompt entry is not an object")
                prompt_data = PromptCreate(
                    title=record.get("title") or "",
                    body_md=record.get("body_md") or "",
                    visibility=record.get("visibility") or "private"
                )
                self.lifecycle.create_prompt(team_id, prompt_data, user_id)
                imported += 1
            except (PromptStashError, SchemaValidationError) as e:
                logger.warning(f"Skipping imported prompt #{index + 1}: {e}")

        total = len(records)
        logger.info(f"Imported {imported} of {total} prompts into team {team_id}")
        return ImportResult(
            imported=imported,
            total=total,
            skipped=total - imported,
            message=f"Imported {imported} of {total} prompts"
        )
