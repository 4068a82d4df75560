"""
Task extraction through a completion model, with the heuristic parser as
the fallback for every failure (no provider, transport error, no JSON
array in the reply, bad JSON, bad entries).
"""

import json
from typing import Any, List, Optional

from ..core.logging import get_logger
from ..schemas.tasks import TaskDraft
from .provider import CompletionProvider, ProviderError
from .task_parser import parse_tasks

logger = get_logger(__name__)

SYSTEM = (
    "You are a task extraction assistant. Extract actionable tasks from text "
    "and return them as a JSON array."
)

PROMPT_TEMPLATE = """Analyze the following text and extract all actionable tasks. Return a JSON array of tasks, where each task has:
- title: A clear, concise task title (required)
- description: Optional additional details
- priority: "low", "medium", or "high" based on urgency/importance

Text to analyze:
{text}

Return ONLY a valid JSON array, no other text. Example format:
[
  {{"title": "Review project proposal", "description": "", "priority": "medium"}},
  {{"title": "Send email to client", "description": "Follow up on last meeting", "priority": "high"}}
]"""

PRIORITIES = ("low", "medium", "high")

_decoder = json.JSONDecoder()


def build_prompt(text: str) -> str:
    return PROMPT_TEMPLATE.format(text=text)


def find_json_array(content: str) -> Optional[str]:
    """Return the first substring of ``content`` that decodes as a JSON array.

    Models like to wrap the array in prose or code fences, so every ``[`` is
    tried in turn. Returns None when no array decodes, or when the reply
    nests too deeply to decode at all.
    """
    start = content.find("[")
    while start != -1:
        try:
            value, end = _decoder.raw_decode(content, start)
        except RecursionError:
            return None
        except ValueError:
            # JSONDecodeError, or an integer past the digit limit
            value, end = None, start
        if isinstance(value, list):
            return content[start:end]
        start = content.find("[", start + 1)
    return None


def coerce_priority(value: Any) -> str:
    if isinstance(value, str) and value.lower() in PRIORITIES:
        return value.lower()
    return "medium"


def coerce_drafts(items: List[Any]) -> List[TaskDraft]:
    drafts = []
    for item in items:
        if not isinstance(item, dict):
            continue
        title = item.get("title")
        if not isinstance(title, str) or not title.strip():
            continue
        description = item.get("description") or ""
        drafts.append(TaskDraft(
            title=title.strip(),
            description=str(description).strip(),
            priority=coerce_priority(item.get("priority")),
        ))
    return drafts


def parse_tasks_with_model(text: Any, provider: Optional[CompletionProvider]) -> List[TaskDraft]:
    """Ask ``provider`` for tasks; fall back to ``parse_tasks`` on any failure.

    Behaves exactly like ``parse_tasks`` when ``provider`` is None.
    """
    if provider is None or not text or not isinstance(text, str):
        return parse_tasks(text)

    try:
        content = provider.complete(SYSTEM, build_prompt(text))
    except ProviderError as e:
        logger.warning("model_parse_failed", provider=provider.name, reason=str(e))
        return parse_tasks(text)

    if not isinstance(content, str) or not content.strip():
        logger.warning("model_parse_failed", provider=provider.name, reason="empty or non-text reply")
        return parse_tasks(text)

    content = content.strip()
    raw = find_json_array(content)
    if raw is None:
        logger.warning("model_parse_failed", provider=provider.name, reason="no JSON array in reply")
        return parse_tasks(text)

    try:
        drafts = coerce_drafts(json.loads(raw))
    except (ValueError, TypeError, RecursionError) as e:
        logger.warning("model_parse_failed", provider=provider.name, reason=str(e))
        return parse_tasks(text)

    logger.info("model_parse_ok", provider=provider.name, tasks=len(drafts))
    return drafts
