"""
Heuristic task parser.

Turns pasted free text (notes, lists, meeting minutes) into task drafts:

1. each non-blank line is stripped of list markers and "todo:"-style prefixes,
2. lines that look like headers, dates, times, emails or links are dropped,
3. what is left is classified and given a priority and a title.

If no line yields a task, the text is re-split into sentences and each
sentence goes straight to step 3.
"""

from typing import Any, List, Optional

from ..schemas.tasks import Priority, TaskDraft
from . import task_rules as rules


def normalize_line(line: str) -> str:
    """Strip one bullet/number/letter/roman marker and one task prefix."""
    for pattern in rules.LIST_MARKER_PATTERNS:
        line = pattern.sub("", line, count=1)
    line = rules.TASK_PREFIX_RE.sub("", line, count=1)
    return line.strip()


def is_not_a_task(line: str) -> bool:
    """True for lines that read as headers, dates, times, emails, links or labels."""
    if len(line) < rules.HEADER_MAX_LENGTH and (
        ":" in line or rules.UPPERCASE_HEADER_RE.fullmatch(line)
    ):
        return True
    if rules.DATE_RE.match(line) or rules.TIME_RE.match(line):
        return True
    if "@" in line and "." in line:
        return True
    if rules.URL_RE.search(line):
        return True
    if len(line) < rules.LABEL_MAX_LENGTH and " " not in line:
        return True
    return False


def infer_priority(line: str) -> Priority:
    lower = line.lower()
    if any(k in lower for k in rules.HIGH_PRIORITY_KEYWORDS):
        return "high"
    if any(k in lower for k in rules.LOW_PRIORITY_KEYWORDS):
        return "low"
    return "medium"


def make_title(line: str) -> str:
    title = line
    if len(title) > rules.MAX_TITLE_LENGTH:
        title = title[:rules.TRUNCATED_TITLE_LENGTH] + rules.ELLIPSIS
    # drop a trailing period only when it is the sole period
    if title.endswith(".") and title.count(".") == 1:
        title = title[:-1]
    return title.strip()


def extract_task(line: str) -> Optional[TaskDraft]:
    if len(line) < rules.MIN_LINE_LENGTH:
        return None

    lower = line.lower()
    words = lower.split()
    first_word = words[0] if words else ""

    is_action = any(first_word.startswith(verb) for verb in rules.ACTION_VERBS)
    is_imperative = bool(rules.IMPERATIVE_START_RE.match(line)) or any(
        cue in lower for cue in rules.IMPERATIVE_CUES
    )
    if not (is_action or is_imperative or len(line) > rules.LOOSE_TASK_LENGTH):
        return None

    title = make_title(line)
    if len(title) < rules.MIN_LINE_LENGTH:
        return None

    return TaskDraft(
        title=title,
        description=line if len(line) > rules.MAX_TITLE_LENGTH else "",
        priority=infer_priority(line),
    )


def extract_tasks_from_sentences(text: str) -> List[TaskDraft]:
    """Fallback pass: one candidate per sentence, no cleaning or filtering."""
    tasks = []
    for sentence in rules.SENTENCE_SPLIT_RE.split(text):
        sentence = sentence.strip()
        if not sentence:
            continue
        task = extract_task(sentence)
        if task:
            tasks.append(task)
    return tasks


def parse_tasks(text: Any) -> List[TaskDraft]:
    """Extract task drafts from free text.

    Returns an empty list for ``None``, non-string input, or text with
    nothing that looks like a task. Never raises for string input.
    """
    if not text or not isinstance(text, str):
        return []

    tasks: List[TaskDraft] = []
    seen = set()
    for raw in text.split("\n"):
        raw = raw.strip()
        if not raw or raw in seen:
            continue
        seen.add(raw)

        line = normalize_line(raw)
        if len(line) < rules.MIN_LINE_LENGTH or is_not_a_task(line):
            continue

        task = extract_task(line)
        if task:
            tasks.append(task)

    if tasks:
        return tasks
    return extract_tasks_from_sentences(text)
