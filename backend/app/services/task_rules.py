"""Vocabulary and patterns used by the heuristic task parser.

Extend the tables here; the parser only iterates over them.
"""

import re

MIN_LINE_LENGTH = 3
MAX_TITLE_LENGTH = 100
TRUNCATED_TITLE_LENGTH = 97
ELLIPSIS = "..."

# A line whose first word starts with one of these reads as an action.
ACTION_VERBS = (
    "review", "send", "update", "create", "write", "read", "check", "complete",
    "finish", "start", "prepare", "schedule", "call", "meet", "discuss",
    "analyze", "design", "develop", "test", "fix", "improve", "implement",
    "organize", "plan", "research", "study", "learn", "practice", "build",
    "deploy", "install", "configure", "setup", "clean", "buy", "purchase",
    "return", "visit", "attend", "submit", "apply", "register", "sign",
    "upload", "download", "share", "publish", "edit", "delete", "remove",
    "add", "change", "modify", "replace", "upgrade", "downgrade",
)

TASK_PREFIXES = (
    "todo", "task", "action", "item", "step", "do", "need to", "should", "must",
)

IMPERATIVE_CUES = ("need to", "should", "must", "have to")

HIGH_PRIORITY_KEYWORDS = ("urgent", "asap", "important", "critical")
LOW_PRIORITY_KEYWORDS = ("optional", "later", "someday", "maybe")

# Applied in order, each at most once, to the start of a line.
LIST_MARKER_PATTERNS = (
    re.compile(r"^[-*•]\s*"),
    re.compile(r"^\d+[.)]\s*", re.ASCII),
    re.compile(r"^[a-z][.)]\s*", re.IGNORECASE),
    # also eats words made only of i/v/x, e.g. "xi." or "vivi)"
    re.compile(r"^[ivx]+[.)]\s*", re.IGNORECASE),
)

# The prefix must end on a word boundary so verbs that merely start with one
# ("Download", "Document", "Steps") are left intact rather than clipped.
TASK_PREFIX_RE = re.compile(
    r"^(?:%s)\b:?\s*" % "|".join(re.escape(p) for p in TASK_PREFIXES),
    re.IGNORECASE,
)

HEADER_MAX_LENGTH = 20
LABEL_MAX_LENGTH = 10
UPPERCASE_HEADER_RE = re.compile(r"[A-Z\s]+")
DATE_RE = re.compile(r"^\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4}", re.ASCII)
TIME_RE = re.compile(r"^\d{1,2}:\d{2}", re.ASCII)
URL_RE = re.compile(r"https?://")

# Lines longer than this are accepted even without an action verb.
LOOSE_TASK_LENGTH = 10

IMPERATIVE_START_RE = re.compile(r"^[A-Z]")
SENTENCE_SPLIT_RE = re.compile(r"[.!?]\s+")
