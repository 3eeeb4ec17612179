"""Template parser - directives and placeholders of the .fpst format."""

import logging
import re
from datetime import datetime
from pathlib import PurePath
from typing import Optional

from ..models.template import CLASS_NAME_KEY, YEAR_KEY, TemplateDescriptor

logger = logging.getLogger(__name__)

# &&KEY = VALUE&&, value limited to word chars, space, "/" and "#"
DIRECTIVE_RE = re.compile(r"&&(\w+) *= *(.?[\w/# ]+)&&\n?")
PLACEHOLDER_RE = re.compile(r"##(\w+)##")

DEFAULT_EXTENSION = ".cs"


def strip_directives(text: str) -> tuple[str, dict[str, str]]:
    """Remove directive lines from text.

    Args:
        text: Raw template text.

    Returns:
        Text without directive markup and the directives found,
        keyed by upper-cased name. The first value of a repeated key wins.
    """
    directives: dict[str, str] = {}
    # Removing a span can splice its neighbours into a new directive
    while True:
        for match in DIRECTIVE_RE.finditer(text):
            directives.setdefault(match.group(1).upper(), match.group(2).strip())
        stripped = DIRECTIVE_RE.sub("", text)
        if stripped == text:
            return text, directives
        text = stripped


def extract_placeholders(text: str, year: Optional[int] = None) -> dict[str, str]:
    """Collect ##KEY## markers in order of first appearance.

    ClassName is always registered first. Year is filled with the
    current (or given) year, every other key starts empty.
    """
    if year is None:
        year = datetime.now().year

    placeholders = {CLASS_NAME_KEY: ""}
    for match in PLACEHOLDER_RE.finditer(text):
        key = match.group(1)
        if key in placeholders:
            continue
        placeholders[key] = str(year) if key == YEAR_KEY else ""
    return placeholders


def _parse_priority(value: Optional[str]) -> int:
    if value is None:
        return 0
    try:
        return int(value)
    except ValueError:
        return 0


def parse_template(
    raw_text: str,
    filename: str,
    default_extension: str = DEFAULT_EXTENSION,
    year: Optional[int] = None,
) -> Optional[TemplateDescriptor]:
    """Parse a template document into a descriptor.

    Args:
        raw_text: File contents.
        filename: File name or path, used for the menu label fallback.
        default_extension: EXTENSION used when the template declares none.
        year: Value for ##Year##, defaults to the current year.

    Returns:
        Template descriptor, or None for an empty document.
    """
    if not raw_text:
        return None

    body, directives = strip_directives(raw_text)
    directives.setdefault("EXTENSION", default_extension)

    placeholders = extract_placeholders(body, year=year)

    menu_label = directives.get("MENUNAME") or PurePath(filename).stem
    priority = _parse_priority(directives.get("PRIORITY"))

    logger.debug(
        f"Parsed template '{menu_label}': "
        f"{len(directives)} directives, {len(placeholders)} placeholders"
    )
    return TemplateDescriptor(
        menu_label=menu_label,
        directives=directives,
        placeholders=placeholders,
        body=body,
        priority=priority,
    )
