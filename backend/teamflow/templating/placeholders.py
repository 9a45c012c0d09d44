"""
Placeholder extraction and substitution for template text.

A placeholder is the raw text between a ``{`` and the next ``}``:
``"Onboard {employee}"`` references ``employee``. Names are not trimmed or
validated, so ``{ employee}`` and ``{employee}`` are two different names.
An empty ``{}`` is left alone as plain text.
"""

import re
from typing import Iterator, List, Mapping, Optional

from teamflow.templating.blueprint import TemplateBlueprint


PLACEHOLDER_PATTERN = re.compile(r"\{([^}]+)\}")


def find_placeholders(text: Optional[str]) -> List[str]:
    """Placeholder names in ``text``, in order of first appearance"""
    if not text:
        return []
    return list(dict.fromkeys(PLACEHOLDER_PATTERN.findall(text)))


def substitute(text: Optional[str], variables: Mapping[str, str]) -> Optional[str]:
    """Replace every known ``{name}`` in a single left-to-right pass.

    Replacement values are inserted verbatim and never rescanned, so a value
    such as ``"{other}"`` survives literally. Unknown names are kept as-is.
    """
    if text is None:
        return None

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in variables:
            return str(variables[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, text)


def iter_template_texts(template: TemplateBlueprint) -> Iterator[Optional[str]]:
    """Every templated text field, in scan order"""
    yield template.description
    for project in template.projects:
        yield project.name
        yield project.description
        if project.details is not None:
            for _, value in project.details.text_fields():
                yield value
        for task in project.tasks:
            yield task.title
            yield task.description


def extract_placeholders(template: TemplateBlueprint) -> List[str]:
    """Distinct placeholder names used anywhere in the template.

    Ordered by first appearance so the first missing variable is always the
    same one for a given template.
    """
    names = {}
    for text in iter_template_texts(template):
        for name in find_placeholders(text):
            names.setdefault(name, None)
    return list(names)
