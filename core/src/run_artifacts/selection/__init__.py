"""Artifact selection and placement."""

from run_artifacts.selection.matching import match_any_name, match_any_pattern
from run_artifacts.selection.placement import filepath_descends_from, requires_isolation
from run_artifacts.selection.resolver import (
    PROMPT_MESSAGE,
    PROMPT_OPTION_LIMIT,
    choose_names,
    distinct_names,
    filter_valid,
    resolve_targets,
)

__all__ = [
    "PROMPT_MESSAGE",
    "PROMPT_OPTION_LIMIT",
    "choose_names",
    "distinct_names",
    "filepath_descends_from",
    "filter_valid",
    "match_any_name",
    "match_any_pattern",
    "requires_isolation",
    "resolve_targets",
]
