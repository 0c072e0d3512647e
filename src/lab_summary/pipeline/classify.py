from __future__ import annotations

import logging

from lab_summary.grammar.vocabulary import MarkerVocabulary
from lab_summary.schemas.defaults import STATUS_HIGH, STATUS_LOW, STATUS_NORMAL
from lab_summary.schemas.summary import Status

logger = logging.getLogger(__name__)


def _contains_any(text: str, needles: tuple[str, ...]) -> bool:
    return any(needle.lower() in text for needle in needles)


def classify_status(
    fragment: str,
    result_text: str,
    vocabulary: MarkerVocabulary,
    has_results: bool = True,
) -> Status:
    """Stage 3: Classify one test as low, normal or high.

    Case-insensitive substring search, first rule wins:
      1. a low annotation like "(low)" in the fragment, or a low cue in the
         result text -> "low"
      2. the same for high -> "high"
      3. otherwise "normal"

    result_text is the whole captured results line (value plus explanation).
    Without a results line the cues are looked for in the whole fragment.
    Bare substrings count: a result mentioning "highlight" classifies high.
    """
    section = fragment.lower()
    cue_text = result_text.lower() if has_results else section

    if _contains_any(section, vocabulary.low_annotations) or _contains_any(
        cue_text, vocabulary.low_cues
    ):
        status: Status = STATUS_LOW
    elif _contains_any(section, vocabulary.high_annotations) or _contains_any(
        cue_text, vocabulary.high_cues
    ):
        status = STATUS_HIGH
    else:
        status = STATUS_NORMAL

    logger.debug(
        "classify: %s (cues from %s)", status, "results" if has_results else "fragment"
    )
    return status
