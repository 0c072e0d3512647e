from __future__ import annotations

import logging

from lab_summary.grammar.matchers import compile_grammar
from lab_summary.grammar.vocabulary import MarkerVocabulary

logger = logging.getLogger(__name__)


def split_sections(text: str, vocabulary: MarkerVocabulary) -> tuple[list[str], str]:
    """Stage 1: Split the narrative into test fragments and the final tip.

    Returns (fragments, final_tip). Text before the first heading marker is a
    preamble and is dropped, so there is exactly one fragment per marker, even
    when a marker is followed by nothing. The final tip is searched in the
    whole text, independent of where the sections are.
    """
    grammar = compile_grammar(vocabulary)

    parts = grammar.heading.split(text)
    fragments = parts[1:]

    tip_match = grammar.final_tip.search(text)
    final_tip = tip_match.group(1) if tip_match else ""

    logger.debug(
        "split: %d test sections, final tip %s",
        len(fragments),
        "found" if final_tip else "missing",
    )
    return fragments, final_tip
