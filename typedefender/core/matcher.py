from __future__ import annotations

import logging

from typedefender.core.state import SessionState

logger = logging.getLogger(__name__)


def resolve(state: SessionState, candidate_text: str) -> bool:
    """Match the candidate against every live word.

    Comparison ignores letter case only. Every live word with that text is
    destroyed (duplicates on screen all go at once), its lane freed and its
    reward added to the score.
    """

    if not candidate_text:
        return False

    key = candidate_text.lower()
    matched = [w for w in state.words if w.live and w.text.lower() == key]
    for word in matched:
        state.lanes.release(word)
        word.found = True
        state.scorer.award(word.progress, word.speed)

    if matched:
        logger.info("matched %r x%d score=%.1f", candidate_text, len(matched), state.score)
    return bool(matched)
