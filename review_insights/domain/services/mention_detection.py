# review_insights/domain/services/mention_detection.py
# Pure domain services: no I/O, deterministic, no external libraries.
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from review_insights.domain.lexicons import DEFAULT_MENTION_RULES, MentionRules
from review_insights.domain.models import MentionCandidate, MentionKind, StaffRef
from review_insights.domain.services.ranking import deduplicate_mentions
from review_insights.domain.services.text import clamp, context_bounds, find_all

# Confidence arithmetic is rounded so that e.g. 0.4 + 0.2 compares equal to 0.6.
_PRECISION = 6


def _confidence(value: float) -> float:
    return round(clamp(value, 0.0, 1.0), _PRECISION)


@dataclass(frozen=True)
class _Window:
    lowered: str  # every scoring signal reads this
    cased: str  # display only; original casing when offsets line up


@dataclass(frozen=True)
class _Review:
    """Review text in both casings; offsets always refer to `lowered`."""

    original: str
    lowered: str
    radius: int

    @classmethod
    def of(cls, text: str, radius: int) -> _Review:
        lowered = text.lower()
        # Some characters change length when lower-cased (e.g. "İ"); fall back
        # to the lower-cased text so offsets stay valid.
        original = text if len(lowered) == len(text) else lowered
        return cls(original=original, lowered=lowered, radius=radius)

    def window(self, start: int, length: int) -> _Window:
        lo, hi = context_bounds(len(self.lowered), start, length, self.radius)
        return _Window(
            lowered=self.lowered[lo:hi].strip(),
            cased=self.original[lo:hi].strip(),
        )

    def span(self, start: int, end: int) -> str:
        return self.original[start:end]


class MentionDetector:
    """
    Finds staff members referenced in a review.

    Three independent strategies per staff member, each scored heuristically:

    - full name   ("maria lopez")            base 0.8
    - role phrase ("the manager", "our chef") base 0.6
    - name part   ("maria")                  base 0.4, kept only above 0.6

    Candidates are deduplicated on (staff_id, start, end) and returned by
    descending confidence. Thresholding for persistence is the caller's job.
    """

    def __init__(self, rules: MentionRules = DEFAULT_MENTION_RULES) -> None:
        self.rules = rules

    def detect_mentions(self, text: str, staff: Sequence[StaffRef]) -> list[MentionCandidate]:
        if not text or not staff:
            return []
        review = _Review.of(text, self.rules.context_radius)
        candidates: list[MentionCandidate] = []
        for member in staff:
            candidates.extend(self._find_staff_mentions(review, member))
        return deduplicate_mentions(candidates)

    def _find_staff_mentions(self, review: _Review, member: StaffRef) -> list[MentionCandidate]:
        name = member.name.strip().lower()
        mentions: list[MentionCandidate] = []
        if name:
            mentions.extend(self._full_name_mentions(review, name, member.id))
        position = (member.position or "").strip().lower()
        if position:
            mentions.extend(self._position_mentions(review, position, member.id))
        if name:
            mentions.extend(self._partial_name_mentions(review, name, member.id))
        return mentions

    # ---------- strategies ----------

    def _full_name_mentions(
        self, review: _Review, name: str, staff_id: str
    ) -> list[MentionCandidate]:
        out: list[MentionCandidate] = []
        for start in find_all(review.lowered, name):
            window = review.window(start, len(name))
            out.append(
                self._candidate(
                    review, staff_id, start, len(name), window,
                    self._name_confidence(name, window), MentionKind.FULL_NAME,
                )
            )
        return out

    def _position_mentions(
        self, review: _Review, position: str, staff_id: str
    ) -> list[MentionCandidate]:
        out: list[MentionCandidate] = []
        for template in self.rules.position_templates:
            phrase = f"{template} {position}"
            for start in find_all(review.lowered, phrase):
                window = review.window(start, len(phrase))
                out.append(
                    self._candidate(
                        review, staff_id, start, len(phrase), window,
                        self._position_confidence(position, window), MentionKind.POSITION,
                    )
                )
        return out

    def _partial_name_mentions(
        self, review: _Review, name: str, staff_id: str
    ) -> list[MentionCandidate]:
        out: list[MentionCandidate] = []
        for part in name.split():
            if len(part) < self.rules.partial_min_length:
                continue
            for start in find_all(review.lowered, part):
                window = review.window(start, len(part))
                confidence = self._partial_confidence(part, window)
                if confidence > self.rules.partial_threshold:
                    out.append(
                        self._candidate(
                            review, staff_id, start, len(part), window,
                            confidence, MentionKind.PARTIAL_NAME,
                        )
                    )
        return out

    # ---------- scoring ----------

    def _name_confidence(self, name: str, window: _Window) -> float:
        confidence = 0.8
        if name[:1].upper() + name[1:] in window.lowered:
            confidence += 0.1
        if any(f"{title} {name}" in window.lowered for title in self.rules.titles):
            confidence += 0.1
        if name in self.rules.common_words:
            confidence -= 0.3
        return _confidence(confidence)

    def _position_confidence(self, position: str, window: _Window) -> float:
        confidence = 0.6
        if any(word in window.lowered for word in self.rules.action_words):
            confidence += 0.1
        # "the/a/an/some/any <position>": generic phrasing, weak signal
        if any(f"{d} {position}" in window.lowered for d in self.rules.generic_determiners):
            confidence -= 0.1
        return _confidence(confidence)

    def _partial_confidence(self, part: str, window: _Window) -> float:
        confidence = 0.4
        if window.lowered.startswith(part) or f". {part}" in window.lowered:
            confidence += 0.2
        if len(part) >= 4:
            confidence += 0.1
        if part in self.rules.common_first_names:
            confidence -= 0.2
        return _confidence(confidence)

    @staticmethod
    def _candidate(
        review: _Review,
        staff_id: str,
        start: int,
        length: int,
        window: _Window,
        confidence: float,
        kind: MentionKind,
    ) -> MentionCandidate:
        return MentionCandidate(
            staff_id=staff_id,
            matched_text=review.span(start, start + length),
            context=window.cased,
            confidence=confidence,
            start_index=start,
            end_index=start + length,
            kind=kind,
        )
