"""Tests for staff-mention detection."""

import pytest

from review_insights.domain.lexicons import MentionRules
from review_insights.domain.models import MentionCandidate, MentionKind, StaffRef
from review_insights.domain.services.mention_detection import MentionDetector
from review_insights.domain.services.ranking import filter_by_confidence


@pytest.fixture
def detector() -> MentionDetector:
    return MentionDetector()


def assert_invariants(text: str, mentions: list[MentionCandidate]) -> None:
    for m in mentions:
        assert 0 <= m.start_index <= m.end_index <= len(text)
        assert 0.0 <= m.confidence <= 1.0
    keys = [m.key for m in mentions]
    assert len(keys) == len(set(keys))
    confidences = [m.confidence for m in mentions]
    assert confidences == sorted(confidences, reverse=True)


class TestFullNameMentions:
    def test_first_name_at_sentence_start(self, detector: MentionDetector) -> None:
        text = "Sarah was great."
        staff = [StaffRef(id="s1", name="Sarah", position="Manager")]

        mentions = detector.detect_mentions(text, staff)

        assert len(mentions) == 1
        m = mentions[0]
        assert m.staff_id == "s1"
        assert m.kind is MentionKind.FULL_NAME
        assert m.confidence == pytest.approx(0.8)
        assert m.start_index == text.lower().index("sarah")
        assert m.end_index == 5
        assert m.matched_text == "Sarah"
        assert m.context == "Sarah was great."

    def test_lowercase_mention_gets_base_confidence(self, detector: MentionDetector) -> None:
        mentions = detector.detect_mentions(
            "ask for marcus at the bar", [StaffRef(id="s1", name="Marcus")]
        )
        assert mentions[0].confidence == pytest.approx(0.8)

    def test_title_before_name_adds_confidence(self, detector: MentionDetector) -> None:
        text = "We met Dr. Patel today"
        mentions = detector.detect_mentions(text, [StaffRef(id="d1", name="Patel")])

        assert len(mentions) == 1
        assert mentions[0].confidence == pytest.approx(0.9)
        assert mentions[0].start_index == 11

    def test_common_word_name_is_penalized(self, detector: MentionDetector) -> None:
        mentions = detector.detect_mentions("Stand by me", [StaffRef(id="x", name="By")])
        assert len(mentions) == 1
        assert mentions[0].confidence == pytest.approx(0.5)

    def test_capitalized_common_word_stays_below_acceptance(
        self, detector: MentionDetector
    ) -> None:
        text = "By the way, the food was great."
        mentions = detector.detect_mentions(text, [StaffRef(id="x", name="By")])

        assert len(mentions) == 1
        assert mentions[0].confidence == pytest.approx(0.5)
        assert mentions[0].matched_text == "By"
        assert filter_by_confidence(mentions, 0.5) == []

    def test_multiple_occurrences_do_not_overlap(self, detector: MentionDetector) -> None:
        text = "Sarah said hi. Sarah waved."
        mentions = detector.detect_mentions(text, [StaffRef(id="s1", name="Sarah")])

        starts = sorted(m.start_index for m in mentions if m.kind is MentionKind.FULL_NAME)
        assert starts == [0, 15]
        assert_invariants(text, mentions)

    def test_full_name_and_strong_partial_parts(self, detector: MentionDetector) -> None:
        text = "Maria Lopez at the desk was kind. Maria also helped."
        staff = [StaffRef(id="m1", name="Maria Lopez")]

        mentions = detector.detect_mentions(text, staff)

        assert len(mentions) == 3
        assert mentions[0].kind is MentionKind.FULL_NAME
        assert (mentions[0].start_index, mentions[0].end_index) == (0, 11)
        assert mentions[0].confidence == pytest.approx(0.8)
        partials = mentions[1:]
        assert all(m.kind is MentionKind.PARTIAL_NAME for m in partials)
        assert [m.start_index for m in partials] == [0, 34]
        assert all(m.confidence == pytest.approx(0.7) for m in partials)
        assert_invariants(text, mentions)


class TestPositionMentions:
    def test_generic_phrase_with_action_word(self, detector: MentionDetector) -> None:
        text = "The manager helped us quickly."
        staff = [StaffRef(id="s2", name="Zoe Kim", position="Manager")]

        mentions = detector.detect_mentions(text, staff)

        assert len(mentions) == 1
        m = mentions[0]
        assert m.kind is MentionKind.POSITION
        assert (m.start_index, m.end_index) == (0, 11)
        assert m.matched_text == "The manager"
        # +0.1 action word, -0.1 generic determiner
        assert m.confidence == pytest.approx(0.6)

    def test_possessive_phrase_with_action_word(self, detector: MentionDetector) -> None:
        mentions = detector.detect_mentions(
            "Our chef took care of everything", [StaffRef(id="c1", name="Ola", position="chef")]
        )
        assert len(mentions) == 1
        assert mentions[0].confidence == pytest.approx(0.7)

    def test_generic_phrase_without_action_word(self, detector: MentionDetector) -> None:
        mentions = detector.detect_mentions(
            "I spoke to an assistant", [StaffRef(id="a1", name="Bo", position="assistant")]
        )
        assert len(mentions) == 1
        assert mentions[0].start_index == 11
        assert mentions[0].confidence == pytest.approx(0.5)

    def test_no_position_skips_role_matching(self, detector: MentionDetector) -> None:
        mentions = detector.detect_mentions(
            "the manager was nice", [StaffRef(id="s1", name="Zed", position=None)]
        )
        assert mentions == []

    def test_blank_name_still_matches_position(self, detector: MentionDetector) -> None:
        mentions = detector.detect_mentions(
            "our host was lovely", [StaffRef(id="h1", name="  ", position="host")]
        )
        assert [m.kind for m in mentions] == [MentionKind.POSITION]


class TestPartialNameMentions:
    def test_common_first_name_part_is_dropped(self, detector: MentionDetector) -> None:
        # "sarah" part: 0.4 + 0.2 + 0.1 - 0.2 = 0.5, below the 0.6 cut
        mentions = detector.detect_mentions(
            "Sarah was lovely", [StaffRef(id="s1", name="Sarah Connor")]
        )
        assert mentions == []

    def test_three_letter_part_at_exactly_cutoff_is_dropped(
        self, detector: MentionDetector
    ) -> None:
        mentions = detector.detect_mentions(
            "Ann was lovely.", [StaffRef(id="a1", name="Ann Marie Smith")]
        )
        assert mentions == []

    def test_short_parts_are_ignored(self, detector: MentionDetector) -> None:
        mentions = detector.detect_mentions(
            "Jo was lovely.", [StaffRef(id="j1", name="Jo Anderson")]
        )
        assert mentions == []


class TestDeduplicationAndEdges:
    def test_full_and_partial_on_same_span_keep_higher(self, detector: MentionDetector) -> None:
        text = "Marcus was brilliant"
        mentions = detector.detect_mentions(text, [StaffRef(id="m1", name="Marcus")])

        assert len(mentions) == 1
        assert mentions[0].kind is MentionKind.FULL_NAME
        assert mentions[0].confidence == pytest.approx(0.8)

    def test_several_staff_members(self, detector: MentionDetector) -> None:
        text = "Sarah was great. The manager handled our complaint."
        staff = [
            StaffRef(id="s1", name="Sarah", position="server"),
            StaffRef(id="s2", name="Tom Baker", position="manager"),
        ]

        mentions = detector.detect_mentions(text, staff)

        assert [m.staff_id for m in mentions] == ["s1", "s2"]
        assert mentions[1].start_index == 17
        assert_invariants(text, mentions)

    def test_empty_inputs_yield_nothing(self, detector: MentionDetector) -> None:
        assert detector.detect_mentions("", [StaffRef(id="s1", name="Sarah")]) == []
        assert detector.detect_mentions("Sarah was great", []) == []

    def test_case_folding_that_changes_length(self, detector: MentionDetector) -> None:
        text = "İstanbul trip, Sarah was great"
        mentions = detector.detect_mentions(text, [StaffRef(id="s1", name="Sarah")])

        assert len(mentions) == 1
        lowered = text.lower()
        assert mentions[0].start_index == lowered.index("sarah")
        assert mentions[0].matched_text == "sarah"
        assert_invariants(lowered, mentions)

    def test_context_window_is_clipped(self) -> None:
        detector = MentionDetector(MentionRules(context_radius=5))
        text = "We had a lovely dinner and Sarah made it special for us all"
        mentions = detector.detect_mentions(text, [StaffRef(id="s1", name="Sarah")])

        assert mentions[0].context == "and Sarah made"

    def test_is_idempotent(self, detector: MentionDetector) -> None:
        text = "Maria Lopez at the desk was kind. Maria also helped."
        staff = [StaffRef(id="m1", name="Maria Lopez", position="receptionist")]
        assert detector.detect_mentions(text, staff) == detector.detect_mentions(text, staff)
