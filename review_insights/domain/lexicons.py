# review_insights/domain/lexicons.py
# Fixed word tables for the analyzers. Built once at import, never mutated.
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SentimentLexicon:
    positive: frozenset[str]
    negative: frozenset[str]
    intensifiers: frozenset[str]
    negators: frozenset[str]


DEFAULT_LEXICON = SentimentLexicon(
    positive=frozenset(
        {
            "excellent", "amazing", "wonderful", "fantastic", "great", "good",
            "awesome", "outstanding", "perfect", "brilliant", "superb", "marvelous",
            "exceptional", "incredible", "impeccable", "love", "loved", "enjoyed",
            "pleased", "satisfied", "happy", "delighted", "impressed", "recommend",
            "recommended", "best", "favorite", "top", "helpful", "friendly", "kind",
            "professional", "courteous", "polite", "attentive", "special", "clean",
            "fresh", "delicious", "tasty", "quality", "value", "worth", "quick",
            "fast", "efficient", "smooth", "easy", "convenient",
        }
    ),
    negative=frozenset(
        {
            "terrible", "awful", "horrible", "disgusting", "disappointing", "bad",
            "worst", "hate", "hated", "dislike", "unhappy", "angry", "frustrated",
            "annoyed", "upset", "disappointed", "unsatisfied", "poor", "cheap",
            "dirty", "messy", "slow", "late", "rude", "unprofessional", "unfriendly",
            "cold", "unhelpful", "difficult", "complicated", "confusing", "wrong",
            "broken", "damaged", "old", "stale", "overpriced", "expensive", "waste",
            "overwhelmed", "issues",
        }
    ),
    intensifiers=frozenset(
        {
            "very", "extremely", "incredibly", "absolutely", "completely", "totally",
            "really", "quite", "rather", "somewhat", "slightly", "barely", "hardly",
        }
    ),
    # Apostrophe forms never survive tokenize(); kept so custom tokenizers can use them.
    negators=frozenset(
        {
            "not", "no", "never", "none", "nothing", "nobody", "nowhere", "neither",
            "nor", "cannot", "can't", "won't", "wouldn't", "shouldn't", "couldn't",
        }
    ),
)


@dataclass(frozen=True)
class MentionRules:
    """Constant tables and weights used by the mention detector."""

    context_radius: int = 50
    titles: tuple[str, ...] = ("mr.", "ms.", "mrs.", "dr.", "prof.")
    common_words: frozenset[str] = frozenset(
        {"the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by"}
    )
    position_templates: tuple[str, ...] = ("the", "our", "this", "that", "a", "an")
    action_words: tuple[str, ...] = (
        "helped", "assisted", "served", "managed", "handled", "took care",
    )
    generic_determiners: tuple[str, ...] = ("the", "a", "an", "some", "any")
    common_first_names: frozenset[str] = frozenset(
        {"john", "jane", "mike", "sarah", "david", "lisa", "chris", "emily"}
    )
    partial_min_length: int = 3
    partial_threshold: float = 0.6


DEFAULT_MENTION_RULES = MentionRules()
