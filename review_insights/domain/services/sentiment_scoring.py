# review_insights/domain/services/sentiment_scoring.py
# Pure domain services: no I/O, deterministic, no external libraries.
from __future__ import annotations

from collections.abc import Sequence

from review_insights.domain.errors import InvalidArgumentError
from review_insights.domain.lexicons import DEFAULT_LEXICON, SentimentLexicon
from review_insights.domain.models import (
    BatchSentimentResult,
    Sentiment,
    SentimentDistribution,
    SentimentResult,
)
from review_insights.domain.services.text import clamp, tokenize

POSITIVE_THRESHOLD = 0.1
NEGATIVE_THRESHOLD = -0.1
NEUTRAL_CONFIDENCE = 0.6
MAX_CONFIDENCE = 0.9
INTENSIFIER_WEIGHT = 1.5


def label_for(score: float) -> Sentiment:
    if score > POSITIVE_THRESHOLD:
        return Sentiment.POSITIVE
    if score < NEGATIVE_THRESHOLD:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


def confidence_for(label: Sentiment, score: float) -> float:
    if label is Sentiment.NEUTRAL:
        return NEUTRAL_CONFIDENCE
    return clamp(min(MAX_CONFIDENCE, 0.5 + abs(score) * 0.4), 0.0, 1.0)


def _result(score: float) -> SentimentResult:
    score = clamp(score, -1.0, 1.0)
    label = label_for(score)
    return SentimentResult(sentiment=label, confidence=confidence_for(label, score), score=score)


class SentimentScorer:
    """
    Lexicon-based sentiment scorer.

    Each token scores +1 (positive word), -1 (negative word) or 0. The token
    right before it may flip the sign (negator) and/or scale it by 1.5
    (intensifier). The sum is divided by the number of tokens, so neutral
    filler dilutes the score.
    """

    def __init__(self, lexicon: SentimentLexicon = DEFAULT_LEXICON) -> None:
        self.lexicon = lexicon

    def analyze_sentiment(self, text: str) -> SentimentResult:
        words = tokenize(text)
        lex = self.lexicon
        score = 0.0
        total_words = 0

        for i, word in enumerate(words):
            word_score = 0.0
            intensity = 1.0

            # Both rules look at the same previous token; not an elif.
            if i > 0 and words[i - 1] in lex.negators:
                intensity = -1.0
            if i > 0 and words[i - 1] in lex.intensifiers:
                intensity *= INTENSIFIER_WEIGHT

            if word in lex.positive:
                word_score = 1.0
            elif word in lex.negative:
                word_score = -1.0

            score += word_score * intensity
            total_words += 1

        normalized = score / total_words if total_words > 0 else 0.0
        return _result(normalized)

    def analyze_batch(self, texts: Sequence[str]) -> BatchSentimentResult:
        """
        Score every text and aggregate.

        Raises:
            InvalidArgumentError: `texts` is empty (mean of nothing is undefined).
        """
        if len(texts) == 0:
            raise InvalidArgumentError("analyze_batch requires at least one text")

        individual = tuple(self.analyze_sentiment(t) for t in texts)
        average = sum(r.score for r in individual) / len(individual)

        distribution = SentimentDistribution(
            positive=sum(1 for r in individual if r.sentiment is Sentiment.POSITIVE),
            neutral=sum(1 for r in individual if r.sentiment is Sentiment.NEUTRAL),
            negative=sum(1 for r in individual if r.sentiment is Sentiment.NEGATIVE),
        )
        return BatchSentimentResult(
            overall=_result(average),
            individual=individual,
            distribution=distribution,
        )
