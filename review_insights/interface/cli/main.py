"""Command-line entry point (`review-insights`).

Thin layer: parse args, call domain/use cases, print JSON.

Examples:
    review-insights sentiment --text "The staff were very friendly"
    review-insights batch "great food" "terrible service"
    review-insights mentions --text "Maria helped us" --staff-file var/staff.json
    review-insights process --review-id r1 --company-id c1 --text "..."
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from typing import Any

from review_insights.application.dto.analysis_dto import (
    BatchSentimentRequest,
    ProcessReviewRequest,
)
from review_insights.config.composition import (
    build_batch_sentiment_use_case,
    build_mention_detector,
    build_process_review_use_case,
    build_sentiment_scorer,
)
from review_insights.config.logging import configure_logging
from review_insights.config.settings import AppSettings
from review_insights.domain.errors import DomainError
from review_insights.domain.services.ranking import filter_by_confidence
from review_insights.infrastructure.staff.json_staff_directory import JsonStaffDirectory
from review_insights.interface.presenters import (
    analysis_to_dict,
    batch_to_dict,
    mention_to_dict,
    sentiment_to_dict,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="review-insights",
        description="Sentiment scoring and staff-mention detection for reviews.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_sent = sub.add_parser("sentiment", help="Score one text")
    p_sent.add_argument("--text", required=True)

    p_batch = sub.add_parser("batch", help="Score several texts and aggregate")
    p_batch.add_argument("texts", nargs="*")
    p_batch.add_argument("--file", help="Read texts from a file, one per line")

    p_ment = sub.add_parser("mentions", help="Detect staff mentions in a text")
    p_ment.add_argument("--text", required=True)
    p_ment.add_argument("--staff-file", required=True, help="Roster JSON")
    p_ment.add_argument("--company-id", default="", help="Roster key for per-company files")
    p_ment.add_argument(
        "--threshold", type=float, default=None, help="Only print mentions above (0-1)"
    )

    p_proc = sub.add_parser("process", help="Mentions + sentiment for one review")
    p_proc.add_argument("--review-id", required=True)
    p_proc.add_argument("--company-id", required=True)
    p_proc.add_argument("--text", required=True)
    p_proc.add_argument("--staff-file", help="Roster JSON (default: STAFF_ROSTER_PATH)")
    p_proc.add_argument("--threshold", type=float, default=None)
    return parser


def _emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _fail(err: BaseException) -> int:
    print(f"[ERROR] {type(err).__name__}: {err}", file=sys.stderr)
    return 1


def _read_lines(path: str) -> list[str]:
    with open(path, encoding="utf-8") as fh:
        return [line.rstrip("\n") for line in fh if line.strip()]


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = AppSettings()
    configure_logging(settings.log_level)

    if args.command == "sentiment":
        _emit(sentiment_to_dict(build_sentiment_scorer().analyze_sentiment(args.text)))
        return 0

    if args.command == "batch":
        texts = list(args.texts)
        if args.file:
            texts.extend(_read_lines(args.file))
        result = build_batch_sentiment_use_case(settings).execute(
            BatchSentimentRequest(texts=tuple(texts))
        )
        if not result.ok or result.value is None:
            return _fail(result.error or RuntimeError("batch failed"))
        _emit(batch_to_dict(result.value))
        return 0

    if args.command == "mentions":
        try:
            staff = JsonStaffDirectory(args.staff_file).active_staff(args.company_id)
        except DomainError as err:
            return _fail(err)
        mentions = build_mention_detector(settings).detect_mentions(args.text, staff)
        if args.threshold is not None:
            mentions = filter_by_confidence(mentions, args.threshold)
        _emit([mention_to_dict(m) for m in mentions])
        return 0

    # process
    directory = JsonStaffDirectory(args.staff_file) if args.staff_file else None
    uc = build_process_review_use_case(settings, staff_directory=directory)
    threshold = settings.mention_threshold if args.threshold is None else args.threshold
    result = uc.execute(
        ProcessReviewRequest(
            review_id=args.review_id,
            company_id=args.company_id,
            text=args.text,
            confidence_threshold=threshold,
        )
    )
    if not result.ok or result.value is None:
        return _fail(result.error or RuntimeError("processing failed"))
    _emit(analysis_to_dict(result.value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
