"""情感得分归一化"""
import math
from typing import Tuple

from sentilens.schemas.analysis import SentimentScore


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def normalize_sentiment_triple(
    positive: float,
    negative: float,
    neutral: float,
) -> Tuple[int, int, int]:
    """Scale three non-negative scores to integers summing to exactly 100.

    All-zero input maps to (0, 0, 100). Otherwise each share is rounded
    independently and the whole rounding residual goes to ``positive``.
    """
    largest = max(positive, negative, neutral)
    if largest == 0:
        return 0, 0, 100

    # 按 2 的幂缩放到 [0, 1)，比例不变，极大输入求和也不会溢出为 inf
    _, exponent = math.frexp(largest)
    positive, negative, neutral = (math.ldexp(v, -exponent) for v in (positive, negative, neutral))
    total = positive + negative + neutral

    rounded_positive = _round_half_up(positive / total * 100)
    rounded_negative = _round_half_up(negative / total * 100)
    rounded_neutral = _round_half_up(neutral / total * 100)

    diff = 100 - (rounded_positive + rounded_negative + rounded_neutral)
    adjusted_positive = rounded_positive + diff
    if adjusted_positive < 0:
        # positive rounded to 0 and the others both rounded up; the residual is -1
        if rounded_negative >= rounded_neutral:
            rounded_negative += adjusted_positive
        else:
            rounded_neutral += adjusted_positive
        adjusted_positive = 0
    return adjusted_positive, rounded_negative, rounded_neutral


def normalize_sentiment_scores(scores: SentimentScore) -> SentimentScore:
    positive, negative, neutral = normalize_sentiment_triple(
        scores.positive, scores.negative, scores.neutral
    )
    return SentimentScore(positive=positive, negative=negative, neutral=neutral)
