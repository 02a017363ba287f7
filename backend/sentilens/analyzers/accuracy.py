"""人工标注 vs API 结果的准确率统计"""
import json
from pathlib import Path
from typing import Dict, List, Sequence

from sentilens.schemas.accuracy import AccuracyItem, AccuracyReport, AccuracySample
from sentilens.schemas.analysis import Sentiment

SAMPLES_PATH = Path(__file__).resolve().parents[1] / "data" / "accuracy_samples.json"


def load_accuracy_samples(path: Path = SAMPLES_PATH) -> List[AccuracySample]:
    with path.open("r", encoding="utf-8") as handle:
        raw = json.load(handle)
    return [AccuracySample.model_validate(item) for item in raw]


def build_accuracy_report(samples: Sequence[AccuracySample]) -> AccuracyReport:
    total = len(samples)
    matrix: Dict[Sentiment, Dict[Sentiment, int]] = {
        manual: {predicted: 0 for predicted in Sentiment} for manual in Sentiment
    }
    items: List[AccuracyItem] = []
    correct = 0

    for sample in samples:
        predicted = sample.api_result.overall_sentiment
        is_correct = predicted == sample.manual_sentiment
        if is_correct:
            correct += 1
        matrix[sample.manual_sentiment][predicted] += 1
        items.append(AccuracyItem(
            id=sample.id,
            text=sample.text,
            manual_sentiment=sample.manual_sentiment,
            api_sentiment=predicted,
            is_correct=is_correct,
        ))

    accuracy = round(correct / total * 100, 1) if total > 0 else 0.0
    return AccuracyReport(
        total_samples=total,
        correct_predictions=correct,
        accuracy=accuracy,
        confusion_matrix=matrix,
        items=items,
    )
