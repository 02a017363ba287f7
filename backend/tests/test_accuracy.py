from sentilens.analyzers.accuracy import build_accuracy_report, load_accuracy_samples
from sentilens.schemas.analysis import Sentiment


def test_bundled_samples_report():
    samples = load_accuracy_samples()
    report = build_accuracy_report(samples)

    assert report.total_samples == len(samples) == 8
    assert report.correct_predictions == 5
    assert report.accuracy == 62.5
    matrix = report.confusion_matrix
    assert matrix[Sentiment.POSITIVE][Sentiment.NEUTRAL] == 1
    assert matrix[Sentiment.NEGATIVE][Sentiment.POSITIVE] == 1
    assert matrix[Sentiment.NEUTRAL][Sentiment.POSITIVE] == 1
    assert sum(sum(row.values()) for row in matrix.values()) == 8
    assert [item.is_correct for item in report.items][:5] == [True, True, True, False, False]


def test_empty_sample_set():
    report = build_accuracy_report([])
    assert report.total_samples == 0
    assert report.accuracy == 0.0
    assert report.items == []
