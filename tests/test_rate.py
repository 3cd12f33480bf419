import numpy as np

from csvresample.analysis.rate import summarize_rate


def test_summarize_rate_for_regular_samples() -> None:
    t = np.arange(101) * 0.01  # 100 Hz

    summary = summarize_rate(t)

    assert summary.row_count == 101
    assert abs(summary.duration_s - 1.0) < 1e-12
    assert 99.9 < summary.mean_hz < 100.1
    assert summary.is_uniform


def test_summarize_rate_irregular() -> None:
    summary = summarize_rate([0.0, 0.1, 0.5, 0.6])

    assert abs(summary.min_interval_s - 0.1) < 1e-12
    assert abs(summary.max_interval_s - 0.4) < 1e-12
    assert not summary.is_uniform
    assert "4 rows" in summary.describe()


def test_summarize_rate_too_few_samples() -> None:
    summary = summarize_rate([])
    assert summary.row_count == 0
    assert summary.mean_hz == 0.0
    assert summary.is_uniform

    assert summarize_rate([3.0]).duration_s == 0.0
