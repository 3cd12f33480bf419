import numpy as np
import pytest

from csvresample.core import Dataset


def test_dataset_shape_accessors() -> None:
    data = Dataset.from_rows([(0, 1, 2), (1, 3, 4)])

    assert len(data) == 2
    assert data.row_count == 2
    assert data.column_count == 3
    assert data.channel_count == 2
    assert not data.is_empty
    np.testing.assert_array_equal(data.times, [0.0, 1.0])


def test_empty_dataset() -> None:
    data = Dataset.empty()

    assert len(data) == 0
    assert data.is_empty
    assert data.channel_count == 0
    assert data.times.shape == (0,)


def test_time_only_dataset_has_no_channels() -> None:
    data = Dataset.from_rows([(0,), (1,)])

    assert data.column_count == 1
    assert data.channel_count == 0


def test_values_must_be_two_dimensional() -> None:
    with pytest.raises(ValueError):
        Dataset(np.zeros(3))
