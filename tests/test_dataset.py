import io
from datetime import date

import pandas as pd
import pytest

from core.dataset import ArticleDataset


@pytest.fixture
def frame():
    return pd.DataFrame({
        'title': ["CDC update", "Hoax claims", "WHO guidance", "x" * 120],
        'content': ["a", "b", "c", "d"],
        'publish_date': ["2020-03-01", "2020-03-01", "2020-04-10", "2020-05-20"],
        'date': pd.to_datetime(["2020-03-01", "2020-03-01", "2020-04-10", "2020-05-20"]),
        'type': ["real", "fake", "real", "real"],
    })


@pytest.fixture
def dataset(frame):
    return ArticleDataset(frame, source='csv')


def test_dataset_does_not_share_state_with_source_frame(frame, dataset):
    frame.loc[0, 'title'] = "changed"
    dataset.frame.loc[1, 'title'] = "changed"

    assert list(dataset.frame['title'][:2]) == ["CDC update", "Hoax claims"]


def test_date_bounds(dataset):
    assert dataset.date_bounds() == (date(2020, 3, 1), date(2020, 5, 20))


def test_date_bounds_empty(dataset):
    empty = dataset.filter(start_date=date(2021, 1, 1))

    assert len(empty) == 0
    assert empty.date_bounds() == (None, None)


def test_filter_by_inclusive_date_range(dataset):
    filtered = dataset.filter(date(2020, 3, 1), date(2020, 4, 10))

    assert len(filtered) == 3
    assert filtered.source == 'csv'
    assert len(dataset) == 4


@pytest.mark.parametrize("article_type, expected", [("all", 4), ("real", 3), ("fake", 1), ("FAKE", 1)])
def test_filter_by_type(dataset, article_type, expected):
    assert len(dataset.filter(article_type=article_type)) == expected


def test_label_counts(dataset):
    assert dataset.label_counts() == {'real': 3, 'fake': 1}


def test_distribution_summary(dataset):
    summary = dataset.distribution_summary()

    assert summary.total == 4
    assert summary.real_pct == pytest.approx(75.0)
    assert summary.fake_pct == pytest.approx(25.0)
    assert "High misinformation rate" in summary.interpretation


@pytest.mark.parametrize("fake, real, expected", [
    (2, 8, "High"),
    (1, 9, "Moderate"),
    (1, 14, "Moderate"),
    (1, 19, "Low"),
    (0, 0, "Low"),
])
def test_distribution_interpretation_thresholds(fake, real, expected):
    n = fake + real
    frame = pd.DataFrame({
        'title': ["t"] * n,
        'content': [""] * n,
        'publish_date': ["2020-01-01"] * n,
        'date': pd.to_datetime(["2020-01-01"] * n),
        'type': ["fake"] * fake + ["real"] * real,
    })

    summary = ArticleDataset(frame).distribution_summary()

    assert expected in summary.interpretation


def test_timeline_fills_missing_labels(dataset):
    timeline = dataset.filter(article_type='real').timeline()

    assert list(timeline.columns) == ['date', 'real', 'fake']
    assert list(timeline['real']) == [1, 1, 1]
    assert list(timeline['fake']) == [0, 0, 0]


def test_timeline_counts_per_day(dataset):
    timeline = dataset.timeline()

    first = timeline.iloc[0]
    assert first['date'] == pd.Timestamp("2020-03-01")
    assert (first['real'], first['fake']) == (1, 1)


def test_table_view(dataset):
    table = dataset.table_view()

    assert list(table.columns) == ['Date', 'Title', 'Type']
    assert table.loc[0, 'Date'] == "2020-03-01"
    assert table.loc[0, 'Type'] == "✅ Reliable"
    assert table.loc[1, 'Type'] == "❌ Misinformation"
    assert len(table.loc[3, 'Title']) == 80
    assert table.loc[3, 'Title'].endswith("...")


def test_to_csv_round_trips_records(dataset):
    exported = pd.read_csv(io.BytesIO(dataset.filter(article_type='fake').to_csv()))

    assert list(exported['title']) == ["Hoax claims"]
    assert list(exported['date']) == ["2020-03-01"]


def test_export_filename():
    assert ArticleDataset.export_filename(date(2024, 1, 31)) == "coaid_misinformation_data_2024-01-31.csv"
