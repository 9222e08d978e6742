import json
import logging
from datetime import date

import pandas as pd
import pytest

from core.detection_system import MisinformationDetectionSystem
from models.data_models import DashboardEncoder, Verdict


@pytest.fixture
def system(tmp_path):
    system = MisinformationDetectionSystem(data_file=tmp_path / "absent.csv", monitoring_seed=0)
    assert system.initialize_system()
    return system


def test_initialize_with_sample_data(system):
    assert system.is_healthy()
    assert system.dataset.source == 'sample'
    assert len(system.dataset) == 100
    assert system.loaded_at is not None


def test_initialize_fails_when_no_dates_parse(tmp_path, caplog):
    path = tmp_path / "undated.csv"
    pd.DataFrame({
        'title': ["A", "B"],
        'content': ["", ""],
        'publish_date': ["soon", "later"],
        'type': ["real", "fake"],
    }).to_csv(path, index=False)

    system = MisinformationDetectionSystem(data_file=path)

    with caplog.at_level(logging.ERROR):
        assert not system.initialize_system()

    assert not system.is_healthy()
    assert "no articles with valid dates" in caplog.text


def test_classify_text_delegates_to_classifier(system, caplog):
    with caplog.at_level(logging.DEBUG, logger="core.detection_system"):
        result = system.classify_text("Moderna clinical trial data")

    assert result.verdict == Verdict.LIKELY_RELIABLE
    assert "Likely Reliable" in caplog.text


def test_classify_empty_text(system):
    assert system.classify_text("").verdict == Verdict.UNKNOWN


def test_statistics_for_filtered_dataset(system):
    fake_only = system.dataset.filter(article_type='fake')

    stats = system.get_statistics(fake_only)

    assert stats.total_articles == len(fake_only)
    assert stats.reliable_count == 0
    assert stats.misinformation_count == len(fake_only)


def test_statistics_for_full_dataset(system):
    stats = system.get_statistics()

    assert stats.total_articles == 100
    assert stats.reliable_count + stats.misinformation_count == 100
    assert stats.earliest_date == date(2020, 2, 1)
    assert stats.latest_date == date(2020, 12, 31)
    assert stats.source == 'sample'


def test_statistics_before_initialization(tmp_path):
    stats = MisinformationDetectionSystem(data_file=tmp_path / "absent.csv").get_statistics()

    assert stats.total_articles == 0
    assert stats.earliest_date is None


def test_system_health_is_json_serializable(system):
    health = json.loads(json.dumps(system.get_system_health(), cls=DashboardEncoder))

    assert health['system_status'] == 'Healthy'
    assert health['dataset']['earliest_date'] == "2020-02-01"
    assert health['dataset']['total_articles'] == 100
    assert health['classifier']['reliable_keywords'] == 36
    assert health['loaded_at'] is not None


def test_results_encode_to_json(system):
    result = system.classify_text("The CDC says vaccines are safe")

    payload = json.loads(json.dumps(result, cls=DashboardEncoder))

    assert payload['verdict'] == Verdict.LIKELY_RELIABLE
    assert payload['strong_reliable'] == 3
