from datetime import datetime, timedelta

import numpy as np

from engines.monitoring_engine import MonitoringEngine
from config import LIVE_SOURCES, LIVE_RESULT_PROBABILITIES, LIVE_CONFIDENCE_RANGE

NOW = datetime(2024, 3, 1, 12, 0, 0)


def test_detections_are_spaced_one_minute_apart():
    detections = MonitoringEngine(seed=1).generate_detections(NOW)

    assert len(detections) == 6
    assert [d.timestamp for d in detections] == [NOW - timedelta(minutes=i) for i in range(6)]
    assert detections[0].time_label == "12:00:00"
    assert detections[-1].time_label == "11:55:00"


def test_detection_values_stay_in_range():
    detections = MonitoringEngine(seed=7).generate_detections(NOW, size=200)
    low, high = LIVE_CONFIDENCE_RANGE

    for detection in detections:
        assert detection.source in LIVE_SOURCES
        assert detection.result in LIVE_RESULT_PROBABILITIES
        assert low <= detection.confidence <= high
        assert 75.0 <= detection.confidence_pct <= 97.0


def test_seeded_simulation_is_reproducible():
    first = MonitoringEngine(seed=3).generate_detections(NOW)
    second = MonitoringEngine(seed=3).generate_detections(NOW)

    assert first == second


def test_injected_generator_is_used():
    rng = np.random.default_rng(11)
    engine = MonitoringEngine(rng=rng)

    assert engine.rng is rng


def test_hourly_stats_cover_last_day():
    stats = MonitoringEngine(seed=5).generate_hourly_stats(NOW)

    assert list(stats.columns) == ['time', 'total', 'misinformation', 'reliable']
    assert len(stats) == 24
    assert stats['time'].iloc[-1] == NOW
    assert stats['time'].iloc[0] == NOW - timedelta(hours=23)
    assert (stats[['total', 'misinformation', 'reliable']] >= 0).all().all()
