"""
Simulated live detection feed for the monitoring view
"""
from datetime import datetime, timedelta
from typing import List, Optional

import numpy as np
import pandas as pd

from models.data_models import LiveDetection
from config import (
    LIVE_FEED_SIZE, LIVE_FEED_SPACING_SECONDS, LIVE_SOURCES,
    LIVE_RESULT_PROBABILITIES, LIVE_CONFIDENCE_RANGE,
    LIVE_STATS_HOURS, LIVE_STATS_RATES
)


class MonitoringEngine:
    """Random simulation of social-media detections; no real ingestion happens here"""

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.sources = LIVE_SOURCES
        self.results = list(LIVE_RESULT_PROBABILITIES.keys())
        self.result_probabilities = list(LIVE_RESULT_PROBABILITIES.values())

    def generate_detections(self, now: Optional[datetime] = None,
                            size: int = LIVE_FEED_SIZE) -> List[LiveDetection]:
        """Generate the latest detections, newest first"""
        now = now or datetime.now()
        low, high = LIVE_CONFIDENCE_RANGE

        sources = self.rng.choice(self.sources, size, replace=True)
        results = self.rng.choice(self.results, size, replace=True, p=self.result_probabilities)
        confidences = self.rng.uniform(low, high, size)

        return [
            LiveDetection(
                timestamp=now - timedelta(seconds=i * LIVE_FEED_SPACING_SECONDS),
                source=str(sources[i]),
                result=str(results[i]),
                confidence=float(confidences[i])
            )
            for i in range(size)
        ]

    def generate_hourly_stats(self, now: Optional[datetime] = None,
                              hours: int = LIVE_STATS_HOURS) -> pd.DataFrame:
        """Generate hourly detection counts for the last ``hours`` hours"""
        now = now or datetime.now()
        times = [now - timedelta(hours=hours - 1 - i) for i in range(hours)]

        stats = {'time': times}
        for column, rate in LIVE_STATS_RATES.items():
            stats[column] = self.rng.poisson(rate, hours)

        return pd.DataFrame(stats)
