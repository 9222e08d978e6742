"""
Dataset ingestion engine for the labeled COVID-19 article corpus
"""
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Optional, Tuple, Union

import dateutil.parser
import numpy as np
import pandas as pd

from config import (
    DATA_FILE, REQUIRED_COLUMNS, ARTICLE_COLUMNS, DATE_FORMATS,
    SAMPLE_DATA_SEED, SAMPLE_DATA_SIZE, SAMPLE_DATE_START, SAMPLE_DATE_END,
    SAMPLE_TYPE_PROBABILITIES, SAMPLE_TITLES, SAMPLE_CONTENT
)

logger = logging.getLogger(__name__)

SOURCE_CSV = 'csv'
SOURCE_SAMPLE = 'sample'

DATEUTIL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


class DatasetIngestionEngine:
    """Load the labeled article corpus from CSV, falling back to generated sample data"""

    def __init__(self, data_file: Union[str, Path, None] = None, seed: int = SAMPLE_DATA_SEED):
        self.data_file = Path(data_file) if data_file is not None else DATA_FILE
        self.seed = seed

    def load_articles(self) -> Tuple[pd.DataFrame, str]:
        """Load articles, returning the frame and where it came from ('csv' or 'sample')"""
        if not self.data_file.exists():
            logger.info("Data file %s not found, using sample data", self.data_file)
            return self.create_sample_data(), SOURCE_SAMPLE

        try:
            raw_df = pd.read_csv(self.data_file, dtype=str)
            articles = self.prepare_articles(raw_df)
        except (OSError, UnicodeDecodeError, pd.errors.ParserError,
                pd.errors.EmptyDataError, KeyError, ValueError) as e:
            logger.warning("Could not load data file %s (%s). Using sample data.", self.data_file, e)
            return self.create_sample_data(), SOURCE_SAMPLE

        logger.info("Loaded %d articles from %s", len(articles), self.data_file)
        return articles, SOURCE_CSV

    def prepare_articles(self, raw_df: pd.DataFrame) -> pd.DataFrame:
        """Parse dates, normalise labels and drop rows without a usable date"""
        missing = [column for column in REQUIRED_COLUMNS if column not in raw_df.columns]
        if missing:
            raise KeyError(f"Missing required columns: {', '.join(missing)}")

        df = raw_df.copy()
        if 'content' not in df.columns:
            df['content'] = ""

        df['title'] = df['title'].fillna("").astype(str)
        df['content'] = df['content'].fillna("").astype(str)
        df['type'] = df['type'].fillna("").astype(str).str.strip().str.lower()
        df['date'] = pd.to_datetime(df['publish_date'].map(self.parse_date), errors='coerce')

        before = len(df)
        df = df[df['date'].notna()]
        dropped = before - len(df)
        if dropped:
            logger.warning("Dropped %d rows with unparseable publish dates", dropped)

        return df.loc[:, list(ARTICLE_COLUMNS)].reset_index(drop=True)

    @staticmethod
    def parse_date(value) -> Optional[date]:
        """Parse a publish date in one of several formats; first successful format wins"""
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if not isinstance(value, str) or not value.strip():
            return None

        date_str = value.strip()
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(date_str, fmt).date()
            except ValueError:
                continue

        # dateutil fills missing fields from its default, so parse against two
        # different defaults and reject anything that does not agree
        try:
            first = dateutil.parser.parse(date_str, dayfirst=True, default=DATEUTIL_DEFAULTS[0])
            second = dateutil.parser.parse(date_str, dayfirst=True, default=DATEUTIL_DEFAULTS[1])
        except (ValueError, OverflowError):
            return None

        if first.date() != second.date():
            return None
        return first.date()

    def create_sample_data(self) -> pd.DataFrame:
        """Create a deterministic sample dataset for demonstration"""
        rng = np.random.default_rng(self.seed)

        dates = pd.date_range(SAMPLE_DATE_START, SAMPLE_DATE_END,
                              periods=SAMPLE_DATA_SIZE).normalize()
        types = list(SAMPLE_TYPE_PROBABILITIES.keys())
        probabilities = list(SAMPLE_TYPE_PROBABILITIES.values())

        return pd.DataFrame({
            'title': rng.choice(SAMPLE_TITLES, SAMPLE_DATA_SIZE, replace=True),
            'content': rng.choice(SAMPLE_CONTENT, SAMPLE_DATA_SIZE, replace=True),
            'publish_date': dates.strftime('%Y-%m-%d'),
            'date': dates,
            'type': rng.choice(types, SAMPLE_DATA_SIZE, replace=True, p=probabilities),
        }).loc[:, list(ARTICLE_COLUMNS)]
