"""
Read-only view over the labeled article corpus
"""
from datetime import date
from typing import Dict, Optional, Tuple

import pandas as pd

from models.data_models import DistributionSummary
from utils.text_processing import TextProcessor
from config import ARTICLE_COLUMNS, ARTICLE_TYPES, TITLE_MAX_LENGTH, EXPORT_FILE_PREFIX

TYPE_LABELS = {
    'real': "✅ Reliable",
    'fake': "❌ Misinformation",
}


class ArticleDataset:
    """Immutable article table; every operation returns new data instead of mutating"""

    def __init__(self, frame: pd.DataFrame, source: str = 'sample'):
        self._df = frame.loc[:, list(ARTICLE_COLUMNS)].reset_index(drop=True).copy()
        self.source = source

    def __len__(self) -> int:
        return len(self._df)

    @property
    def frame(self) -> pd.DataFrame:
        return self._df.copy()

    def date_bounds(self) -> Tuple[Optional[date], Optional[date]]:
        """Earliest and latest publish dates, or (None, None) when empty"""
        if self._df.empty:
            return None, None
        return self._df['date'].min().date(), self._df['date'].max().date()

    def filter(self, start_date: Optional[date] = None, end_date: Optional[date] = None,
               article_type: str = 'all') -> 'ArticleDataset':
        """Filter by inclusive date range and article type ('all', 'real' or 'fake')"""
        mask = pd.Series(True, index=self._df.index)

        if start_date is not None:
            mask &= self._df['date'] >= pd.Timestamp(start_date)
        if end_date is not None:
            mask &= self._df['date'] <= pd.Timestamp(end_date)
        if article_type and article_type != 'all':
            mask &= self._df['type'] == article_type.lower()

        return ArticleDataset(self._df[mask], source=self.source)

    def label_counts(self) -> Dict[str, int]:
        """Number of articles per label"""
        counts = self._df['type'].value_counts()
        return {label: int(counts.get(label, 0)) for label in ARTICLE_TYPES}

    def distribution_summary(self) -> DistributionSummary:
        """Share of reliable content vs misinformation with a short interpretation"""
        total = len(self._df)
        counts = self.label_counts()

        real_pct = counts['real'] / total * 100 if total else 0.0
        fake_pct = counts['fake'] / total * 100 if total else 0.0

        if fake_pct > 10:
            interpretation = "⚠️ High misinformation rate detected"
        elif fake_pct > 5:
            interpretation = "⚡ Moderate misinformation presence"
        else:
            interpretation = "✅ Low misinformation rate"

        return DistributionSummary(
            total=total,
            real_pct=real_pct,
            fake_pct=fake_pct,
            interpretation=interpretation
        )

    def timeline(self) -> pd.DataFrame:
        """Articles per day, one column per label"""
        if self._df.empty:
            return pd.DataFrame(columns=['date', *ARTICLE_TYPES])

        counts = (
            self._df.groupby(['date', 'type'])
            .size()
            .unstack(fill_value=0)
            .reindex(columns=list(ARTICLE_TYPES), fill_value=0)
            .sort_index()
        )
        counts.columns.name = None
        return counts.reset_index()

    def table_view(self) -> pd.DataFrame:
        """Display table with date, truncated title and labelled type"""
        return pd.DataFrame({
            'Date': self._df['date'].dt.strftime('%Y-%m-%d'),
            'Title': [
                TextProcessor.truncate_text(TextProcessor.to_utf8(title), TITLE_MAX_LENGTH)
                for title in self._df['title']
            ],
            'Type': [TYPE_LABELS.get(value, value) for value in self._df['type']],
        })

    def to_csv(self) -> bytes:
        """Serialise the records as UTF-8 CSV"""
        return self._df.to_csv(index=False, date_format='%Y-%m-%d').encode('utf-8')

    @staticmethod
    def export_filename(today: Optional[date] = None) -> str:
        today = today or date.today()
        return f"{EXPORT_FILE_PREFIX}{today.isoformat()}.csv"
