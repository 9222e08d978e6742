"""
Dashboard components for corpus visualizations
"""
import streamlit as st
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from core.dataset import ArticleDataset
from models.data_models import DistributionSummary
from config import COLORS, TABLE_PAGE_SIZE


class Dashboard:
    """Charts and tables for the labeled article corpus and the live feed"""

    def __init__(self):
        self.color_palette = COLORS

    def build_detection_pie(self, dataset: ArticleDataset) -> go.Figure:
        """Pie chart of real vs fake article counts"""
        counts = dataset.label_counts()
        df = pd.DataFrame(
            [(label, n) for label, n in counts.items() if n > 0],
            columns=['type', 'n']
        )

        fig = px.pie(
            df,
            names='type',
            values='n',
            color='type',
            color_discrete_map={
                'real': self.color_palette['real'],
                'fake': self.color_palette['fake']
            }
        )
        fig.update_layout(title="Real vs Misinformation Distribution", font=dict(size=14))
        return fig

    def build_timeline_chart(self, dataset: ArticleDataset) -> go.Figure:
        """Line chart of reliable content vs misinformation per day"""
        timeline = dataset.timeline()

        fig = go.Figure()
        fig.add_trace(go.Scatter(
            x=timeline['date'],
            y=timeline['real'],
            mode='lines',
            name='Reliable Content',
            line=dict(color=self.color_palette['real'], width=3)
        ))
        fig.add_trace(go.Scatter(
            x=timeline['date'],
            y=timeline['fake'],
            mode='lines',
            name='Misinformation',
            line=dict(color=self.color_palette['fake'], width=3)
        ))
        fig.update_layout(
            title="Content Distribution Over Time",
            xaxis_title="Date",
            yaxis_title="Number of Articles",
            font=dict(size=12)
        )
        return fig

    def build_live_stats_chart(self, stats: pd.DataFrame) -> go.Figure:
        """Line chart of simulated hourly detection counts"""
        series = [
            ('total', "Total Detections", self.color_palette['info']),
            ('misinformation', "Misinformation", self.color_palette['fake']),
            ('reliable', "Reliable Content", self.color_palette['real']),
        ]

        fig = go.Figure()
        for column, name, color in series:
            fig.add_trace(go.Scatter(
                x=stats['time'],
                y=stats[column],
                mode='lines',
                name=name,
                line=dict(color=color, width=2)
            ))
        fig.update_layout(
            title="Real-time Detection Statistics",
            xaxis_title="Time",
            yaxis_title="Count",
            font=dict(size=12)
        )
        return fig

    def render_distribution(self, dataset: ArticleDataset):
        """Render pie chart with its interpretation panel"""
        if len(dataset) == 0:
            st.info("No articles match the current filters")
            return

        st.plotly_chart(self.build_detection_pie(dataset), use_container_width=True)
        self.render_distribution_interpretation(dataset.distribution_summary())

    def render_distribution_interpretation(self, summary: DistributionSummary):
        st.markdown(
            f"<div style='background: #f8f9fa; padding: 15px; border-radius: 5px; margin-top: 10px;'>"
            f"<strong>Analysis:</strong> {summary.total} total articles<br>"
            f"<span style='color: {self.color_palette['real']};'><strong>{summary.real_pct:.1f}%</strong> Reliable content</span><br>"
            f"<span style='color: {self.color_palette['fake']};'><strong>{summary.fake_pct:.1f}%</strong> Misinformation</span><br>"
            f"<em>{summary.interpretation}</em>"
            f"</div>",
            unsafe_allow_html=True
        )

    def render_timeline(self, dataset: ArticleDataset):
        """Render timeline chart with explanatory note"""
        if len(dataset) == 0:
            st.info("No articles match the current filters")
            return

        st.plotly_chart(self.build_timeline_chart(dataset), use_container_width=True)
        st.info(
            "**Temporal Analysis:** This timeline shows the distribution of reliable content vs "
            "misinformation over time. Use the sidebar filters to explore specific time periods "
            "and observe patterns in misinformation spread."
        )

    def render_data_table(self, dataset: ArticleDataset):
        """Render the explorer table"""
        table = dataset.table_view()
        st.dataframe(
            table,
            use_container_width=True,
            hide_index=True,
            height=min(len(table), TABLE_PAGE_SIZE) * 35 + 38
        )

    def render_live_stats(self, stats: pd.DataFrame):
        st.plotly_chart(self.build_live_stats_chart(stats), use_container_width=True)
