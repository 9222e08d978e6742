"""
UI components for the Misinformation Detection Dashboard
"""
import streamlit as st
from typing import List

from models.data_models import ClassificationResult, LiveDetection, MatchedKeywords, Verdict
from config import COLORS, REPORTED_MODEL_METRICS


class UIComponents:
    """Reusable UI components for the Misinformation Detection Dashboard"""

    def __init__(self):
        self.colors = COLORS
        self.verdict_styles = {
            Verdict.LIKELY_MISINFORMATION: (self.colors['fake'], "⚠️"),
            Verdict.LIKELY_RELIABLE: (self.colors['real'], "✅"),
        }
        self.feed_styles = {
            'Misinformation': (st.error, "⚠️"),
            'Reliable': (st.success, "✅"),
        }

    def verdict_style(self, verdict: str):
        """Colour and icon for a verdict; anything uncertain is amber"""
        return self.verdict_styles.get(verdict, (self.colors['warning'], "❓"))

    def render_classification_placeholder(self):
        st.markdown(
            "<p style='text-align: center; color: #666;'>ℹ️<br>"
            "Enter text and click 'Analyze Text' to see results</p>",
            unsafe_allow_html=True
        )

    def render_classification_result(self, result: ClassificationResult):
        """Render the verdict card"""
        color, icon = self.verdict_style(result.verdict)

        st.markdown(
            f"<div style='background: {color}; color: white; padding: 20px; "
            f"border-radius: 10px; text-align: center;'>"
            f"<div style='font-size: 3em; margin-bottom: 15px;'>{icon}</div>"
            f"<h3 style='margin: 0 0 10px 0; color: white;'>{result.verdict}</h3>"
            f"<p style='font-size: 1.2em; margin: 0;'><strong>{result.confidence:.1f}% Confidence</strong></p>"
            f"</div>",
            unsafe_allow_html=True
        )

    def render_classification_details(self, result: ClassificationResult):
        """Render the score breakdown"""
        if not result.has_breakdown:
            return

        st.markdown(
            f"<div style='margin-top: 15px; font-size: 0.9em; background: #f8f9fa; "
            f"padding: 15px; border-radius: 5px;'>"
            f"<strong>Analysis Breakdown:</strong><br>"
            f"<span style='color: {self.colors['real']};'>✓ Strong reliable signals: {result.strong_reliable}</span><br>"
            f"<span style='color: {self.colors['info']};'>ℹ Total reliable indicators: {result.reliable_indicators}</span><br>"
            f"<span style='color: {self.colors['fake']};'>⚠ Strong misinfo signals: {result.strong_misinfo}</span><br>"
            f"<span style='color: {self.colors['warning']};'>⚡ Total misinfo indicators: {result.misinformation_indicators}</span><br>"
            f"<span style='color: {self.colors['muted']};'>📝 Word count: {result.word_count}</span>"
            f"<hr style='margin: 10px 0;'>"
            f"<small><em>Punctuation bursts: {result.excessive_punctuation} · "
            f"All-caps penalty: {result.caps_penalty}</em></small>"
            f"</div>",
            unsafe_allow_html=True
        )

    def render_classification_explanation(self, result: ClassificationResult, explanation: str):
        """Render the explanation panel for a verdict"""
        if result.verdict == Verdict.UNKNOWN:
            return

        st.markdown(explanation)
        st.caption(
            "**Methodology:** This assessment comes from a rule-based keyword heuristic that weighs "
            "references to credible medical institutions against conspiracy and alarmist language, "
            "plus punctuation and all-caps signals. It is not the transformer model described in "
            "the research write-up."
        )

    def render_matched_keywords(self, matched: MatchedKeywords):
        """Render the keywords that contributed to the score"""
        if matched.is_empty():
            st.caption("No indicator keywords found")
            return

        groups = [
            ("Strong misinformation", matched.strong_misinfo),
            ("Moderate misinformation", matched.moderate_misinfo),
            ("Strong reliable", matched.strong_reliable),
            ("Moderate reliable", matched.moderate_reliable),
        ]
        for label, keywords in groups:
            if keywords:
                st.write(f"**{label}:** " + ", ".join(f"`{k}`" for k in keywords))

    def render_live_detections(self, detections: List[LiveDetection]):
        """Render the simulated detection feed"""
        for detection in detections:
            render, icon = self.feed_styles.get(detection.result, (st.warning, "❓"))
            render(
                f"{icon} **{detection.time_label}** — {detection.source} — {detection.result}"
                f" · {detection.confidence_pct}%"
            )

    def render_reported_metrics(self):
        """Render the metrics quoted by the research write-up"""
        cols = st.columns(len(REPORTED_MODEL_METRICS))
        for col, (label, value) in zip(cols, REPORTED_MODEL_METRICS.items()):
            with col:
                st.metric(label, value)
        st.caption(
            "Figures as reported for the RoBERTa-based research model on the CoAID corpus. "
            "The classifier running in this dashboard is the keyword heuristic and has not "
            "been evaluated against these numbers."
        )

    def render_error_message(self, error: str, context: str = ""):
        """Render standardized error message"""
        st.error("❌ An error occurred")

        with st.expander("Error Details"):
            if context:
                st.write(f"**Context:** {context}")
            st.write(f"**Error:** {error}")
