"""
Main Streamlit application for the COVID-19 Misinformation Detection Dashboard
"""
import json
import logging
from datetime import date

import streamlit as st

# Import our modular components
from core.dataset import ArticleDataset
from core.detection_system import MisinformationDetectionSystem
from models.data_models import DashboardEncoder
from ui.components import UIComponents
from ui.dashboard import Dashboard
from config import (
    PAGE_TITLE, PAGE_ICON, LOG_LEVEL, LOG_FORMAT,
    LIVE_REFRESH_SECONDS, REPORTED_MODEL_ACCURACY
)

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


def initialize_session_state():
    """Initialize session state variables"""
    if 'detection_system' not in st.session_state:
        st.session_state.detection_system = None

    if 'classification_result' not in st.session_state:
        st.session_state.classification_result = None

    if 'classified_text' not in st.session_state:
        st.session_state.classified_text = ""


def load_system():
    """Load and initialize the detection system"""
    if st.session_state.detection_system is None:
        with st.spinner("Loading article corpus..."):
            system = MisinformationDetectionSystem()
            if not system.initialize_system():
                st.error("No articles with valid publish dates could be loaded. Please check the data file.")
                return False
            st.session_state.detection_system = system

    return True


def render_sidebar_filters(dataset: ArticleDataset) -> ArticleDataset:
    """Render date and type filters and return the filtered dataset"""
    st.sidebar.markdown("---")
    st.sidebar.subheader("Filters")

    start, end = dataset.date_bounds()
    selected_dates = st.sidebar.date_input(
        "Published between",
        value=(start, end),
        min_value=start,
        max_value=end
    )
    # A range picker returns a single date until both ends are chosen
    if isinstance(selected_dates, (tuple, list)) and len(selected_dates) == 2:
        start, end = selected_dates
    elif isinstance(selected_dates, (tuple, list)) and len(selected_dates) == 1:
        start = selected_dates[0]
    elif isinstance(selected_dates, date):
        start = selected_dates

    article_type = st.sidebar.selectbox("Type", ["all", "real", "fake"], index=0)

    return dataset.filter(start, end, article_type)


def main():
    """Main Streamlit application"""
    configure_logging()

    st.set_page_config(
        page_title=PAGE_TITLE,
        page_icon=PAGE_ICON,
        layout="wide",
        initial_sidebar_state="expanded"
    )

    # Initialize session state
    initialize_session_state()

    # Main title
    st.title(f"{PAGE_ICON} {PAGE_TITLE}")
    st.markdown("*Exploring the CoAID COVID-19 corpus and scoring text for misinformation signals*")

    # Load system
    if not load_system():
        st.stop()

    system = st.session_state.detection_system
    ui_components = UIComponents()
    dashboard = Dashboard()

    # Sidebar navigation
    st.sidebar.title("Navigation")

    view_options = {
        "📊 Dashboard": "dashboard",
        "🗂️ Data Explorer": "explorer",
        "📡 Live Monitoring": "monitoring",
        "🔍 Classify Text": "classify",
        "🎓 About Research": "research"
    }

    selected_view = st.sidebar.selectbox(
        "Select View",
        options=list(view_options.keys()),
        index=0
    )
    current_view = view_options[selected_view]

    filtered = render_sidebar_filters(system.dataset)

    with st.sidebar:
        st.markdown("---")
        st.subheader("Dataset")
        if system.dataset.source == 'sample':
            st.info("Using generated sample data (no CSV found)")
        else:
            st.success("Loaded from CSV")
        st.metric("Total Articles", len(system.dataset))

    if current_view == "dashboard":
        render_dashboard_view(system, filtered, ui_components, dashboard)

    elif current_view == "explorer":
        render_explorer_view(filtered, ui_components, dashboard)

    elif current_view == "monitoring":
        render_monitoring_view(system, ui_components, dashboard)

    elif current_view == "classify":
        render_classify_view(system, ui_components)

    elif current_view == "research":
        render_research_view(system, ui_components)


def report_view_error(ui_components, context, error):
    """Log a view failure and show it in place of the view content"""
    logger.exception("%s rendering failed", context)
    ui_components.render_error_message(str(error), context=context)


def render_dashboard_view(system, filtered, ui_components, dashboard):
    """Render the dashboard view"""
    st.header("📊 Dashboard")

    try:
        stats = system.get_statistics(filtered)

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Total Articles", stats.total_articles)
        with col2:
            st.metric("Misinformation", stats.misinformation_count)
        with col3:
            st.metric(
                "Reported Model Accuracy",
                REPORTED_MODEL_ACCURACY,
                help="Quoted from the research write-up; the live classifier is a keyword heuristic"
            )

        col1, col2 = st.columns(2)
        with col1:
            st.subheader("Real vs Fake Distribution")
            dashboard.render_distribution(filtered)
        with col2:
            st.subheader("Articles Over Time")
            dashboard.render_timeline(filtered)

    except Exception as e:
        report_view_error(ui_components, "Dashboard", e)


def render_explorer_view(filtered, ui_components, dashboard):
    """Render the data explorer view"""
    st.header("🗂️ Dataset Explorer")

    try:
        col1, col2 = st.columns([3, 1])
        with col1:
            st.caption(f"{len(filtered)} articles match the current filters")
        with col2:
            st.download_button(
                label="Download CSV",
                data=filtered.to_csv(),
                file_name=ArticleDataset.export_filename(),
                mime="text/csv",
                type="primary"
            )

        dashboard.render_data_table(filtered)

    except Exception as e:
        report_view_error(ui_components, "Data Explorer", e)


def render_monitoring_view(system, ui_components, dashboard):
    """Render the simulated live monitoring view"""
    st.header("📡 Live Monitoring")
    st.caption("Simulated feed for demonstration; no live sources are ingested.")

    # The fragment reruns on its own timer, so it handles its own failures
    @st.fragment(run_every=LIVE_REFRESH_SECONDS)
    def live_panel():
        try:
            col1, col2 = st.columns(2)
            with col1:
                st.subheader("Live Detection Feed")
                with st.container(height=400):
                    ui_components.render_live_detections(system.monitoring_engine.generate_detections())
            with col2:
                st.subheader("Hourly Detection Statistics")
                dashboard.render_live_stats(system.monitoring_engine.generate_hourly_stats())

        except Exception as e:
            report_view_error(ui_components, "Live Monitoring", e)

    live_panel()


def render_classify_view(system, ui_components):
    """Render the text classification view"""
    st.header("🔍 Text Classification")

    try:
        col1, col2 = st.columns([2, 1])

        with col1:
            st.subheader("Advanced Text Classification")
            user_snippet = st.text_area(
                "Enter text to analyze for misinformation:",
                placeholder="Paste COVID-19 related content here for analysis...",
                height=200
            )

            if st.button("Analyze Text", type="primary", use_container_width=True):
                if user_snippet:
                    st.session_state.classification_result = system.classify_text(user_snippet)
                    st.session_state.classified_text = user_snippet
                else:
                    st.warning("Enter some text to analyze.")

        result = st.session_state.classification_result

        with col2:
            st.subheader("Classification Results")
            if result is None:
                ui_components.render_classification_placeholder()
            else:
                ui_components.render_classification_result(result)
                ui_components.render_classification_details(result)

        if result is not None:
            st.subheader("Classification Explanation")
            ui_components.render_classification_explanation(
                result,
                system.classifier.get_verdict_explanation(result.verdict)
            )
            with st.expander("Matched indicator keywords"):
                ui_components.render_matched_keywords(
                    system.get_matched_keywords(st.session_state.classified_text)
                )

    except Exception as e:
        report_view_error(ui_components, "Classify Text", e)


def render_research_view(system, ui_components):
    """Render the research background view"""
    st.header("🎓 Research Project: COVID-19 Misinformation Detection")

    st.markdown(
        """
        **Dataset.** The CoAID corpus collects COVID-19 news articles labeled as reliable (`real`)
        or misinformation (`fake`). The labeled data is heavily imbalanced, with roughly 95% of
        articles labeled reliable.

        **Research model.** The accompanying research fine-tuned a RoBERTa transformer on the
        corpus with class balancing and bootstrap validation.

        **This dashboard.** The *Classify Text* view does not run that model. It scores text with
        a transparent keyword heuristic:

        - strong indicators (weight 3) such as *plandemic* or *microchip* versus *CDC* or
          *clinical trial*
        - moderate indicators (weight 1) such as *untested* versus *vaccine* or *evidence*
        - bursts of `!!!`/`???` and frequent ALL-CAPS words add to the misinformation score
        - a fixed, ordered set of thresholds turns the scores into a verdict
        """
    )

    try:
        st.subheader("Reported Research Results")
        ui_components.render_reported_metrics()

        with st.expander("System Info"):
            st.json(json.dumps(system.get_system_health(), cls=DashboardEncoder))

    except Exception as e:
        report_view_error(ui_components, "About Research", e)

    st.markdown("---")
    st.markdown("🛠️ **Built with:** Streamlit, pandas, Plotly")


if __name__ == "__main__":
    main()
