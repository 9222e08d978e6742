from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_FILE = str(Path(__file__).resolve().parent.parent / "main.py")


@pytest.fixture
def app(monkeypatch, tmp_path):
    """
    Run the dashboard against generated sample data.
    """
    monkeypatch.setattr("config.DATA_FILE", tmp_path / "absent.csv")
    monkeypatch.setattr("engines.ingestion_engine.DATA_FILE", tmp_path / "absent.csv")
    at = AppTest.from_file(APP_FILE, default_timeout=30)
    at.run()
    return at


def test_dashboard_renders(app):
    assert not app.exception
    assert app.header[0].value == "📊 Dashboard"
    assert app.metric[0].value == "100"


def test_classify_view_scores_text(app):
    app.sidebar.selectbox[0].select("🔍 Classify Text").run()
    app.text_area[0].input("This is a plandemic using microchip and 5g to control population control.").run()
    app.button[0].click().run()

    assert not app.exception
    result = app.session_state.classification_result
    assert result.verdict == "Likely Misinformation"
    assert result.confidence == 95.0


def test_view_failure_is_reported_in_place(app, monkeypatch):
    """
    Given the CSV export raises, the explorer shows the error panel
    instead of crashing the app.
    """
    def broken_to_csv(self):
        raise RuntimeError("disk full")

    monkeypatch.setattr("core.dataset.ArticleDataset.to_csv", broken_to_csv)

    app.sidebar.selectbox[0].select("🗂️ Data Explorer").run()

    assert not app.exception
    assert "An error occurred" in app.error[0].value
    assert any("disk full" in block.value for block in app.markdown)


def test_research_view_renders_system_info(app):
    app.sidebar.selectbox[0].select("🎓 About Research").run()

    assert not app.exception
    assert not app.error
