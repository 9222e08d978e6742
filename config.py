"""
Configuration settings for the COVID-19 Misinformation Detection Dashboard
"""
import os
from pathlib import Path
from types import MappingProxyType

# Base paths
BASE_DIR = Path(__file__).parent
DATA_DIR = BASE_DIR / "data"
DATA_FILE = Path(os.getenv("COAID_DATA_FILE", str(DATA_DIR / "CoAID_data.csv")))

# Logging
LOG_LEVEL = os.getenv("COAID_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Dataset schema
REQUIRED_COLUMNS = ('title', 'publish_date', 'type')
ARTICLE_COLUMNS = ('title', 'content', 'publish_date', 'date', 'type')
ARTICLE_TYPES = ('real', 'fake')

# Formats tried in order when parsing publish dates; first match wins
DATE_FORMATS = (
    '%Y-%m-%d %H:%M:%S',
    '%Y-%m-%dT%H:%M:%S',
    '%Y-%m-%dT%H:%M:%SZ',
    '%Y-%m-%d',
    '%Y/%m/%d',
    '%d-%m-%Y',
    '%d/%m/%Y',
    '%d.%m.%Y',
    '%m-%d-%Y',
    '%m/%d/%Y',
    '%B %d, %Y',
    '%b %d, %Y',
)

# Sample data used when no CSV is available
SAMPLE_DATA_SEED = 42
SAMPLE_DATA_SIZE = 100
SAMPLE_DATE_START = '2020-02-01'
SAMPLE_DATE_END = '2020-12-31'
SAMPLE_TYPE_PROBABILITIES = {'real': 0.95, 'fake': 0.05}

SAMPLE_TITLES = (
    "CDC Reports Vaccine Safety Data",
    "WHO Announces New Guidelines",
    "Peer-reviewed Study Shows Efficacy",
    "Clinical Trial Results Published",
    "Conspiracy Theory About Vaccines",
    "Unproven Claims About Side Effects",
    "Medical Journal Publishes Research",
    "Healthcare Workers Recommend Vaccination",
    "Misinformation Spreads on Social Media",
    "Expert Panel Discusses Safety",
)

SAMPLE_CONTENT = (
    "The CDC has released comprehensive safety data showing vaccines are safe and effective.",
    "WHO announces new vaccination guidelines based on latest research evidence.",
    "A peer-reviewed study in Nature demonstrates high vaccine efficacy rates.",
    "Clinical trial results show significant protection against severe disease.",
    "False claims about vaccine ingredients spread despite scientific evidence.",
    "Unsubstantiated side effect claims circulate without medical evidence.",
    "Medical journal publishes rigorous analysis of vaccination benefits.",
    "Healthcare professionals strongly recommend vaccination for public health.",
    "Social media platforms combat spread of vaccine misinformation.",
    "Expert panel reviews comprehensive safety and efficacy data.",
)

# Keyword weights per weight class
STRONG = 'strong'
MODERATE = 'moderate'
KEYWORD_WEIGHTS = MappingProxyType({STRONG: 3, MODERATE: 1})

# Misinformation-leaning keywords (keyword -> weight class)
MISINFORMATION_KEYWORDS = MappingProxyType({
    **dict.fromkeys([
        'plandemic', 'scamdemic', 'hoax', 'fake virus', 'fake pandemic',
        'microchip', '5g', 'depopulation', 'genocide', 'poison',
        'bill gates', 'new world order', 'population control',
        'dna changing', 'gene therapy', 'magnetic', 'tracking device',
        'wake up sheeple', 'sheep', 'they want to control',
        'big pharma conspiracy', 'follow the money', 'hidden agenda',
    ], STRONG),
    **dict.fromkeys([
        'dangerous', 'harmful', 'toxic', 'unsafe', 'untested',
        'experimental', 'rushed', 'not approved', 'side effects',
        'natural immunity', 'immune system', 'healthy lifestyle',
    ], MODERATE),
})

# Reliability-leaning keywords (keyword -> weight class)
RELIABLE_KEYWORDS = MappingProxyType({
    **dict.fromkeys([
        'cdc', 'who', 'fda', 'nih', 'peer-reviewed', 'clinical trial',
        'mayo clinic', 'johns hopkins', 'harvard medical', 'stanford',
        'new england journal', 'lancet', 'jama', 'nature',
        'systematic review', 'meta-analysis', 'randomized controlled',
        'pfizer', 'moderna', 'vaccine efficacy', 'clinical data',
    ], STRONG),
    **dict.fromkeys([
        'vaccine', 'vaccination', 'immunization', 'health', 'medical',
        'doctor', 'physician', 'hospital', 'treatment', 'prevention',
        'study', 'research', 'data', 'evidence', 'science',
    ], MODERATE),
})

# Text-quality heuristics
EXCESSIVE_PUNCTUATION_PATTERN = r'!{3,}|\?{3,}'
CAPS_WORD_PATTERN = r'\b[A-Z]{3,}\b'
CAPS_WORD_LIMIT = 2
CAPS_PENALTY = 2

# Decision thresholds
STRONG_SIGNAL_THRESHOLD = 3
POSSIBLE_MISINFORMATION_MIN_SCORE = 5
SUBSTANTIAL_WORD_COUNT = 20
MIN_WORD_COUNT = 10

# Live monitoring simulation
LIVE_REFRESH_SECONDS = 5
LIVE_FEED_SIZE = 6
LIVE_FEED_SPACING_SECONDS = 60
LIVE_SOURCES = ('Twitter', 'Facebook', 'Reddit', 'News Site', 'Blog')
LIVE_RESULT_PROBABILITIES = {
    'Misinformation': 0.05,
    'Reliable': 0.85,
    'Needs Verification': 0.10,
}
LIVE_CONFIDENCE_RANGE = (0.75, 0.97)
LIVE_STATS_HOURS = 24
LIVE_STATS_RATES = {'total': 25, 'misinformation': 2, 'reliable': 20}

# Figures quoted by the research write-up; not produced by the heuristic scorer
REPORTED_MODEL_ACCURACY = "96.75%"
REPORTED_MODEL_METRICS = {
    'Accuracy': '96.75%',
    'Precision': '96.96%',
    'Recall': '96.75%',
    'F1-Score': '96.84%',
    'AUC-ROC': '0.97',
}

# UI Configuration
PAGE_TITLE = "COVID-19 Misinformation Detection System"
PAGE_ICON = "🦠"
TITLE_MAX_LENGTH = 80
TABLE_PAGE_SIZE = 10
EXPORT_FILE_PREFIX = "coaid_misinformation_data_"

COLORS = {
    'real': '#27AE60',
    'fake': '#E74C3C',
    'warning': '#F39C12',
    'info': '#3498DB',
    'muted': '#666666',
    'primary': '#2C3E50',
}
