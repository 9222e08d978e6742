"""
Keyword heuristic classifier for COVID-19 misinformation
"""
from typing import Dict, Mapping, Optional, Tuple

from models.data_models import ClassificationResult, KeywordScores, MatchedKeywords, Verdict
from utils.text_processing import TextProcessor
from config import (
    MISINFORMATION_KEYWORDS, RELIABLE_KEYWORDS, KEYWORD_WEIGHTS, STRONG, MODERATE,
    CAPS_WORD_LIMIT, CAPS_PENALTY, STRONG_SIGNAL_THRESHOLD,
    POSSIBLE_MISINFORMATION_MIN_SCORE, SUBSTANTIAL_WORD_COUNT, MIN_WORD_COUNT
)


VERDICT_EXPLANATIONS = {
    Verdict.LIKELY_MISINFORMATION: (
        "⚠️ **Misinformation Detection:** This text contains strong indicators of misinformation "
        "including conspiracy language, unsubstantiated claims, or emotional manipulation tactics. "
        "It may spread false information about COVID-19 or vaccines. Always verify with "
        "authoritative medical sources like CDC, WHO, or peer-reviewed research."
    ),
    Verdict.POSSIBLY_MISINFORMATION: (
        "🔍 **Potential Misinformation:** This text shows some concerning patterns but isn't "
        "definitively misinformation. It may contain misleading information, unverified claims, "
        "or biased language. Exercise caution and cross-reference with multiple credible "
        "medical sources."
    ),
    Verdict.LIKELY_RELIABLE: (
        "✅ **Reliable Information:** This text demonstrates characteristics of trustworthy "
        "content, such as references to credible medical institutions, scientific evidence, or "
        "professional medical language. However, always verify important health information "
        "with your healthcare provider."
    ),
    Verdict.INSUFFICIENT_INFORMATION: (
        "📄 **Limited Content:** This text is too brief for confident classification. Short "
        "messages often lack sufficient context for accurate misinformation detection. Seek "
        "more detailed information from authoritative sources."
    ),
}

DEFAULT_EXPLANATION = (
    "🔍 **Needs Verification:** This text doesn't show strong indicators in either direction. "
    "While it may be reliable, it's important to verify any health claims with credible "
    "medical sources before making decisions."
)


def decide_verdict(scores: KeywordScores) -> Tuple[str, float]:
    """Map signal counts to a verdict and confidence.

    Branches are evaluated in order and the first match wins, so strong
    signals always take precedence over the aggregate scores.
    """
    total_misinfo = scores.total_misinfo
    total_reliable = scores.total_reliable

    if scores.strong_misinfo >= STRONG_SIGNAL_THRESHOLD:
        verdict = Verdict.LIKELY_MISINFORMATION
        confidence = min(95, 70 + 5 * scores.strong_misinfo)
    elif scores.strong_reliable >= STRONG_SIGNAL_THRESHOLD:
        verdict = Verdict.LIKELY_RELIABLE
        confidence = min(95, 75 + 3 * scores.strong_reliable)
    elif total_misinfo > total_reliable and total_misinfo >= POSSIBLE_MISINFORMATION_MIN_SCORE:
        verdict = Verdict.POSSIBLY_MISINFORMATION
        confidence = min(85, 60 + 3 * (total_misinfo - total_reliable))
    elif total_reliable > 0 or scores.word_count >= SUBSTANTIAL_WORD_COUNT:
        verdict = Verdict.LIKELY_RELIABLE
        confidence = min(90, 65 + 2 * total_reliable)
    elif scores.word_count < MIN_WORD_COUNT:
        verdict = Verdict.INSUFFICIENT_INFORMATION
        confidence = 40
    else:
        verdict = Verdict.LIKELY_RELIABLE
        confidence = 60

    return verdict, round(float(confidence), 1)


class ClassificationEngine:
    """Score free text against weighted misinformation and reliability keyword lists"""

    def __init__(self,
                 misinformation_keywords: Mapping[str, str] = MISINFORMATION_KEYWORDS,
                 reliable_keywords: Mapping[str, str] = RELIABLE_KEYWORDS,
                 weights: Mapping[str, int] = KEYWORD_WEIGHTS):
        self.text_processor = TextProcessor()
        self.weights = weights

        # Keywords go through the same normalisation as the text they are matched against
        self.misinformation_keywords = self._normalize_keywords(misinformation_keywords)
        self.reliable_keywords = self._normalize_keywords(reliable_keywords)

    def _normalize_keywords(self, keywords: Mapping[str, str]) -> Dict[str, Tuple[str, str]]:
        normalized = {}
        for keyword, weight_class in keywords.items():
            pattern = ' '.join(self.text_processor.normalize_for_matching(keyword).split())
            if pattern:
                normalized[keyword] = (pattern, weight_class)
        return normalized

    def classify(self, text: Optional[str]) -> ClassificationResult:
        """Classify text as reliable or misinformation"""
        if not text:
            return ClassificationResult.unknown()

        scores = self.score_text(text)
        verdict, confidence = decide_verdict(scores)

        return ClassificationResult.from_scores(scores, verdict, confidence)

    def score_text(self, text: str) -> KeywordScores:
        """Count weighted keyword hits and text-quality signals"""
        text_clean = self.text_processor.normalize_for_matching(text)

        misinfo_counts = self._count_keywords(text_clean, self.misinformation_keywords)
        reliable_counts = self._count_keywords(text_clean, self.reliable_keywords)

        # Text-quality signals use the raw text
        caps_words = self.text_processor.count_caps_words(text)

        return KeywordScores(
            strong_misinfo=misinfo_counts[STRONG] * self.weights[STRONG],
            moderate_misinfo=misinfo_counts[MODERATE] * self.weights[MODERATE],
            strong_reliable=reliable_counts[STRONG] * self.weights[STRONG],
            moderate_reliable=reliable_counts[MODERATE] * self.weights[MODERATE],
            excessive_punctuation=self.text_processor.count_excessive_punctuation(text),
            caps_penalty=CAPS_PENALTY if caps_words > CAPS_WORD_LIMIT else 0,
            word_count=self.text_processor.count_words(text),
        )

    def _count_keywords(self, text_clean: str,
                        keywords: Dict[str, Tuple[str, str]]) -> Dict[str, int]:
        counts = {STRONG: 0, MODERATE: 0}
        for pattern, weight_class in keywords.values():
            counts[weight_class] += self.text_processor.count_occurrences(text_clean, pattern)
        return counts

    def get_matched_keywords(self, text: Optional[str]) -> MatchedKeywords:
        """List the keywords found in text, grouped by polarity and weight class"""
        matched = MatchedKeywords()
        if not text:
            return matched

        text_clean = self.text_processor.normalize_for_matching(text)

        for keyword, (pattern, weight_class) in self.misinformation_keywords.items():
            if pattern in text_clean:
                target = matched.strong_misinfo if weight_class == STRONG else matched.moderate_misinfo
                target.append(keyword)

        for keyword, (pattern, weight_class) in self.reliable_keywords.items():
            if pattern in text_clean:
                target = matched.strong_reliable if weight_class == STRONG else matched.moderate_reliable
                target.append(keyword)

        return matched

    @staticmethod
    def get_verdict_explanation(verdict: str) -> str:
        """Generate a human-readable explanation for a verdict"""
        return VERDICT_EXPLANATIONS.get(verdict, DEFAULT_EXPLANATION)
