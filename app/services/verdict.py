"""
Keyword bucketing of free-text model output into a verdict.

The confidence is synthetic: it is drawn uniformly from a range chosen by the
label and says nothing about the model's own certainty.
"""
import logging
import random
from typing import Callable, Dict, Tuple

from app.schemas.verdict import Verdict, VerdictLabel

logger = logging.getLogger(__name__)

RandomSource = Callable[[], float]

# Checked in order; the first label whose keywords appear wins
KEYWORDS: Tuple[Tuple[VerdictLabel, Tuple[str, ...]], ...] = (
    (VerdictLabel.FAKE, ("likely fake", "misinformation", "false")),
    (VerdictLabel.REAL, ("likely genuine", "likely real", "true")),
)

CONFIDENCE_RANGES: Dict[VerdictLabel, Tuple[float, float]] = {
    VerdictLabel.FAKE: (0.85, 1.0),
    VerdictLabel.REAL: (0.85, 1.0),
    VerdictLabel.UNCERTAIN: (0.4, 0.7),
}


def infer_label(analysis_text: str) -> VerdictLabel:
    normalized = analysis_text.lower()
    for label, keywords in KEYWORDS:
        if any(keyword in normalized for keyword in keywords):
            return label
    return VerdictLabel.UNCERTAIN


def draw_confidence(label: VerdictLabel, random_source: RandomSource = random.random) -> float:
    low, high = CONFIDENCE_RANGES[label]
    confidence = low + random_source() * (high - low)
    return min(high, max(low, confidence))


def classify(analysis_text: str, random_source: RandomSource = random.random) -> Verdict:
    """Map analysis text to a verdict; ``random_source`` must return a float in [0, 1)"""
    label = infer_label(analysis_text)
    confidence = draw_confidence(label, random_source)
    logger.debug(f"Inferred verdict: {label.value} confidence: {confidence:.3f}")
    return Verdict(label=label, confidence=confidence)
