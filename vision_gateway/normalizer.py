"""Response normalizer — native annotations → stable client contract. Pure, never raises."""
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

from vision_gateway.annotations import (
    LabelAnnotation,
    Likelihood,
    NativeAnnotationResult,
    SafeSearchAnnotation,
    TextAnnotation,
)
from vision_gateway.constants import CONFIDENCE_FORMAT, MAX_LABELS, NO_TEXT_DETECTED

_ONE_DECIMAL = Decimal("0.1")
_PERCENT = Decimal(100)


@dataclass(frozen=True)
class LabelSummary:
    description: str
    confidence: str


@dataclass(frozen=True)
class SafetySummary:
    adult: Likelihood
    violence: Likelihood
    racy: Likelihood


@dataclass(frozen=True)
class StableAnalysisResult:
    labels: tuple[LabelSummary, ...]
    text: str
    safety: Optional[SafetySummary] = None

    def to_dict(self) -> dict[str, Any]:
        """JSON body for the client; the safety key is left out when nothing was reported."""
        data: dict[str, Any] = {
            "labels": [
                {"description": label.description, "confidence": label.confidence}
                for label in self.labels
            ],
            "text": self.text,
        }
        match self.safety:
            case None:
                pass
            case SafetySummary() as safety:
                data["safety"] = {
                    "adult": safety.adult.value,
                    "violence": safety.violence.value,
                    "racy": safety.racy.value,
                }
        return data


# ── pure helpers (module-level so tests can import them directly) ──────────────


def format_confidence(score: float) -> str:
    """0.8675 → "86.8%" (half-up on the score as written, not its binary expansion)."""
    if not math.isfinite(score):
        return CONFIDENCE_FORMAT.format(score * 100)
    percent = (Decimal(repr(score)) * _PERCENT).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    return CONFIDENCE_FORMAT.format(percent)


def summarize_labels(labels: tuple[LabelAnnotation, ...]) -> tuple[LabelSummary, ...]:
    # Provider order is trusted as confidence-descending; truncate, never re-rank.
    return tuple(
        LabelSummary(description=label.description, confidence=format_confidence(label.score))
        for label in labels[:MAX_LABELS]
    )


def extract_text(texts: tuple[TextAnnotation, ...]) -> str:
    match texts:
        case (first, *_):
            return first.description
        case _:
            return NO_TEXT_DETECTED


def project_safety(safe_search: Optional[SafeSearchAnnotation]) -> Optional[SafetySummary]:
    match safe_search:
        case None:
            return None
        case SafeSearchAnnotation(adult=adult, violence=violence, racy=racy):
            return SafetySummary(adult=adult, violence=violence, racy=racy)


def normalize(native: NativeAnnotationResult) -> StableAnalysisResult:
    return StableAnalysisResult(
        labels=summarize_labels(native.labels),
        text=extract_text(native.texts),
        safety=project_safety(native.safe_search),
    )
