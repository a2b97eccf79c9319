"""Provider-neutral annotation types returned by every VisionClient."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Feature(str, Enum):
    LABEL_DETECTION = "LABEL_DETECTION"
    TEXT_DETECTION = "TEXT_DETECTION"
    SAFE_SEARCH_DETECTION = "SAFE_SEARCH_DETECTION"


# Requested together in a single round trip.
ANALYSIS_FEATURES: tuple[Feature, ...] = (
    Feature.LABEL_DETECTION,
    Feature.TEXT_DETECTION,
    Feature.SAFE_SEARCH_DETECTION,
)


class Likelihood(str, Enum):
    """Categorical likelihood scale, ordered low → high after UNKNOWN."""

    UNKNOWN = "UNKNOWN"
    VERY_UNLIKELY = "VERY_UNLIKELY"
    UNLIKELY = "UNLIKELY"
    POSSIBLE = "POSSIBLE"
    LIKELY = "LIKELY"
    VERY_LIKELY = "VERY_LIKELY"


@dataclass(frozen=True)
class LabelAnnotation:
    description: str
    score: float


@dataclass(frozen=True)
class TextAnnotation:
    description: str


@dataclass(frozen=True)
class SafeSearchAnnotation:
    adult: Likelihood
    violence: Likelihood
    racy: Likelihood
    spoof: Likelihood = Likelihood.UNKNOWN
    medical: Likelihood = Likelihood.UNKNOWN


@dataclass(frozen=True)
class NativeAnnotationResult:
    """Everything the provider detected. Empty tuples / None mean "no detection"."""

    labels: tuple[LabelAnnotation, ...] = ()
    texts: tuple[TextAnnotation, ...] = ()
    safe_search: Optional[SafeSearchAnnotation] = None
