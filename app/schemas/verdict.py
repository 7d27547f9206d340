from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

VERDICT_TITLES = {
    "real": "Likely REAL News",
    "fake": "Likely FAKE News",
    "uncertain": "Uncertain - Needs Verification",
}


class VerdictLabel(str, Enum):
    REAL = "real"
    FAKE = "fake"
    UNCERTAIN = "uncertain"


class Verdict(BaseModel):
    label: VerdictLabel
    confidence: float = Field(..., ge=0.0, le=1.0)

    model_config = ConfigDict(frozen=True)

    @property
    def title(self) -> str:
        return VERDICT_TITLES[self.label.value]

    @property
    def confidence_percent(self) -> int:
        # Round half up, matching how the score has always been displayed
        return int(self.confidence * 100 + 0.5)

    def confidence_display(self) -> str:
        return f"Confidence: {self.confidence_percent}%"


class VerdictRequest(BaseModel):
    analysis: str = Field(..., description="Free-text analysis to classify")


class VerdictResponse(BaseModel):
    label: VerdictLabel
    confidence: float
    title: str
    confidence_percent: int
    confidence_display: str

    @classmethod
    def from_verdict(cls, verdict: Verdict) -> "VerdictResponse":
        return cls(
            label=verdict.label,
            confidence=verdict.confidence,
            title=verdict.title,
            confidence_percent=verdict.confidence_percent,
            confidence_display=verdict.confidence_display(),
        )
