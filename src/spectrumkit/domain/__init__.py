"""Domain models for spectral analysis inputs and results."""

from spectrumkit.domain.models import (
    Complex,
    FloatArray,
    InputRejection,
    PhasorLeaf,
    Real,
    RejectReason,
    SpectralResult,
    SubSamplePlan,
)

__all__ = [
    "Complex",
    "FloatArray",
    "InputRejection",
    "PhasorLeaf",
    "Real",
    "RejectReason",
    "SpectralResult",
    "SubSamplePlan",
]
