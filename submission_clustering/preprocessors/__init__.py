"""Similarity preprocessors.

This module provides the transforms applied before clustering:
    - none: Identity
    - cdf: Weight every similarity by its empirical CDF value
    - percentile: Zero similarities below a percentile
    - threshold: Zero similarities below a fixed value
"""

from typing import Dict, Type

from ..core.base import BasePreprocessor
from ..core.errors import ClusteringConfigurationError
from .none import NoPreprocessor
from .cdf import CumulativeDistributionPreprocessor
from .percentile import PercentilePreprocessor
from .threshold import ThresholdPreprocessor
from .wrapped import PreprocessedAlgorithm

# Registry of available preprocessors
PREPROCESSOR_REGISTRY: Dict[str, Type[BasePreprocessor]] = {
    "none": NoPreprocessor,
    "cdf": CumulativeDistributionPreprocessor,
    "percentile": PercentilePreprocessor,
    "threshold": ThresholdPreprocessor,
}


def create_preprocessor(preprocessor_type: str, **kwargs) -> BasePreprocessor:
    """Factory function to create preprocessor instances.

    Args:
        preprocessor_type: Name of the preprocessor. One of:
            - "none": Identity
            - "cdf": Empirical CDF weighting
            - "percentile": Percentile cut
            - "threshold": Fixed threshold cut
        **kwargs: Preprocessor-specific parameters.
            For percentile: percentile (float) in [0, 1], default 0.5
            For threshold: threshold (float), default 0.2

    Returns:
        Configured preprocessor instance.

    Raises:
        ClusteringConfigurationError: If preprocessor_type is not recognized.
    """
    key = str(preprocessor_type).lower()
    if key not in PREPROCESSOR_REGISTRY:
        available = list(PREPROCESSOR_REGISTRY.keys())
        raise ClusteringConfigurationError(
            f"Unknown preprocessor type: {preprocessor_type}. "
            f"Available: {available}"
        )

    preprocessor_class = PREPROCESSOR_REGISTRY[key]

    if key == "percentile":
        return preprocessor_class(percentile=kwargs.get("percentile", 0.5))
    elif key == "threshold":
        return preprocessor_class(threshold=kwargs.get("threshold", 0.2))
    else:
        return preprocessor_class()


__all__ = [
    "BasePreprocessor",
    "NoPreprocessor",
    "CumulativeDistributionPreprocessor",
    "PercentilePreprocessor",
    "ThresholdPreprocessor",
    "PreprocessedAlgorithm",
    "create_preprocessor",
    "PREPROCESSOR_REGISTRY",
]
