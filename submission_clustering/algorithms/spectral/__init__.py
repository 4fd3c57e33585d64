"""Spectral clustering with Bayesian optimization over k."""

from .spectral import SpectralAlgorithm
from .laplacian import SpectralEmbedding
from .gaussian_process import GaussianProcessSurrogate
from .optimization import Observation, ObservationLog, propose_next_k

__all__ = [
    "SpectralAlgorithm",
    "SpectralEmbedding",
    "GaussianProcessSurrogate",
    "Observation",
    "ObservationLog",
    "propose_next_k",
]
