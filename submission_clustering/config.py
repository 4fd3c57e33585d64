"""Clustering configuration and named presets.

This module contains:
- ClusteringOptions: Frozen dataclass with all clustering parameters
- PRESETS: Named option overrides (default, agglomerative, fast, disabled)
- get_preset(): Lookup function for presets
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping

from .core.errors import ClusteringConfigurationError
from .core.metrics import METRIC_REGISTRY


ALGORITHMS = ("agglomerative", "spectral")
LINKAGES = ("min", "max", "average")
PREPROCESSORS = ("none", "cdf", "percentile", "threshold")


# =============================================================================
# Clustering Options
# =============================================================================

@dataclass(frozen=True)
class ClusteringOptions:
    """Configuration for one clustering run.

    Groups related parameters:
    - Basic: enabled, metric, algorithm, seed
    - Agglomerative: threshold, linkage
    - Spectral: GP bandwidth and noise, run budget, k-means cap, workers
    - Preprocessor: type, percentile, threshold

    Attributes:
        enabled: When False the run returns an empty result immediately.
        metric: Similarity metric (avg, max, min, intersection).
        algorithm: agglomerative or spectral.
        agglomerative_threshold: Clusters at or below this similarity are
            never merged. In [0, 1].
        agglomerative_linkage: min (complete), max (single) or average.
        spectral_bandwidth: GP length scale over k. Small values exploit
            locally, large values explore broadly.
        spectral_noise: GP observation noise variance (k-means variance).
        spectral_min_runs: Exploratory k-means runs seeding the GP.
        spectral_max_runs: Total k-means run budget.
        spectral_kmeans_iterations: Lloyd iteration cap per run.
        spectral_workers: Threads evaluating k-means runs.
        preprocessor: none, cdf, percentile or threshold.
        preprocessor_percentile: Fraction in [0, 1] for the percentile cut.
        preprocessor_threshold: Cut value for the threshold preprocessor.
        random_seed: Seed for every random choice of the run.
    """

    # Basic settings
    enabled: bool = True
    metric: str = "avg"
    algorithm: str = "spectral"
    random_seed: int = 42

    # Agglomerative settings
    agglomerative_threshold: float = 0.2
    agglomerative_linkage: str = "average"

    # Spectral settings
    spectral_bandwidth: float = 20.0
    spectral_noise: float = 0.05 ** 2
    spectral_min_runs: int = 5
    spectral_max_runs: int = 50
    spectral_kmeans_iterations: int = 200
    spectral_workers: int = 1

    # Preprocessor settings
    preprocessor: str = "cdf"
    preprocessor_percentile: float = 0.5
    preprocessor_threshold: float = 0.2

    def __post_init__(self):
        """Sanity checks to reject invalid configurations before any work."""
        for name in ("metric", "algorithm", "agglomerative_linkage", "preprocessor"):
            object.__setattr__(self, name, str(getattr(self, name)).lower())

        if self.metric not in METRIC_REGISTRY:
            raise ClusteringConfigurationError(
                f"Unknown metric '{self.metric}'. Available: {list(METRIC_REGISTRY.keys())}"
            )
        if self.algorithm not in ALGORITHMS:
            raise ClusteringConfigurationError(
                f"Unknown algorithm '{self.algorithm}'. Available: {list(ALGORITHMS)}"
            )
        if self.agglomerative_linkage not in LINKAGES:
            raise ClusteringConfigurationError(
                f"Unknown linkage '{self.agglomerative_linkage}'. Available: {list(LINKAGES)}"
            )
        if self.preprocessor not in PREPROCESSORS:
            raise ClusteringConfigurationError(
                f"Unknown preprocessor '{self.preprocessor}'. Available: {list(PREPROCESSORS)}"
            )
        if not 0.0 <= self.agglomerative_threshold <= 1.0:
            raise ClusteringConfigurationError("agglomerative_threshold must be in [0, 1]")
        if not 0.0 <= self.preprocessor_percentile <= 1.0:
            raise ClusteringConfigurationError("preprocessor_percentile must be in [0, 1]")
        if self.spectral_bandwidth <= 0:
            raise ClusteringConfigurationError("spectral_bandwidth must be > 0")
        if self.spectral_noise < 0:
            raise ClusteringConfigurationError("spectral_noise must be >= 0")
        if self.spectral_min_runs < 1:
            raise ClusteringConfigurationError("spectral_min_runs must be >= 1")
        if self.spectral_max_runs < self.spectral_min_runs:
            raise ClusteringConfigurationError("spectral_max_runs must be >= spectral_min_runs")
        if self.spectral_kmeans_iterations < 1:
            raise ClusteringConfigurationError("spectral_kmeans_iterations must be >= 1")
        if self.spectral_workers < 1:
            raise ClusteringConfigurationError("spectral_workers must be >= 1")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ClusteringOptions":
        """Build options from external keys.

        Accepts field names as well as dotted camelCase keys such as
        ``"spectral.minRuns"`` or ``"preprocessor.percentile"``.

        Raises:
            ClusteringConfigurationError: On unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in values.items():
            name = _field_name(key)
            if name not in known:
                raise ClusteringConfigurationError(f"Unknown clustering option '{key}'")
            kwargs[name] = value
        return cls(**kwargs)

    def with_overrides(self, **overrides) -> "ClusteringOptions":
        """Copy with some fields replaced (validated again)."""
        return replace(self, **overrides)


_KEY_ALIASES = {
    "seed": "random_seed",
    "spectral_k_means_iterations": "spectral_kmeans_iterations",
}


def _field_name(key: str) -> str:
    """'spectral.kMeansIterations' -> 'spectral_kmeans_iterations'."""
    snake = []
    for char in key.replace(".", "_"):
        if char.isupper():
            snake.append("_")
            snake.append(char.lower())
        else:
            snake.append(char)
    name = "".join(snake).strip("_")
    return _KEY_ALIASES.get(name, name)


# =============================================================================
# Presets
# =============================================================================

PRESETS: Dict[str, Dict[str, Any]] = {
    "default": {
        "options": {},
        "description": "Spectral clustering on CDF-weighted average similarity",
    },
    "agglomerative": {
        "options": {
            "algorithm": "agglomerative",
            "preprocessor": "none",
        },
        "description": "Average-linkage agglomerative clustering on raw similarity",
    },
    "fast": {
        "options": {
            "spectral_min_runs": 3,
            "spectral_max_runs": 10,
            "spectral_kmeans_iterations": 50,
        },
        "description": "Spectral clustering with a small run budget",
    },
    "disabled": {
        "options": {"enabled": False},
        "description": "Skip clustering entirely",
    },
}


def get_preset(name: str, **overrides) -> ClusteringOptions:
    """Get clustering options for a named preset.

    Args:
        name: Preset name (default, agglomerative, fast, disabled).
        **overrides: Fields replacing the preset values.

    Returns:
        ClusteringOptions for the preset.

    Raises:
        KeyError: If preset name is unknown.
    """
    if name not in PRESETS:
        raise KeyError(f"Unknown preset '{name}'. Available: {list(PRESETS.keys())}")
    values = dict(PRESETS[name]["options"])
    values.update(overrides)
    return ClusteringOptions(**values)
