"""
Tests for clustering options, presets and logging setup.
"""

import dataclasses
import logging

import pytest

from submission_clustering import ClusteringConfigurationError, ClusteringOptions, PRESETS, get_preset
from submission_clustering.logging_utils import setup_logging


class TestClusteringOptions:
    """Test option defaults and validation."""

    def test_defaults(self):
        options = ClusteringOptions()
        assert options.enabled
        assert options.metric == "avg"
        assert options.algorithm == "spectral"
        assert options.preprocessor == "cdf"
        assert options.spectral_min_runs <= options.spectral_max_runs

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ClusteringOptions().enabled = False

    def test_names_normalized_to_lowercase(self):
        options = ClusteringOptions(metric="MAX", algorithm="Agglomerative", agglomerative_linkage="MIN")
        assert (options.metric, options.algorithm, options.agglomerative_linkage) == ("max", "agglomerative", "min")

    @pytest.mark.parametrize(
        "field, value",
        [
            ("metric", "cosine"),
            ("algorithm", "dbscan"),
            ("agglomerative_linkage", "ward"),
            ("preprocessor", "zscore"),
            ("agglomerative_threshold", 1.5),
            ("agglomerative_threshold", -0.1),
            ("preprocessor_percentile", 2.0),
            ("spectral_bandwidth", 0.0),
            ("spectral_noise", -1.0),
            ("spectral_min_runs", 0),
            ("spectral_kmeans_iterations", 0),
            ("spectral_workers", 0),
        ],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ClusteringConfigurationError):
            ClusteringOptions(**{field: value})

    def test_max_runs_below_min_runs(self):
        with pytest.raises(ClusteringConfigurationError):
            ClusteringOptions(spectral_min_runs=6, spectral_max_runs=5)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            ClusteringOptions(metric="cosine")

    def test_from_mapping_with_external_keys(self):
        options = ClusteringOptions.from_mapping({
            "enabled": True,
            "metric": "MIN",
            "algorithm": "agglomerative",
            "agglomerative.threshold": 0.4,
            "agglomerative.linkage": "max",
            "spectral.bandwidth": 5.0,
            "spectral.noise": 0.01,
            "spectral.minRuns": 2,
            "spectral.maxRuns": 6,
            "spectral.kMeansIterations": 30,
            "preprocessor": "percentile",
            "preprocessor.percentile": 0.8,
            "preprocessor.threshold": 0.3,
            "seed": 7,
        })
        assert options.metric == "min"
        assert options.agglomerative_threshold == 0.4
        assert options.agglomerative_linkage == "max"
        assert options.spectral_min_runs == 2
        assert options.spectral_max_runs == 6
        assert options.spectral_kmeans_iterations == 30
        assert options.preprocessor_percentile == 0.8
        assert options.preprocessor_threshold == 0.3
        assert options.random_seed == 7

    def test_from_mapping_rejects_unknown_keys(self):
        with pytest.raises(ClusteringConfigurationError, match="Unknown clustering option"):
            ClusteringOptions.from_mapping({"spectral.temperature": 1.0})

    def test_with_overrides_validates(self):
        options = ClusteringOptions()
        assert options.with_overrides(algorithm="agglomerative").algorithm == "agglomerative"
        with pytest.raises(ClusteringConfigurationError):
            options.with_overrides(agglomerative_threshold=3.0)


class TestPresets:
    """Test named presets."""

    @pytest.mark.parametrize("name", sorted(PRESETS))
    def test_every_preset_is_valid(self, name):
        assert isinstance(get_preset(name), ClusteringOptions)

    def test_disabled_preset(self):
        assert not get_preset("disabled").enabled

    def test_overrides(self):
        assert get_preset("agglomerative", agglomerative_threshold=0.7).agglomerative_threshold == 0.7

    def test_unknown_preset(self):
        with pytest.raises(KeyError):
            get_preset("turbo")


class TestLogging:
    """Test the application logging helper."""

    def test_setup_logging_sets_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        setup_logging("debug")
        assert calls["level"] == logging.DEBUG
        assert "%(levelname)s" in calls["format"]
