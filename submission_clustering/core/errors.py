"""Exception types raised by the clustering engine.

- ClusteringError: Base class for every error raised here
- ClusteringConfigurationError: Invalid options, rejected before any work
- InconsistentSimilarityError: Conflicting similarity values for one pair
"""


class ClusteringError(Exception):
    """Base class for clustering failures."""


class ClusteringConfigurationError(ClusteringError, ValueError):
    """Raised when an option or a metric input cannot be used.

    Configuration errors are raised before any computation starts, so no
    partial result ever exists when one is seen.
    """


class InconsistentSimilarityError(ClusteringError, ValueError):
    """Raised when the same submission pair is scored twice differently.

    Attributes:
        first: Identifier of the first submission.
        second: Identifier of the second submission.
        existing: Value already stored for the pair.
        conflicting: Value that disagrees with it.
    """

    def __init__(self, first, second, existing: float, conflicting: float):
        self.first = first
        self.second = second
        self.existing = existing
        self.conflicting = conflicting
        super().__init__(
            f"Conflicting similarity for pair ({first!r}, {second!r}): "
            f"{existing} != {conflicting}"
        )
