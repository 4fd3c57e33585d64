"""Shared data types used across the codebase.

This module contains the value types passed between the stages:
- SubmissionComparison: One pairwise comparison from the comparison stage
- SubmissionIndex: Bijection between submission ids and matrix rows
- Cluster: A scored group of submissions
- ClusteringResult: Ordered clusters handed back to the caller
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Hashable, Iterator, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class SubmissionComparison:
    """A single comparison between two submissions.

    Attributes:
        first: Identifier of the first submission.
        second: Identifier of the second submission.
        first_size: Number of tokens of the first submission.
        second_size: Number of tokens of the second submission.
        matched_size: Number of tokens matched between both.
        similarity: Optional pre-scored similarity. When set, it is used
            as is instead of evaluating the configured metric.
    """
    first: Hashable
    second: Hashable
    first_size: int
    second_size: int
    matched_size: int
    similarity: Optional[float] = None


class SubmissionIndex:
    """Immutable mapping between submission identifiers and matrix rows.

    Identifiers keep the order in which they were first seen, so row ``i``
    of the similarity matrix belongs to ``ids[i]``.
    """

    __slots__ = ("_ids", "_index_map")

    def __init__(self, ids: Sequence[Hashable]):
        ids = tuple(ids)
        index_map = {submission: i for i, submission in enumerate(ids)}
        if len(index_map) != len(ids):
            raise ValueError("Submission identifiers must be unique.")
        object.__setattr__(self, "_ids", ids)
        object.__setattr__(self, "_index_map", index_map)

    def __setattr__(self, name, value):
        raise AttributeError("SubmissionIndex is immutable.")

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._ids)

    def __contains__(self, submission) -> bool:
        return submission in self._index_map

    def __repr__(self) -> str:
        return f"SubmissionIndex(n={len(self._ids)})"

    @property
    def ids(self) -> Tuple[Hashable, ...]:
        """Identifiers in row order."""
        return self._ids

    def index_of(self, submission: Hashable) -> int:
        """Convert a submission id to its row (O(1) lookup).

        Raises:
            KeyError: If the submission is unknown.
        """
        try:
            return self._index_map[submission]
        except KeyError:
            raise KeyError(f"Submission {submission!r} not found in index.")

    def id_of(self, index: int) -> Hashable:
        """Convert a row to its submission id."""
        return self._ids[index]


@dataclass(frozen=True)
class Cluster:
    """A group of mutually similar submissions.

    Attributes:
        members: Identifiers of the submissions in the cluster.
        indices: Matrix rows of the members.
        strength: How much more similar the members are to each other than
            to everybody else. Higher means more suspicious.
        average_similarity: Mean similarity over all member pairs.
    """
    members: FrozenSet[Hashable]
    indices: FrozenSet[int]
    strength: float
    average_similarity: float = 0.0

    def __len__(self) -> int:
        return len(self.members)

    def __repr__(self) -> str:
        return (
            f"Cluster(size={len(self.members)}, "
            f"strength={self.strength:.4f}, "
            f"average_similarity={self.average_similarity:.4f})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation for report writers."""
        return {
            "members": sorted(self.members, key=str),
            "strength": float(self.strength),
            "average_similarity": float(self.average_similarity),
        }


@dataclass(frozen=True)
class ClusteringResult:
    """Result of one clustering run.

    Attributes:
        clusters: Clusters ordered by descending strength. Submissions
            without similar peers are not part of any cluster.
        community_strength: Modularity of the whole partition on the
            original similarity matrix (0.0 when nothing was clustered).
        algorithm: Name of the algorithm that produced the partition.
        preprocessor: Name of the preprocessor applied before it.
    """
    clusters: Tuple[Cluster, ...] = field(default_factory=tuple)
    community_strength: float = 0.0
    algorithm: Optional[str] = None
    preprocessor: Optional[str] = None

    @classmethod
    def empty(cls) -> "ClusteringResult":
        """Result with no clusters."""
        return cls()

    def __iter__(self) -> Iterator[Cluster]:
        return iter(self.clusters)

    def __len__(self) -> int:
        return len(self.clusters)

    def __bool__(self) -> bool:
        return bool(self.clusters)

    def clustered_submissions(self) -> List[Hashable]:
        """All submissions that belong to some cluster, strongest first."""
        return [member for cluster in self.clusters for member in sorted(cluster.members, key=str)]

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation for report writers."""
        return {
            "algorithm": self.algorithm,
            "preprocessor": self.preprocessor,
            "community_strength": float(self.community_strength),
            "clusters": [cluster.to_dict() for cluster in self.clusters],
        }
