import itertools

import pytest

from partition_knn.contracts.candidate_models import LabeledCandidate, PartitionResult
from partition_knn.exceptions import ConfigurationError, EmptyInputError
from partition_knn.merge.vote import GlobalMerger, classify_label, majority_vote


def _candidates(*pairs: tuple[float, str]) -> tuple[LabeledCandidate, ...]:
    return tuple(LabeledCandidate(distance=distance, label=label) for distance, label in pairs)


def test_majority_vote_picks_most_frequent_label() -> None:
    label, votes = majority_vote(["B", "A", "A", "C", "A", "B"])

    assert label == "A"
    assert votes == {"B": 2, "A": 3, "C": 1}
    assert list(votes) == ["B", "A", "C"]


def test_majority_vote_tie_goes_to_first_seen_label() -> None:
    assert majority_vote(["B", "A"])[0] == "B"
    assert majority_vote(["A", "B", "B", "A"])[0] == "A"


def test_majority_vote_rejects_empty_labels() -> None:
    with pytest.raises(EmptyInputError):
        majority_vote([])


def test_merge_keeps_global_top_k_across_partitions() -> None:
    outputs = [
        PartitionResult(partition_id=0, candidates=_candidates((0.1, "A"), (0.7, "B")), scanned=9),
        PartitionResult(partition_id=1, candidates=_candidates((0.2, "B"), (0.3, "B")), scanned=4, skipped=2),
        PartitionResult(partition_id=2, candidates=_candidates((0.05, "A")), scanned=1),
    ]

    result = GlobalMerger(k_global=3).merge(outputs)

    assert [(n.distance, n.label) for n in result.neighbors] == [(0.05, "A"), (0.1, "A"), (0.2, "B")]
    assert result.label == "A"
    assert result.votes == {"A": 2, "B": 1}
    assert result.metrics.partition_count == 3
    assert result.metrics.scanned_records == 14
    assert result.metrics.skipped_records == 2
    assert result.metrics.candidate_count == 5


def test_merge_vote_tie_is_deterministic_across_arrival_orders() -> None:
    outputs = [
        PartitionResult(partition_id=0, candidates=_candidates((0.4, "A"), (0.9, "A"))),
        PartitionResult(partition_id=1, candidates=_candidates((0.2, "B"), (0.8, "B"))),
        PartitionResult(partition_id=2, candidates=_candidates((1.5, "C"))),
    ]

    labels = {
        GlobalMerger(k_global=2).merge(list(order)).label
        for order in itertools.permutations(outputs)
    }

    # 2위까지 A/B가 한 표씩이며, 가장 가까운 이웃을 가진 B가 이긴다.
    assert labels == {"B"}


def test_merge_distance_tie_is_deterministic_across_arrival_orders() -> None:
    outputs = [
        PartitionResult(partition_id=0, candidates=_candidates((0.1, "A"), (0.5, "A"))),
        PartitionResult(partition_id=1, candidates=_candidates((0.5, "B"), (0.5, "B"))),
    ]

    neighbor_labels = {
        tuple(n.label for n in GlobalMerger(k_global=3).merge(list(order)).neighbors)
        for order in itertools.permutations(outputs)
    }

    assert neighbor_labels == {("A", "A", "B")}


def test_merge_accepts_plain_candidate_sequences() -> None:
    outputs = [
        list(_candidates((0.3, "spam"), (0.6, "ham"))),
        list(_candidates((0.1, "ham"))),
    ]

    assert classify_label(outputs, k_global=3) == "ham"


def test_merge_ignores_empty_partitions() -> None:
    outputs = [
        PartitionResult(partition_id=0, candidates=(), scanned=5, skipped=5),
        PartitionResult(partition_id=1, candidates=_candidates((0.2, "A"), (0.4, "B"), (0.5, "A"))),
    ]

    result = GlobalMerger(k_global=3).merge(outputs)

    assert result.label == "A"
    assert result.metrics.skipped_records == 5


def test_merge_without_candidates_raises_empty_input() -> None:
    outputs = [PartitionResult(partition_id=0), PartitionResult(partition_id=1)]

    with pytest.raises(EmptyInputError, match="partitions=2"):
        GlobalMerger(k_global=3).merge(outputs)

    with pytest.raises(EmptyInputError):
        GlobalMerger(k_global=3).merge([])


def test_rejects_non_positive_k_global() -> None:
    with pytest.raises(ConfigurationError, match="k_global은 1 이상이어야 합니다"):
        GlobalMerger(k_global=0)


def test_classification_result_is_immutable() -> None:
    outputs = [PartitionResult(partition_id=0, candidates=_candidates((0.2, "A"), (0.4, "B")))]

    result = GlobalMerger(k_global=2).merge(outputs)

    with pytest.raises(ValueError):
        result.label = "B"  # type: ignore[misc]

    with pytest.raises(ValueError):
        result.metrics.elapsed_ms = 10  # type: ignore[misc]
