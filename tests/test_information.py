"""
Tests for the weighted information measures.
"""

import numpy as np
import pytest
from sklearn.metrics import mutual_info_score

from weighted_feature_selection.information import (
    WeightedInformationOracle,
    merge_arrays,
    normalise_labels,
    weighted_conditional_mutual_information,
    weighted_entropy,
    weighted_joint_entropy,
    weighted_mutual_information
)


def test_normalise_labels_first_occurrence_order():
    labels = normalise_labels([3.0, 1.0, 3.0, 7.0, 1.0])
    assert labels.tolist() == [0, 1, 0, 2, 1]


def test_normalise_labels_empty():
    assert normalise_labels([]).size == 0


def test_merge_arrays_is_injective_on_pairs():
    first = np.array([0, 0, 1, 1, 2, 0])
    second = np.array([5, 6, 5, 6, 5, 5])
    merged = merge_arrays(first, second)

    pairs = list(zip(first, second))
    for a in range(len(pairs)):
        for b in range(len(pairs)):
            assert (merged[a] == merged[b]) == (pairs[a] == pairs[b])


def test_merge_arrays_length_mismatch():
    with pytest.raises(ValueError):
        merge_arrays([0, 1, 2], [0, 1])


def test_entropy_of_fair_coin_is_one_bit():
    assert weighted_entropy([0, 1, 0, 1]) == pytest.approx(1.0)


def test_entropy_of_constant_is_zero():
    assert weighted_entropy([4, 4, 4]) == 0.0


def test_entropy_with_zero_total_weight():
    assert weighted_entropy([0, 1, 2], weights=[0, 0, 0]) == 0.0


def test_weights_shift_the_distribution():
    # weight 3 on the zeros gives p = (3/4, 1/4)
    h = weighted_entropy([0, 1], weights=[3.0, 1.0])
    expected = -(0.75 * np.log2(0.75) + 0.25 * np.log2(0.25))
    assert h == pytest.approx(expected)


def test_joint_entropy_of_independent_coins():
    x = [0, 0, 1, 1]
    y = [0, 1, 0, 1]
    assert weighted_joint_entropy(x, y) == pytest.approx(2.0)


def test_uniform_weights_match_unweighted_mutual_information(informative_data):
    X, y, _ = informative_data
    for j in range(X.shape[1]):
        reference = mutual_info_score(X[:, j], y) / np.log(2)
        assert weighted_mutual_information(X[:, j], y) == pytest.approx(reference, abs=1e-12)
        assert weighted_mutual_information(
            X[:, j], y, np.full(len(y), 2.5)) == weighted_mutual_information(X[:, j], y)


def test_mutual_information_length_mismatch():
    with pytest.raises(ValueError):
        weighted_mutual_information([0, 1, 0], [0, 1])


def test_mutual_information_of_copy_is_entropy():
    x = np.array([0, 1, 2, 2, 1, 0, 0])
    assert weighted_mutual_information(x, x) == pytest.approx(weighted_entropy(x))


def test_single_weighted_sample_carries_no_information():
    x = np.array([0, 1, 0, 1])
    y = np.array([0, 1, 1, 0])
    weights = np.array([0.0, 0.0, 2.0, 0.0])
    assert weighted_mutual_information(x, y, weights) == 0.0


def test_conditioning_on_itself_is_exactly_zero(informative_data):
    X, y, weights = informative_data
    for j in range(X.shape[1]):
        assert weighted_conditional_mutual_information(X[:, j], y, X[:, j], weights) == 0.0


def test_conditioning_on_the_class_copy():
    # y determined by z, so nothing is left to explain
    z = np.array([0, 1, 0, 1, 0, 1])
    x = np.array([0, 0, 1, 1, 0, 1])
    assert weighted_conditional_mutual_information(x, z, z) == pytest.approx(0.0, abs=1e-12)


def test_conditional_mutual_information_xor():
    # y = x1 xor x2: each alone says nothing, together they decide y
    x1 = np.array([0, 0, 1, 1])
    x2 = np.array([0, 1, 0, 1])
    y = x1 ^ x2
    assert weighted_mutual_information(x1, y) == pytest.approx(0.0, abs=1e-12)
    assert weighted_conditional_mutual_information(x1, y, x2) == pytest.approx(1.0)


def test_weighted_oracle_delegates():
    oracle = WeightedInformationOracle()
    x = np.array([0, 1, 1, 0])
    y = np.array([1, 1, 0, 0])
    w = np.ones(4)
    assert oracle.mutual_information(x, y, w) == weighted_mutual_information(x, y, w)
    assert oracle.joint_entropy(x, y, w) == weighted_joint_entropy(x, y, w)
    assert oracle.merge(x, y).tolist() == merge_arrays(x, y).tolist()
    assert oracle.normalise_labels(y).tolist() == [0, 0, 1, 1]
