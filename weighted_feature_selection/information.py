"""
Weighted information-theoretic measures over discretized vectors.

Every sample contributes its weight, rather than a count of one, to the joint
and marginal state frequencies. Probabilities are the weighted frequencies
divided by the total weight, so a uniform weight vector of any positive value
gives the usual plug-in estimates. All quantities are in bits.
"""

from abc import ABCMeta, abstractmethod

import numpy as np
from scipy import stats

from .config import LOG_BASE


def _as_vector(vector):
    return np.asarray(vector).ravel()


def _as_weights(weights, n_samples):
    if weights is None:
        return np.ones(n_samples)
    weights = np.asarray(weights, dtype=float).ravel()
    if len(weights) != n_samples:
        raise ValueError(f"weights length ({len(weights)}) must match "
                         f"vector length ({n_samples})")
    return weights


def normalise_labels(vector):
    """
    Relabel a discretized vector onto 0..n_states-1.

    Distinct values map to distinct labels, numbered in order of first
    occurrence, so [3, 1, 3, 7] becomes [0, 1, 0, 2].

    Parameters:
    -----------
    vector : array-like
        Discretized values (ints or float codes)

    Returns:
    --------
    labels : np.ndarray of int
    """
    vector = _as_vector(vector)
    if vector.size == 0:
        return np.zeros(0, dtype=np.intp)

    _, first_index, inverse = np.unique(vector, return_index=True,
                                        return_inverse=True)
    order = np.argsort(first_index, kind='stable')
    rank = np.empty(len(order), dtype=np.intp)
    rank[order] = np.arange(len(order))
    return rank[inverse.ravel()]


def merge_arrays(first_vector, second_vector):
    """
    Merge two discretized vectors into one joint variable.

    Each distinct (first, second) pair gets its own state, so the result
    partitions the samples exactly as the pair does.
    """
    first = normalise_labels(first_vector)
    second = normalise_labels(second_vector)
    if len(first) != len(second):
        raise ValueError("Vectors must have the same length to be merged")
    if first.size == 0:
        return first

    n_second_states = int(second.max()) + 1
    joint = first.astype(np.int64) * n_second_states + second
    return normalise_labels(joint)


def _state_probabilities(labels, weights):
    totals = np.bincount(labels, weights=weights)
    total_weight = totals.sum()
    if total_weight <= 0:
        return np.zeros(0)
    return totals / total_weight


def weighted_entropy(vector, weights=None):
    """
    Weighted Shannon entropy H(X) of a discretized vector.

    Returns 0.0 when the total weight is zero.
    """
    labels = normalise_labels(vector)
    weights = _as_weights(weights, len(labels))
    probs = _state_probabilities(labels, weights)
    if probs.size == 0:
        return 0.0

    # sorted so that equal partitions give bit-identical entropies
    return float(stats.entropy(np.sort(probs), base=LOG_BASE))


def weighted_joint_entropy(first_vector, second_vector, weights=None):
    """Weighted joint entropy H(X, Y)."""
    return weighted_entropy(merge_arrays(first_vector, second_vector), weights)


def weighted_mutual_information(first_vector, second_vector, weights=None):
    """
    Weighted mutual information I(X; Y) = H(X) + H(Y) - H(X, Y).

    Parameters:
    -----------
    first_vector, second_vector : array-like
        Discretized variables of equal length
    weights : array-like or None
        Non-negative per-sample weights. None means uniform.

    Returns:
    --------
    mi : float
        Mutual information in bits (non-negative)
    """
    first_vector = _as_vector(first_vector)
    second_vector = _as_vector(second_vector)
    if len(first_vector) != len(second_vector):
        raise ValueError("x and y must have the same length")

    mi = (weighted_entropy(first_vector, weights)
          + weighted_entropy(second_vector, weights)
          - weighted_joint_entropy(first_vector, second_vector, weights))
    return max(mi, 0.0)


def weighted_conditional_mutual_information(first_vector, second_vector,
                                            condition_vector, weights=None):
    """
    Weighted conditional mutual information I(X; Y | Z).

    Computed as [H(X, Z) - H(Z)] + [H(Y, Z) - H(X, Y, Z)]. With X == Z both
    brackets cancel exactly, so a feature conditioned on itself scores 0.
    """
    first_vector = _as_vector(first_vector)
    second_vector = _as_vector(second_vector)
    condition_vector = _as_vector(condition_vector)
    if not len(first_vector) == len(second_vector) == len(condition_vector):
        raise ValueError("x, y and the condition must have the same length")

    first_condition = merge_arrays(first_vector, condition_vector)
    second_condition = merge_arrays(second_vector, condition_vector)
    all_three = merge_arrays(first_condition, second_vector)

    cmi = ((weighted_entropy(first_condition, weights)
            - weighted_entropy(condition_vector, weights))
           + (weighted_entropy(second_condition, weights)
              - weighted_entropy(all_three, weights)))
    return max(cmi, 0.0)


class InformationOracle(metaclass=ABCMeta):
    """
    The statistics a greedy selector may ask for.

    Selectors only ever talk to an oracle, so a subclass can instrument or
    replace the estimators without touching the selection logic.
    """

    @abstractmethod
    def mutual_information(self, first_vector, second_vector, weights):
        """I(X; Y)"""

    @abstractmethod
    def conditional_mutual_information(self, first_vector, second_vector,
                                       condition_vector, weights):
        """I(X; Y | Z)"""

    @abstractmethod
    def joint_entropy(self, first_vector, second_vector, weights):
        """H(X, Y)"""

    @abstractmethod
    def normalise_labels(self, vector):
        """Canonical relabelling of a discretized vector"""

    @abstractmethod
    def merge(self, first_vector, second_vector):
        """Joint discretized variable of two vectors"""


class WeightedInformationOracle(InformationOracle):
    """Plug-in weighted estimators from this module."""

    def mutual_information(self, first_vector, second_vector, weights):
        return weighted_mutual_information(first_vector, second_vector, weights)

    def conditional_mutual_information(self, first_vector, second_vector,
                                       condition_vector, weights):
        return weighted_conditional_mutual_information(
            first_vector, second_vector, condition_vector, weights)

    def joint_entropy(self, first_vector, second_vector, weights):
        return weighted_joint_entropy(first_vector, second_vector, weights)

    def normalise_labels(self, vector):
        return normalise_labels(vector)

    def merge(self, first_vector, second_vector):
        return merge_arrays(first_vector, second_vector)

    def __repr__(self):
        return "WeightedInformationOracle()"
