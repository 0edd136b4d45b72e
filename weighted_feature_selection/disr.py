"""
Double Input Symmetrical Relevance (DISR) feature selection.

A candidate f scores sum_s SR(f, s) over the selected features s, where the
symmetrical relevance SR(f, s) = I(f, s; y) / H(f, s, y) rewards pairs that
are complementary about the class. Each SR value is computed once per call
and reused by every later round.
"""

import logging

import numpy as np
from tqdm import tqdm

from .base import GreedyWeightedSelector, SelectionResult, first_maximiser
from .config import DEFAULT_N_FEATURES, DEFAULT_VERBOSE
from .information import WeightedInformationOracle
from .utils import validate_inputs

logger = logging.getLogger(__name__)


class _DISRState:
    """Relevance cache, selected mask and output owned by one call."""

    def __init__(self, n_features, k):
        self.relevance = np.zeros((k, n_features))
        self.computed = np.zeros((k, n_features), dtype=bool)
        self.selected = np.zeros(n_features, dtype=bool)
        self.output = np.full(k, -1, dtype=np.intp)
        self.scores = np.zeros(k)
        self.n_selected = 0

    def append(self, feature, score):
        self.output[self.n_selected] = feature
        self.scores[self.n_selected] = score
        self.selected[feature] = True
        self.n_selected += 1

    def first_unselected(self):
        return int(np.flatnonzero(~self.selected)[0])


def symmetrical_relevance(oracle, first_feature, second_feature, labels, weights):
    """
    I(f, s; y) / H(f, s, y) for the merged pair (f, s).

    Returns 0.0 when the joint entropy is zero, i.e. when the pair and the
    labels carry no uncertainty under the given weights.
    """
    merged = oracle.merge(first_feature, second_feature)
    mi = oracle.mutual_information(merged, labels, weights)
    trip_entropy = oracle.joint_entropy(merged, labels, weights)
    if trip_entropy <= 0:
        return 0.0
    return mi / trip_entropy


def _disr(k, features, classes, weights, oracle, callback=None, verbose=0):
    n_features = features.n_features
    state = _DISRState(n_features, k)
    labels = oracle.normalise_labels(classes)

    logger.info(f"DISR: selecting {k} of {n_features} features "
                f"({features.n_samples} samples)")

    class_mi = np.zeros(n_features)
    for j in tqdm(range(n_features), desc="Class MI", disable=verbose < 2):
        class_mi[j] = oracle.mutual_information(features[j], classes, weights)

    first = first_maximiser(class_mi)
    state.append(first, class_mi[first])
    if callback is not None:
        callback(0, state.output[:1].copy(), class_mi.copy())

    n_computed = 0
    pbar = tqdm(total=k - 1, desc="Selecting features (disr)", disable=verbose < 1)

    for i in range(1, k):
        score = 0.0
        winner = None
        round_scores = np.zeros(n_features)

        for j in range(n_features):
            if state.selected[j]:
                continue

            current_score = 0.0
            for x in range(i):
                if not state.computed[x, j]:
                    state.relevance[x, j] = symmetrical_relevance(
                        oracle, features[state.output[x]], features[j],
                        labels, weights)
                    state.computed[x, j] = True
                    n_computed += 1
                current_score += state.relevance[x, j]
            round_scores[j] = current_score

            if current_score > score:
                score = current_score
                winner = j

        if winner is None:
            winner = state.first_unselected()
            logger.debug(f"DISR round {i}: no positive score, "
                         f"taking first unselected feature {winner}")

        state.append(winner, score)
        if verbose >= 2:
            logger.info(f"Selected feature {winner} with score {score:.4f}")
        if callback is not None:
            callback(i, state.output[:i + 1].copy(), round_scores)
        pbar.update(1)

    pbar.close()
    logger.info(f"DISR: done after {n_computed} relevance evaluations")

    return SelectionResult(state.output, state.scores, class_mi)


def weighted_disr(k, X, y, weights=None, oracle=None, callback=None, verbose=0):
    """
    Select k features with weighted DISR.

    Parameters:
    -----------
    k : int
        Number of features to select
    X : array-like or pd.DataFrame, shape (n_samples, n_features)
        Discretized feature matrix
    y : array-like, shape (n_samples,)
        Discretized class labels
    weights : array-like or None
        Non-negative per-sample weights. None means uniform.
    oracle : InformationOracle or None
        Source of the information measures
    callback : callable or None
        ``callback(round_index, selected, round_scores)`` after each round
    verbose : int
        Verbosity level

    Returns:
    --------
    selected : np.ndarray of int, shape (k,)
        Feature indices in selection order
    """
    features, classes, weights = validate_inputs(k, X, y, weights)
    if oracle is None:
        oracle = WeightedInformationOracle()
    return _disr(k, features, classes, weights, oracle,
                 callback=callback, verbose=verbose).selected


class WeightedDISR(GreedyWeightedSelector):
    """
    Weighted Double Input Symmetrical Relevance feature selector.

    References:
    -----------
    Meyer, P. E., & Bontempi, G. (2006). On the use of variable
    complementarity for feature selection in cancer classification.
    Applications of Evolutionary Computing, 91-102.
    """

    method_name = 'disr'

    def __init__(self, n_features_to_select=DEFAULT_N_FEATURES,
                 verbose=DEFAULT_VERBOSE, oracle=None, callback=None):
        super().__init__(n_features_to_select=n_features_to_select,
                         verbose=verbose, oracle=oracle, callback=callback)

    def _select(self, k, features, classes, weights, oracle):
        return _disr(k, features, classes, weights, oracle,
                     callback=self.callback, verbose=self.verbose)
