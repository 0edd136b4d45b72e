"""
Conditional Mutual Information Maximisation (CMIM) feature selection.

Uses Fleuret's fast exact algorithm with weighted mutual information. Each
feature keeps a partial score, an upper bound on min_s I(f; y | s) over the
selected features s, which is only tightened as far as needed to decide the
current round.
"""

import logging

import numpy as np
from tqdm import tqdm

from .base import GreedyWeightedSelector, SelectionResult, first_maximiser
from .config import DEFAULT_N_FEATURES, DEFAULT_VERBOSE
from .information import WeightedInformationOracle
from .utils import validate_inputs

logger = logging.getLogger(__name__)


class _CMIMState:
    """Partial scores and output owned by a single selection call."""

    def __init__(self, n_features, k):
        # class MI doubles as the partial score from the CMIM paper
        self.class_mi = np.zeros(n_features)
        # m in the CMIM paper: selected features already folded into class_mi
        self.last_used = np.zeros(n_features, dtype=np.intp)
        self.output = np.full(k, -1, dtype=np.intp)
        self.scores = np.zeros(k)
        # only feeds first_unselected for zero-score rounds, never scoring
        self.in_output = np.zeros(n_features, dtype=bool)
        self.n_selected = 0

    def append(self, feature, score):
        self.output[self.n_selected] = feature
        self.scores[self.n_selected] = score
        self.in_output[feature] = True
        self.n_selected += 1

    def first_unselected(self):
        return int(np.flatnonzero(~self.in_output)[0])


def _cmim(k, features, classes, weights, oracle, callback=None, verbose=0):
    n_features = features.n_features
    state = _CMIMState(n_features, k)

    logger.info(f"CMIM: selecting {k} of {n_features} features "
                f"({features.n_samples} samples)")

    for j in tqdm(range(n_features), desc="Class MI", disable=verbose < 2):
        state.class_mi[j] = oracle.mutual_information(features[j], classes, weights)
    mi_with_target = state.class_mi.copy()

    first = first_maximiser(state.class_mi)
    state.append(first, state.class_mi[first])
    if callback is not None:
        callback(0, state.output[:1].copy(), state.class_mi.copy(),
                 state.last_used.copy())

    n_conditional = 0
    pbar = tqdm(total=k - 1, desc="Selecting features (cmim)", disable=verbose < 1)

    for i in range(1, k):
        score = 0.0
        winner = None

        # Selected features are not skipped: once a feature is conditioned
        # on itself its partial score drops to zero and it cannot win again.
        for j in range(n_features):
            while state.class_mi[j] > score and state.last_used[j] < i:
                conditioning = state.output[state.last_used[j]]
                conditional_info = oracle.conditional_mutual_information(
                    features[j], classes, features[conditioning], weights)
                n_conditional += 1
                if state.class_mi[j] > conditional_info:
                    state.class_mi[j] = conditional_info
                state.last_used[j] += 1

            if state.class_mi[j] > score:
                score = state.class_mi[j]
                winner = j

        if winner is None:
            winner = state.first_unselected()
            logger.debug(f"CMIM round {i}: no positive partial score, "
                         f"taking first unselected feature {winner}")

        state.append(winner, score)
        if verbose >= 2:
            logger.info(f"Selected feature {winner} with score {score:.4f}")
        if callback is not None:
            callback(i, state.output[:i + 1].copy(), state.class_mi.copy(),
                     state.last_used.copy())
        pbar.update(1)

    pbar.close()
    logger.info(f"CMIM: done after {n_conditional} conditional MI evaluations")

    return SelectionResult(state.output, state.scores, mi_with_target)


def weighted_cmim(k, X, y, weights=None, oracle=None, callback=None, verbose=0):
    """
    Select k features with weighted CMIM.

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
        ``callback(round_index, selected, partial_scores, last_used)`` after
        each round, where last_used[j] counts the selected features already
        folded into partial_scores[j]
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
    return _cmim(k, features, classes, weights, oracle,
                 callback=callback, verbose=verbose).selected


class WeightedCMIM(GreedyWeightedSelector):
    """
    Weighted Conditional Mutual Information Maximisation feature selector.

    Greedily picks the feature maximising min_s I(f; y | s) over the already
    selected features s, with every sample's contribution scaled by its
    weight.

    References:
    -----------
    Fleuret, F. (2004). Fast binary feature selection with conditional mutual
    information. Journal of Machine Learning Research, 5, 1531-1555.
    """

    method_name = 'cmim'

    def __init__(self, n_features_to_select=DEFAULT_N_FEATURES,
                 verbose=DEFAULT_VERBOSE, oracle=None, callback=None):
        super().__init__(n_features_to_select=n_features_to_select,
                         verbose=verbose, oracle=oracle, callback=callback)

    def _select(self, k, features, classes, weights, oracle):
        return _cmim(k, features, classes, weights, oracle,
                     callback=self.callback, verbose=self.verbose)
