"""
Shared estimator surface for the greedy weighted selectors.
"""

from abc import ABCMeta, abstractmethod
from collections import namedtuple
import logging

import numpy as np

from .config import DEFAULT_N_FEATURES, DEFAULT_VERBOSE
from .information import WeightedInformationOracle
from .utils import validate_inputs, selection_summary

logger = logging.getLogger(__name__)

SelectionResult = namedtuple('SelectionResult',
                             ['selected', 'scores', 'mi_with_target'])
SelectionResult.__doc__ = """
Outcome of one selection call.

selected : np.ndarray of int, the k feature indices in selection order
scores : np.ndarray of float, the score each feature won its round with
mi_with_target : np.ndarray of float, I(feature; class) for every feature
"""


def first_maximiser(values):
    """Index of the first entry attaining the maximum."""
    return int(np.argmax(values))


class GreedyWeightedSelector(metaclass=ABCMeta):
    """
    Base class for greedy selectors over weighted information measures.

    Subclasses implement :meth:`_select`, which runs one complete selection
    on validated inputs and returns a :class:`SelectionResult`. Everything
    the selection allocates lives inside that call.
    """

    method_name = None

    def __init__(self, n_features_to_select=DEFAULT_N_FEATURES,
                 verbose=DEFAULT_VERBOSE, oracle=None, callback=None):
        """
        Parameters:
        -----------
        n_features_to_select : int
            Number of features to select
        verbose : int
            Verbosity level (0: silent, 1: progress bar, 2: detailed)
        oracle : InformationOracle or None
            Source of the information measures. None uses the weighted
            plug-in estimators.
        callback : callable or None
            Called as ``callback(round_index, selected, scores)`` after each
            round (CMIM also passes ``last_used``). Raising from it aborts
            the selection.
        """
        self.n_features_to_select = n_features_to_select
        self.verbose = verbose
        self.oracle = oracle
        self.callback = callback

        self.selected_features = None
        self.selection_scores = None
        self.mi_with_target = None
        self.feature_names = None

    @abstractmethod
    def _select(self, k, features, classes, weights, oracle):
        """Run the selection on validated inputs."""

    def fit(self, X, y, sample_weight=None):
        """
        Select features.

        Parameters:
        -----------
        X : array-like or pd.DataFrame, shape (n_samples, n_features)
            Discretized training data
        y : array-like, shape (n_samples,)
            Discretized class labels
        sample_weight : array-like or None
            Non-negative per-sample weights

        Returns:
        --------
        self : object
            Returns self
        """
        features, classes, weights = validate_inputs(
            self.n_features_to_select, X, y, sample_weight)
        oracle = self.oracle if self.oracle is not None else WeightedInformationOracle()

        result = self._select(self.n_features_to_select, features, classes,
                              weights, oracle)

        self.selected_features = result.selected
        self.selection_scores = result.scores
        self.mi_with_target = result.mi_with_target
        self.feature_names = features.feature_names
        return self

    def _check_fitted(self):
        if self.selected_features is None:
            raise ValueError("Must call fit first")

    def transform(self, X):
        """
        Reduce X to the selected features, in selection order.
        """
        if self.selected_features is None:
            raise ValueError("Must call fit before transform")

        if hasattr(X, 'iloc'):
            return X.iloc[:, self.selected_features]
        return np.asarray(X)[:, self.selected_features]

    def fit_transform(self, X, y, sample_weight=None):
        self.fit(X, y, sample_weight=sample_weight)
        return self.transform(X)

    def get_support(self, indices=True):
        """
        Get a mask or indices of selected features.

        Parameters:
        -----------
        indices : bool
            If True, return indices in selection order. If False, return a
            boolean mask.
        """
        self._check_fitted()

        if indices:
            return self.selected_features.copy()
        mask = np.zeros(len(self.mi_with_target), dtype=bool)
        mask[self.selected_features] = True
        return mask

    def get_feature_importance(self):
        self._check_fitted()

        return {
            'selected_features': self.selected_features.copy(),
            'selection_scores': self.selection_scores.copy(),
            'mi_with_target': self.mi_with_target.copy(),
            'method': self.method_name
        }

    def get_selected_feature_names(self, feature_names=None):
        """
        Names of the selected features. Falls back to the DataFrame columns
        seen in fit, then to plain indices.
        """
        self._check_fitted()

        if feature_names is None:
            feature_names = self.feature_names
        if feature_names is None:
            return self.selected_features.tolist()

        if len(feature_names) != len(self.mi_with_target):
            raise ValueError(f"feature_names length ({len(feature_names)}) "
                             f"must match number of features ({len(self.mi_with_target)})")

        return [feature_names[i] for i in self.selected_features]

    def explain_selection(self, feature_names=None):
        if self.selected_features is None:
            return "No features selected yet."

        return selection_summary(
            self.selected_features,
            feature_names=feature_names if feature_names is not None else self.feature_names,
            mi_scores=self.mi_with_target,
            selection_scores=self.selection_scores,
            method_name=f"{self.method_name.upper()} Feature Selection")

    def __str__(self):
        name = type(self).__name__
        if self.selected_features is None:
            return f"{name} (not fitted)"
        return f"{name}: selected {len(self.selected_features)} features"

    def __repr__(self):
        return (f"{type(self).__name__}("
                f"n_features_to_select={self.n_features_to_select}, "
                f"verbose={self.verbose})")
