"""
Input validation and reporting helpers shared by the selectors.
"""

import numpy as np
from sklearn.utils import check_array

from .feature_view import FeatureView


def validate_inputs(k, X, y, weights=None):
    """
    Check the arguments of a selection call and put them in canonical form.

    Parameters:
    -----------
    k : int
        Number of features to select, 1 <= k <= n_features
    X : array-like or pd.DataFrame, shape (n_samples, n_features)
        Discretized feature matrix
    y : array-like, shape (n_samples,)
        Discretized class labels
    weights : array-like or None
        Non-negative per-sample weights. None means uniform weights of 1.

    Returns:
    --------
    features : FeatureView
    classes : np.ndarray, shape (n_samples,)
    weights : np.ndarray of float, shape (n_samples,)

    Raises:
    -------
    ValueError
        If any argument violates the preconditions. Nothing is clamped.
    """
    features = X if isinstance(X, FeatureView) else FeatureView(X)

    n_samples, n_features = features.shape
    if n_samples < 1:
        raise ValueError("Feature matrix must contain at least one sample")
    if n_features < 1:
        raise ValueError("Feature matrix must contain at least one feature")

    if isinstance(k, (bool, np.bool_)) or not isinstance(k, (int, np.integer)):
        raise ValueError(f"k must be an integer, got {k!r}")
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    if k > n_features:
        raise ValueError(f"Cannot select {k} features from {n_features} available")

    classes = np.asarray(y).ravel()
    if len(classes) != n_samples:
        raise ValueError(f"Class column length ({len(classes)}) must match "
                         f"number of samples ({n_samples})")

    if weights is None:
        weights = np.ones(n_samples)
    else:
        weights = check_array(weights, ensure_2d=False, dtype=np.float64).ravel()
        if len(weights) != n_samples:
            raise ValueError(f"Weight vector length ({len(weights)}) must match "
                             f"number of samples ({n_samples})")
        if np.any(weights < 0):
            raise ValueError("Weights must be non-negative")

    return features, classes, weights


def selection_summary(selected_features, feature_names=None, mi_scores=None,
                      selection_scores=None, method_name="Feature Selection"):
    """
    Create a text summary of a selection.

    Parameters:
    -----------
    selected_features : array-like
        Indices of selected features, in selection order
    feature_names : list or None
        Names of all features
    mi_scores : array-like or None
        Mutual information of every feature with the class
    selection_scores : array-like or None
        Score of each selected feature in the round it was picked
    method_name : str
        Name of the selection criterion

    Returns:
    --------
    summary : str
    """
    summary = f"{method_name} Results\n"
    summary += "=" * 50 + "\n"
    summary += f"Selected {len(selected_features)} features\n"

    if len(selected_features) == 0:
        return summary

    summary += "-" * 50 + "\n"
    for rank, idx in enumerate(selected_features, 1):
        idx = int(idx)
        name = feature_names[idx] if feature_names is not None else f"Feature {idx}"
        line = f"{rank:3d}. {name:30s}"
        if mi_scores is not None:
            line += f" | MI: {mi_scores[idx]:.6f}"
        if selection_scores is not None:
            line += f" | Round score: {selection_scores[rank - 1]:.6f}"
        summary += line + "\n"

    return summary
