"""
Weighted information-theoretic feature selection for discretized data.

This package implements two greedy selectors built on weighted mutual
information:
1. CMIM (Conditional Mutual Information Maximisation), fast exact version
2. DISR (Double Input Symmetrical Relevance), with cached pair relevances

Features and labels must already be discretized. Each sample's contribution
to every statistic is scaled by its weight.
"""

from .cmim import WeightedCMIM, weighted_cmim
from .disr import WeightedDISR, weighted_disr
from .feature_view import FeatureView
from .information import (
    InformationOracle,
    WeightedInformationOracle,
    merge_arrays,
    normalise_labels,
    weighted_conditional_mutual_information,
    weighted_entropy,
    weighted_joint_entropy,
    weighted_mutual_information
)
from .config import AVAILABLE_METHODS

__version__ = "1.0.0"

__all__ = [
    "WeightedCMIM",
    "WeightedDISR",
    "weighted_cmim",
    "weighted_disr",
    "select_features",
    "FeatureView",
    "InformationOracle",
    "WeightedInformationOracle",
    "merge_arrays",
    "normalise_labels",
    "weighted_conditional_mutual_information",
    "weighted_entropy",
    "weighted_joint_entropy",
    "weighted_mutual_information"
]

_SELECTORS = {
    'cmim': weighted_cmim,
    'disr': weighted_disr,
}


def select_features(method, k, X, y, weights=None, **kwargs):
    """
    Select k features with the named criterion.

    Parameters:
    -----------
    method : str
        'cmim' or 'disr' (case-insensitive)
    k, X, y, weights :
        As for :func:`weighted_cmim`
    **kwargs : dict
        Passed on to the selector (oracle, callback, verbose)

    Returns:
    --------
    selected : np.ndarray of int, shape (k,)
    """
    name = str(method).lower()
    if name not in _SELECTORS:
        raise ValueError(f"Unknown method: {method}. "
                         f"Choose from {', '.join(AVAILABLE_METHODS)}")
    return _SELECTORS[name](k, X, y, weights=weights, **kwargs)
