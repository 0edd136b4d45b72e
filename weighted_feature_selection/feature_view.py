"""
Read-only column access over a feature matrix.
"""

import numpy as np
import pandas as pd


class FeatureView:
    """
    Column-major, read-only view of an (n_samples, n_features) matrix.

    The matrix is stored once in Fortran order so that ``view[j]`` is a
    contiguous slice of the underlying buffer rather than a copy. A
    Fortran-ordered input is used in place; a C-ordered input (the numpy and
    pandas default) is copied once, when the view is built. Columns are
    flagged non-writeable.
    """

    def __init__(self, X):
        if isinstance(X, pd.DataFrame):
            self.feature_names = [str(name) for name in X.columns]
            X = X.to_numpy()
        else:
            self.feature_names = None

        X = np.asarray(X)
        if X.ndim != 2:
            raise ValueError(f"Feature matrix must be 2D, got {X.ndim}D")

        # a view, so the caller's own array keeps its flags
        self._data = np.asfortranarray(X).view()
        self._data.setflags(write=False)

    @property
    def n_samples(self):
        return self._data.shape[0]

    @property
    def n_features(self):
        return self._data.shape[1]

    @property
    def shape(self):
        return self._data.shape

    def column(self, j):
        """Feature j as a contiguous vector of length n_samples."""
        return self._data[:, j]

    def __getitem__(self, j):
        return self.column(j)

    def __len__(self):
        return self.n_features

    def __iter__(self):
        for j in range(self.n_features):
            yield self._data[:, j]

    def __repr__(self):
        return f"FeatureView(n_samples={self.n_samples}, n_features={self.n_features})"
