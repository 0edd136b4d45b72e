"""
Default settings for weighted feature selection.
"""

# Number of features selected when the caller does not say otherwise
DEFAULT_N_FEATURES = 10

# Entropies and mutual information are reported in bits
LOG_BASE = 2

# 0: silent, 1: progress bar, 2: progress bar and per-round details
DEFAULT_VERBOSE = 0

AVAILABLE_METHODS = ('cmim', 'disr')