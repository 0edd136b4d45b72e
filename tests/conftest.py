import numpy as np
import pytest

from weighted_feature_selection.information import WeightedInformationOracle


class CountingOracle(WeightedInformationOracle):
    """Weighted oracle that counts how often each statistic is requested."""

    def __init__(self):
        self.calls = {
            'mutual_information': 0,
            'conditional_mutual_information': 0,
            'joint_entropy': 0,
            'normalise_labels': 0,
            'merge': 0,
        }

    def mutual_information(self, first_vector, second_vector, weights):
        self.calls['mutual_information'] += 1
        return super().mutual_information(first_vector, second_vector, weights)

    def conditional_mutual_information(self, first_vector, second_vector,
                                       condition_vector, weights):
        self.calls['conditional_mutual_information'] += 1
        return super().conditional_mutual_information(
            first_vector, second_vector, condition_vector, weights)

    def joint_entropy(self, first_vector, second_vector, weights):
        self.calls['joint_entropy'] += 1
        return super().joint_entropy(first_vector, second_vector, weights)

    def normalise_labels(self, vector):
        self.calls['normalise_labels'] += 1
        return super().normalise_labels(vector)

    def merge(self, first_vector, second_vector):
        self.calls['merge'] += 1
        return super().merge(first_vector, second_vector)


@pytest.fixture
def counting_oracle():
    return CountingOracle()


@pytest.fixture
def perfect_predictor_data():
    """4 features, 6 samples, feature 2 reproduces the class exactly."""
    y = np.array([0, 1, 0, 1, 0, 1], dtype=float)
    X = np.array([
        [0, 1, 0, 0],
        [0, 0, 1, 0],
        [1, 0, 0, 0],
        [1, 0, 1, 1],
        [0, 1, 0, 1],
        [1, 1, 1, 1],
    ], dtype=float)
    return X, y


@pytest.fixture
def informative_data():
    """
    200 samples, 10 discretized features with 3 states. The class depends
    on features 1, 4 and 7; the rest is noise.
    """
    rng = np.random.RandomState(0)
    n_samples, n_features = 200, 10
    X = rng.randint(0, 3, size=(n_samples, n_features)).astype(float)
    noise = rng.randint(0, 2, size=n_samples)
    y = ((X[:, 1] + X[:, 4] + X[:, 7] + noise) > 3).astype(float)
    weights = rng.uniform(0.5, 2.0, size=n_samples)
    return X, y, weights
