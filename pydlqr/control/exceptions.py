# external imports
import numpy as np

class DimensionError(ValueError):
    """
    The matrices of a linear quadratic problem have incompatible sizes.
    """

class ConvergenceError(RuntimeError):
    """
    The Riccati iteration did not reach the required tolerance.
    """

class SingularMatrixError(np.linalg.LinAlgError):
    """
    A matrix that has to be inverted is numerically singular.
    """
