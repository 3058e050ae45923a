# external imports
import numpy as np

def example_system():
    """
    Returns the linear quadratic problem used in the demonstration: a chain of four stable first-order modes driven by a single input, where only the third state is penalized.

    Returns
    ----------
    A : numpy.ndarray
        4x4 state transition matrix.
    B : numpy.ndarray
        4x1 input to state map.
    Q : numpy.ndarray
        4x4 state cost, 1 in position (2, 2) and zero elsewhere.
    R : numpy.ndarray
        1x1 input cost, equal to 100.
    N : numpy.ndarray
        4x1 zero cross cost.
    """

    A = np.array([
        [.6, .2, 0., 0.],
        [0., .5, .2, 0.],
        [0., 0., .4, .2],
        [.1, 0., 0., .3]
        ])
    B = np.array([[0.], [0.], [.5], [1.]])
    Q = np.zeros((4, 4))
    Q[2, 2] = 1.
    R = np.array([[100.]])
    N = np.zeros((4, 1))

    return A, B, Q, R, N
