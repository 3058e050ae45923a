# internal imports
from pydlqr.control.exceptions import DimensionError

def check_linear_system(A, B):
    """
    Check that the matrices A and B of a linear system have compatible sizes.

    Arguments
    ----------
    A : numpy.ndarray
        State transition matrix.
    B : numpy.ndarray
        Input to state map.
    """

    # matrices
    if A.ndim != 2 or B.ndim != 2:
        raise DimensionError('A and B must be 2-dimensional arrays.')

    # A square matrix
    if A.shape[0] != A.shape[1]:
        raise DimensionError('A must be a square matrix.')

    # equal number of rows for A and B
    if A.shape[0] != B.shape[0]:
        raise DimensionError('A and B must have the same number of rows.')

def check_lqr_problem(A, B, Q, R, N):
    """
    Check that the matrices of the linear quadratic problem
    min sum_{t=0}^inf x'(t) Q x(t) + u'(t) R u(t) + 2 x'(t) N u(t) subject to x(t+1) = A x(t) + B u(t)
    have compatible sizes.

    Arguments
    ----------
    A : numpy.ndarray
        State transition matrix.
    B : numpy.ndarray
        Input to state map.
    Q : numpy.ndarray
        Quadratic cost for the state.
    R : numpy.ndarray
        Quadratic cost for the input.
    N : numpy.ndarray
        Cross cost between state and input.
    """

    # dynamics
    check_linear_system(A, B)
    nx, nu = B.shape

    # state cost
    if Q.ndim != 2 or Q.shape != (nx, nx):
        raise DimensionError('Q must be a square matrix with the same size of A.')

    # input cost
    if R.ndim != 2 or R.shape != (nu, nu):
        raise DimensionError('R must be a square matrix with as many rows as the columns of B.')

    # cross cost
    if N.ndim != 2 or N.shape != (nx, nu):
        raise DimensionError('N must have the same number of rows of A and the same number of columns of B.')
