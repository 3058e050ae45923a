# external imports
import numpy as np

# internal imports
from pydlqr.dynamics.utils import check_lqr_problem
from pydlqr.control.exceptions import DimensionError, ConvergenceError, SingularMatrixError

def solve(A, B, Q, R, N=None, eps=1e-15, **kwargs):
    """
    Computes the optimal feedback gain of the infinite-horizon linear quadratic regulator and reports whether the computation succeeded.
    Any failure (incompatible sizes, no convergence, singular matrices) is reported through the flag alone.

    Arguments
    ----------
    A : numpy.ndarray
        State transition matrix.
    B : numpy.ndarray
        Input to state map.
    Q : numpy.ndarray
        Quadratic cost for the state (positive semidefinite).
    R : numpy.ndarray
        Quadratic cost for the input (positive definite).
    N : numpy.ndarray
        Cross cost between state and input (zero if None).
    eps : float
        Convergence threshold on the largest entry of the difference between two consecutive iterates.
    kwargs : dict
        Options forwarded to dare() (max_iter, verbose, callback).

    Returns
    ----------
    K : numpy.ndarray
        Optimal feedback gain matrix (u = - K x), None in case of failure.
    ok : bool
        True if the gain has been computed.
    """

    try:
        P, K = dare(A, B, Q, R, N, eps, **kwargs)
    except (DimensionError, ConvergenceError, SingularMatrixError):
        return None, False

    return K, True

def dare(A, B, Q, R, N=None, eps=1e-15, max_iter=100000, verbose=False, callback=None):
    """
    Returns the solution of the Discrete Algebraic Riccati Equation (DARE) and the related optimal feedback gain.
    Consider the linear quadratic control problem V*(x(0)) = min_{x(.), u(.)} sum_{t=0}^inf x'(t) Q x(t) + u'(t) R u(t) + 2 x'(t) N u(t) subject to x(t+1) = A x(t) + B u(t).
    The optimal solution is u(0) = - K x(0) which leads to V*(x(0)) = x'(0) P x(0).

    Arguments
    ----------
    A : numpy.ndarray
        State transition matrix.
    B : numpy.ndarray
        Input to state map.
    Q : numpy.ndarray
        Quadratic cost for the state (positive semidefinite).
    R : numpy.ndarray
        Quadratic cost for the input (positive definite).
    N : numpy.ndarray
        Cross cost between state and input (zero if None).
    eps : float
        Convergence threshold (see riccati_iteration()).
    max_iter : int
        Maximum number of iterations, None for no limit.
    verbose : bool
        If True prints at each iteration the convergence parameters.
    callback : callable
        Called at each iteration as callback(t, delta).

    Returns
    ----------
    P : numpy.ndarray
        Hessian of the cost-to-go.
    K : numpy.ndarray
        Optimal feedback gain matrix.
    """

    # check inputs
    A, B, Q, R, N = _as_lqr_problem(A, B, Q, R, N)
    check_lqr_problem(A, B, Q, R, N)

    # cost to go
    P, t = _riccati_iteration(A, B, Q, R, N, eps, max_iter, verbose, callback)

    # feedback
    K = gain_matrix(A, B, R, P, N)

    return P, K

def riccati_iteration(A, B, Q, R, N=None, eps=1e-15, max_iter=100000, verbose=False, callback=None):
    """
    Solves the DARE
    P = A' P A - (A' P B + N) (R + B' P B)^-1 (B' P A + N') + Q
    by fixed-point iteration starting from P = Q.

    Math
    ----------
    Defining A_hat := A - B R^-1 N' and Q_hat := Q - N R^-1 N' the cross term disappears and the DARE becomes
    P = A_hat' P A_hat - A_hat' P B (R + B' P B)^-1 B' P A_hat + Q_hat.
    A_hat and Q_hat are computed once, then the right-hand side is evaluated until the largest entry (in absolute value) of the update P(k+1) - P(k) is smaller than eps.

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
        Cross cost between state and input (zero if None).
    eps : float
        Convergence threshold.
    max_iter : int
        Maximum number of iterations, None for no limit (the iteration does not terminate on problems without a stabilizing solution).
    verbose : bool
        If True prints at each iteration the convergence parameters.
    callback : callable
        Called at each iteration as callback(t, delta).

    Returns
    ----------
    P : numpy.ndarray
        Converged solution of the DARE.
    t : int
        Number of iterations.
    """

    # check inputs
    A, B, Q, R, N = _as_lqr_problem(A, B, Q, R, N)
    check_lqr_problem(A, B, Q, R, N)

    return _riccati_iteration(A, B, Q, R, N, eps, max_iter, verbose, callback)

def gain_matrix(A, B, R, P, N=None):
    """
    Returns the feedback gain K = (R + B' P B)^-1 (B' P A + N') of the control law u = - K x.
    Original (not cross-term reduced) A and N must be used.

    Arguments
    ----------
    A : numpy.ndarray
        State transition matrix.
    B : numpy.ndarray
        Input to state map.
    R : numpy.ndarray
        Quadratic cost for the input.
    P : numpy.ndarray
        Solution of the DARE.
    N : numpy.ndarray
        Cross cost between state and input (zero if None).

    Returns
    ----------
    K : numpy.ndarray
        Optimal feedback gain matrix.
    """

    if N is None:
        N = np.zeros(B.shape)
    BtP = B.T.dot(P)

    return _inverse(R + BtP.dot(B), 'R + B\' P B').dot(BtP.dot(A) + N.T)

def _riccati_iteration(A, B, Q, R, N, eps, max_iter, verbose, callback):

    # precomputations
    R_inv = _inverse(R, 'R')
    A_hat = A - B.dot(R_inv).dot(N.T)
    A_hat_t = A_hat.T
    Q_hat = Q - N.dot(R_inv).dot(N.T)

    # iterate
    P = Q
    t = 0
    convergence = False
    while not convergence:
        if max_iter is not None and t >= max_iter:
            raise ConvergenceError('Riccati iteration did not converge in ' + str(max_iter) + ' iterations.')

        # update (overflows are detected below)
        with np.errstate(over='ignore', invalid='ignore'):
            PA = P.dot(A_hat)
            PB = P.dot(B)
            H = _inverse(R + B.T.dot(PB), 'R + B\' P B')
            P_next = A_hat_t.dot(PA) - A_hat_t.dot(PB).dot(H).dot(B.T.dot(PA)) + Q_hat
        if not np.all(np.isfinite(P_next)):
            raise ConvergenceError('Riccati iteration diverged at iteration ' + str(t+1) + '.')
        delta = np.max(np.absolute(P_next - P))
        P = P_next
        t += 1

        # print status of the algorithm
        if verbose:
            print('Iteration: ' + str(t) + '. Convergence index: ' + str(delta) + '.   ', end='\r')
        if callback is not None:
            callback(t, delta)

        # convergence check
        convergence = delta < eps

    if verbose:
        print('\nRiccati iteration converged in ' + str(t) + ' iterations.')

    return P, t

def _inverse(M, name):
    """
    Inverts the matrix M raising SingularMatrixError if the inverse cannot be computed or is not finite.
    """

    try:
        M_inv = np.linalg.inv(M)
    except np.linalg.LinAlgError:
        raise SingularMatrixError('the matrix ' + name + ' is singular.')
    if not np.all(np.isfinite(M_inv)):
        raise SingularMatrixError('the matrix ' + name + ' is numerically singular.')

    return M_inv

def _as_lqr_problem(A, B, Q, R, N):
    A, B, Q, R = [np.asarray(M, dtype=float) for M in (A, B, Q, R)]
    if N is None:
        N = np.zeros(B.shape)
    else:
        N = np.asarray(N, dtype=float)
    return A, B, Q, R, N
