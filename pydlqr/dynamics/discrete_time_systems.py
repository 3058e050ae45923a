# external imports
import numpy as np

# internal imports
from pydlqr.dynamics.utils import check_linear_system
from pydlqr.control.linear_quadratic_regulator import dare

class LinearSystem(object):
    """
    Discrete-time linear systems in the form x(t+1) = A x(t) + B u(t).
    """

    def __init__(self, A, B):
        """
        Arguments
        ----------
        A : numpy.ndarray
            State transition matrix.
        B : numpy.ndarray
            Input to state map.
        """

        # check inputs
        A = np.asarray(A, dtype=float)
        B = np.asarray(B, dtype=float)
        check_linear_system(A, B)

        self.A = A
        self.B = B
        self.nx, self.nu = B.shape
        self._stabilizable = None

    def solve_dare(self, Q, R, N=None, **kwargs):
        """
        Returns the cost-to-go P and the gain K (u = - K x) of the infinite-horizon LQR for this system, see pydlqr.control.linear_quadratic_regulator.dare().
        Systems that are not stabilizable are rejected, since the Riccati iteration would not converge for them.

        Arguments
        ----------
        Q : numpy.ndarray
            Quadratic cost for the state (positive semidefinite).
        R : numpy.ndarray
            Quadratic cost for the input (positive definite).
        N : numpy.ndarray
            Cross cost between state and input (zero if None).
        kwargs : dict
            Options of the Riccati iteration (eps, max_iter, verbose, callback).

        Returns
        ----------
        P : numpy.ndarray
            Hessian of the cost-to-go.
        K : numpy.ndarray
            Optimal feedback gain matrix.
        """

        if not self.stabilizable:
            raise ValueError('unstabilizable system, cannot solve Riccati equation.')

        return dare(self.A, self.B, Q, R, N, **kwargs)

    def simulate_closed_loop(self, x0, N, K):
        """
        Returns the states x(0), ..., x(N) of the system in closed loop with u = - K x.
        """

        A_cl = self.A - self.B.dot(K)
        x = [x0]
        for t in range(N):
            x.append(A_cl.dot(x[-1]))

        return x

    @property
    def stabilizable(self):

        # check if already computed
        if self._stabilizable is not None:
            return self._stabilizable

        # PBH test on the modes outside the open unit disk
        self._stabilizable = True
        for l in np.linalg.eigvals(self.A):
            if np.absolute(l) >= 1.:
                M = np.hstack((self.A - l*np.eye(self.nx), self.B))
                if np.linalg.matrix_rank(M) < self.nx:
                    self._stabilizable = False
                    break

        return self._stabilizable
