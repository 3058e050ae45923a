# external imports
import unittest
import numpy as np

# internal inputs
from pydlqr.dynamics.utils import check_linear_system, check_lqr_problem
from pydlqr.control.exceptions import DimensionError

class TestUtils(unittest.TestCase):

    def test_check_linear_system(self):

        # non-square A
        A = np.ones((2,1))
        B = np.ones((2,1))
        self.assertRaises(DimensionError, check_linear_system, A, B)

        # uncoherent B and A
        A = np.ones((3,3))
        self.assertRaises(DimensionError, check_linear_system, A, B)

        # 1-dimensional B
        self.assertRaises(DimensionError, check_linear_system, A, np.ones(3))

        # correct system
        check_linear_system(A, np.ones((3,1)))

    def test_check_lqr_problem(self):
        A = np.ones((3,3))
        B = np.ones((3,2))
        Q = np.eye(3)
        R = np.eye(2)
        N = np.zeros((3,2))
        check_lqr_problem(A, B, Q, R, N)

        # wrong sizes, one matrix at the time
        self.assertRaises(DimensionError, check_lqr_problem, np.ones((3,2)), B, Q, R, N)
        self.assertRaises(DimensionError, check_lqr_problem, A, np.ones((2,2)), Q, R, N)
        self.assertRaises(DimensionError, check_lqr_problem, A, B, np.eye(2), R, N)
        self.assertRaises(DimensionError, check_lqr_problem, A, B, np.ones((3,2)), R, N)
        self.assertRaises(DimensionError, check_lqr_problem, A, B, Q, np.eye(3), N)
        self.assertRaises(DimensionError, check_lqr_problem, A, B, Q, np.ones((2,1)), N)
        self.assertRaises(DimensionError, check_lqr_problem, A, B, Q, R, np.zeros((2,3)))
        self.assertRaises(DimensionError, check_lqr_problem, A, B, Q, R, np.zeros(6))

if __name__ == '__main__':
    unittest.main()
