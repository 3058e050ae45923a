# external imports
import sys
import numpy as np

# internal imports
from pydlqr.control.linear_quadratic_regulator import solve
from pydlqr.models.example_system import example_system

def main():

    # demonstration system
    A, B, Q, R, N = example_system()

    # count the iterations while solving
    iterations = []
    K, ok = solve(A, B, Q, R, N, eps=1e-15, callback=lambda t, delta: iterations.append(t))
    if not ok:
        print('Could not compute the feedback gain.')
        return 1

    print('Riccati iteration converged in ' + str(iterations[-1]) + ' iterations.')
    print('Feedback gain K:')
    print(np.array2string(K, precision=6, floatmode='fixed', suppress_small=False))

    return 0

if __name__ == '__main__':
    sys.exit(main())
