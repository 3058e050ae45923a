from setuptools import setup, find_packages

setup(name='pydlqr',
      version='0.1',
      description='Infinite-horizon discrete-time Linear Quadratic Regulator via fixed-point Riccati iteration',
      license='MIT',
      packages=find_packages(exclude=['examples']),
      keywords=[
          'linear quadratic regulator',
          'discrete algebraic riccati equation'
          ],
      install_requires=[
          'numpy'
      ],
      extras_require={
          'test': ['scipy']
      },
      zip_safe=False)
