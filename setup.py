from setuptools import setup, find_packages


setup(name='eulerkit',
      version='1.0.0',
      description='Conversions between Euler angles, quaternions, and transformation matrices',
      packages=find_packages(include=['eulerkit', 'eulerkit.*']),
      python_requires='>=3.11',
      install_requires=['numpy'],
      extras_require={'test': ['pytest', 'scipy']})
