from setuptools import find_packages, setup


install_requires = ['numpy']
test_requires = ['pytest', 'pytest-benchmark', 'scipy']

setup(
    name='weighted-mad',
    version='0.1.0',
    description='Weighted median absolute deviation estimators',
    install_requires=install_requires,
    extras_require={'test': test_requires},
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.7',
    zip_safe=False,
)
