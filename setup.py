from glob import glob
from setuptools import setup


setup(
    name='hexcalc',
    version='1.2',
    description='Hex RPN calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['hexcalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    tests_require=[
        'pytest',
        'pytest-cov',
        'coverage',
        'flake8',
        'bandit',
        'mypy',
        'safety',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
