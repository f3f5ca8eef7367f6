# SPDX-FileCopyrightText: 2025 ratgrid contributors
# SPDX-License-Identifier: Apache-2.0

from setuptools import setup, find_packages

setup(
    name='ratgrid',
    version='0.1.0',
    description='Exact rational numbers and square game boards',
    license='Apache-2.0',
    python_requires='>=3.9',
    packages=find_packages(include=['ratgrid', 'ratgrid.*']),
    install_requires=[
        'atpublic',
        'pyrsistent',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'ratgrid = ratgrid.cli:main',
        ],
    },
)
