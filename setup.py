#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="mempass",
    version="0.1.0",
    description="Human memorable password generator",
    packages=find_packages(include=['mempass', 'mempass.*']),
    package_data={'mempass': ['words.txt']},
    python_requires='>=3.8',
    install_requires=[
        'prompt_toolkit',
        'blessed',
        'pyperclip',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'mempass = mempass.main:main',
        ],
    },
)
