#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup
setup(name='gramcc',
    version='0.1',
    description='Compiler for cost-annotated natural-language query grammars',
    install_requires=['Jinja2>=2.7.0', 'pydantic>=2'],
    extras_require={
        'test': ['pytest'],
        },
    packages=['gramcc', 'gramcc.rules', 'gramcc.tests'],
    package_dir={'': 'src'},
    entry_points = {
        'console_scripts': [
            'gramcc = gramcc.__main__:_main',
            ],
        },
    test_suite = "gramcc.tests",
    classifiers=[
        # Supported python versions
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',

        # Topics
        'Topic :: Software Development :: Compilers',
        'Topic :: Text Processing :: Linguistic',
    ]
    )
