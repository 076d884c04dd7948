# -*- coding: utf-8 -*-

import sys

import setuptools

if sys.version_info < (3, 8):
    error = 'depsort requires Python 3.8 or greater ({version.major}.{version.minor}.{version.micro} installed).'.format(version=sys.version_info)
    print(error, file=sys.stderr)
    sys.exit(1)


tests_require = [
    'mock',
    'pytest',
    'pytest-cov',
    'pytest-helpers-namespace',
]


setuptools.setup(
    name='depsort',
    version='0.1.0',

    description='Sort items by their dependencies, and find dependency cycles.',
    long_description=open('README.rst').read(),

    packages=setuptools.find_packages('src'),
    package_dir={'': 'src'},

    install_requires=['click'],
    tests_require=tests_require,
    extras_require={
        'test': tests_require,
    },

    zip_safe=False,

    entry_points={
        'console_scripts': [
            'depsort = depsort:main',
        ],
    },

    classifiers=[
        'Development Status :: 4 - Beta',
        'Programming Language :: Python :: 3',
    ],
)
