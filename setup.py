#!/usr/bin/env python
# -*- encoding: utf-8 -*-

import io
import re
from os.path import dirname
from os.path import join

from setuptools import find_packages
from setuptools import setup

import itertools


def read(*names, **kwargs):
    with io.open(join(dirname(__file__), *names), encoding=kwargs.get('encoding', 'utf8')) as fh:
        return fh.read()

extras_require = {
        'dev': [
            'pytest>=7.0.1'
        ]
    }
extras_require['all'] = list(itertools.chain.from_iterable(extras_require.values()))

setup(
    name='matrixnodes',
    version='0.1.0',
    license='MIT',
    description='matrixnodes: typed, tag configured matrix nodes for streaming dataflow graphs.',
    long_description='{}\n{}'.format(
        re.compile('^.. start-badges.*^.. end-badges', re.M | re.S).sub('', read('README.md')),
        re.sub(':[a-z]+:`~?(.*?)`', r'``\1``', read('CHANGELOG.rst')),
    ),
    long_description_content_type='text/markdown',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: Unix',
        'Operating System :: POSIX',
        'Operating System :: Microsoft :: Windows',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Utilities',
    ],
    keywords=[
        'dataflow', 'streaming', 'matrix',
    ],
    python_requires='>=3.8',
    install_requires=[
        "numpy>=1.22.1",
        "graphviz>=0.19.1",
        "phx-class-registry",
        "python-dotenv",
    ],
    extras_require=extras_require,
    entry_points={
        'matrixnodes.nodes': [
            'Matrix_subtract = matrixnodes.nodes.matrix_subtract:Matrix_subtract',
        ]
    },
)
