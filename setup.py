# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Vectorious — Dense Linear Algebra Kernels                           ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
Vectorious build configuration.

Pure-Python package: the native BLAS path is bound at runtime through
``ctypes`` (see ``vectorious/backends/blas.py``), so there is nothing to
compile.

Build
-----
    pip install -e .[dev]                     # editable install + test deps
    python -m pytest tests                    # run the suite
    python setup.py bdist_wheel               # wheel

Runtime environment variables:
    VECTORIOUS_BLAS_LIB     — CBLAS library path(s) to try first
    VECTORIOUS_NO_BLAS      — set to 1 to force the portable kernels
"""
import os

from setuptools import setup, find_packages

# ── Package metadata ──
_readme = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'README.md')
long_description = ''
if os.path.isfile(_readme):
    with open(_readme, 'r', encoding='utf-8') as fh:
        long_description = fh.read()

setup(
    name='vectorious',
    version='5.5.0',
    author='Pictofeed, LLC',
    author_email='engineering@pictofeed.io',
    description=(
        'Dense linear algebra kernels — native CBLAS with a portable '
        'pure-Python fallback'
    ),
    long_description=long_description,
    long_description_content_type='text/markdown',
    url='https://github.com/pictofeed/vectorious',
    license='Proprietary',

    packages=find_packages(include=['vectorious', 'vectorious.*']),

    python_requires='>=3.10',
    install_requires=[
        'numpy>=1.24',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-benchmark',
        ],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: Other/Proprietary License',
        'Operating System :: MacOS :: MacOS X',
        'Operating System :: POSIX :: Linux',
        'Operating System :: Microsoft :: Windows',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    zip_safe=False,
)
