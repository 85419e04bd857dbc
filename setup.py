#!/usr/bin/env python

"""phyllotaxis generates and displays golden-angle spiral patterns."""
import os
import io

from setuptools import find_packages, setup

# Package meta-data
NAME = "phyllotaxis"
DESCRIPTION = "Golden-angle spiral patterns of seeds and leaves, drawn as scatter plots."
URL = "https://github.com/phyllotaxis/phyllotaxis"
EMAIL = ""
AUTHOR = "phyllotaxis developers"
REQUIRES_PYTHON = ">=3.9.0"
VERSION = "0.1.0"
CLASSIFIERS = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python",
    "Topic :: Scientific/Engineering :: Visualization"]

here = os.path.abspath(os.path.dirname(__file__))

# Source package requirements from requirements.txt
with open(os.path.join(here, 'requirements.txt')) as open_file:
    install_requires = open_file.read().splitlines()

# Source test requirements from develop.txt
with open(os.path.join(here, 'develop.txt')) as open_file:
    tests_requires = open_file.read().splitlines()

# Import the README and use it as the long-description.
try:
    with io.open(os.path.join(here, 'README.md'), encoding='utf-8') as f:
        long_description = '\n' + f.read()
except FileNotFoundError:
    long_description = DESCRIPTION

# Where the magic happens:
setup(
    name=NAME,
    version=VERSION,
    description=DESCRIPTION,
    long_description=long_description,
    long_description_content_type='text/markdown',
    author=AUTHOR,
    author_email=EMAIL,
    python_requires=REQUIRES_PYTHON,
    url=URL,
    classifiers=CLASSIFIERS,
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=install_requires,
    extras_require={'test': tests_requires, 'develop': tests_requires},
    include_package_data=True,
)
