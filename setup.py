#!/usr/bin/env python
# -*- coding: utf-8 -*-
import os
import re

from setuptools import setup, find_packages

# Add here console scripts and other entry points in ini-style format
entry_points = """
[console_scripts]
    wots = winternitz.cli:main
"""


def get_version():
    init_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src', 'winternitz', '__init__.py')
    with open(init_path) as f:
        return re.search(r"^__version__ = '([^']+)'", f.read(), re.M).group(1)


def get_requirements():
    requirements_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'requirements.txt')
    with open(requirements_path) as f:
        return [line.strip() for line in f if line.strip() and not line.startswith('#')]


def setup_package():
    setup(name='winternitz',
          version=get_version(),
          description='Winternitz one-time signatures built on hash chains',
          license='MIT',
          python_requires='>=3.6',
          package_dir={'': 'src'},
          packages=find_packages(where='src'),
          install_requires=get_requirements(),
          extras_require={
              'test': ['pytest', 'mock'],
          },
          entry_points=entry_points)


if __name__ == "__main__":
    setup_package()
