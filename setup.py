#!/usr/bin/env python3

import ircgen
from setuptools import setup, find_packages


with open("requirements.txt") as f:
  requires = f.read().splitlines()


setup(name="ircgen",
      version=ircgen.__version__,
      description="ircgen: IRC and CTCP message generator",
      packages=find_packages(),
      include_package_data=True,
      zip_safe=False,
      test_suite="ircgen",
      install_requires=requires,
      entry_points="""\
      [console_scripts]
      ircgen = ircgen:main
      """
      )
