#!/usr/bin/env python

from setuptools import setup, find_packages
import re

with open("http_deprecation/__init__.py", encoding="utf-8") as init_fh:
    __version__ = re.search(r'^__version__ = "([^"]+)"', init_fh.read(), re.M).group(1)

setup(name='http-deprecation',
      version=__version__,
      description='Deprecation and Link header parsing for HTTP clients.',
      long_description=open("README.md", encoding="utf-8").read(),
      long_description_content_type="text/markdown",
      license = "MIT",
      packages=find_packages(exclude=["test", "test.*"]),
      package_dir={'http_deprecation': 'http_deprecation'},
      scripts=['bin/http_deprecation'],
      python_requires=">=3.7",
      install_requires=[
          'thor >= 0.8.0',
          'markdown >= 2.6.5',
          'markupsafe >= 2.0',
          'typing_extensions >= 3.7'
      ],
      extras_require={
          'dev': [
          'mypy',
          'pytest'
          ]
      },
      classifiers=[
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: MIT License',
      ],
)
