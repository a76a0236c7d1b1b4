#!/usr/bin/env python

import os
import re
from setuptools import setup, find_packages


def load_readme():
    with open('README.rst', 'r') as fd:
        return fd.read()


def load_requirements():
    """Parse requirements.txt"""
    reqs_path = os.path.join('.', 'requirements.txt')
    with open(reqs_path, 'r') as fd:
        requirements = [line.rstrip() for line in fd
                        if line.strip() != ""]
    return requirements


package_name = 'joblogfmt'
data_dir = "/".join((package_name, "data"))
data_files = ["data/" + fn for fn in os.listdir(data_dir)]

init_path = os.path.join(os.path.dirname(__file__), package_name, '__init__.py')
with open(init_path) as f:
    version = re.search("__version__ = '([^']+)'", f.read()).group(1)

setup(name=package_name,
      version=version,
      description='A job log formatter inserting tab columns between time and details.',
      long_description=load_readme(),
      install_requires=load_requirements(),
      classifiers=[
          'Development Status :: 4 - Beta',
          'Environment :: Console',
          'Intended Audience :: End Users/Desktop',
          "Intended Audience :: Developers",
          'License :: OSI Approved :: BSD License',
          "Operating System :: OS Independent",
          'Programming Language :: Python :: 3',
          'Topic :: Text Processing',
          'Topic :: Utilities'],
      license='The 3-Clause BSD License',

      packages=find_packages(exclude=["tests"]),
      package_data={'joblogfmt': data_files},
      include_package_data=True,
      entry_points={
          'console_scripts': [
              'joblogfmt = joblogfmt.__main__:main',
          ],
      },
      test_suite="tests"
      )
