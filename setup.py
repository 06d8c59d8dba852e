import fnmatch
import os
from typing import List

from setuptools import setup

from jsonlookup import __version__

pkg_dir = os.path.dirname(os.path.realpath(__file__))


def recursive_glob(treeroot: str, pattern: str) -> List[str]:
    results: List[str] = []
    for base, dirs, files in os.walk(treeroot):
        goodfiles = fnmatch.filter(files, pattern)
        results.extend(os.path.join(base, f) for f in goodfiles)
    return results


def get_resources(package: str) -> List[str]:
    curr_path = os.getcwd()
    os.chdir(os.path.join(pkg_dir, package))
    resources = recursive_glob('resources', '*')
    os.chdir(curr_path)
    return resources


def get_requires(filepath: str) -> List[str]:
    if os.path.isfile(filepath):
        with open(filepath) as f:
            return f.read().splitlines()
    return []


setup(name='jsonlookup',
      version=__version__,
      description='Look up and modify JSON files using simple path expressions',
      long_description=(open(os.path.join(pkg_dir, 'LICENSE.rst')).read()),
      license='MIT',
      packages=['jsonlookup'],
      entry_points={
          'console_scripts': [
              'jsonlookup=jsonlookup.main:main',
          ],
      },
      package_data={'jsonlookup': get_resources('jsonlookup')},
      classifiers=[
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
      ],
      python_requires='>=3.11',
      install_requires=get_requires(os.path.join(pkg_dir, "requirements.txt")),
      extras_require={'dev': get_requires(os.path.join(pkg_dir, "requirements-dev.txt"))})
