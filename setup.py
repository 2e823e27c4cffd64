import os

from setuptools import find_packages, setup


def get_version():
    about = {}
    here = os.path.abspath(os.path.dirname(__file__))
    with open(os.path.join(here, 'binheap', 'version.py')) as f:
        exec(f.read(), about)
    return about['__version__']


setup(name='binheap',
      version=get_version(),
      description='Mergeable priority queue backed by a binomial heap',
      packages=find_packages(exclude=['tests']),
      python_requires='>=3.9',
      install_requires=['numpy', 'click', 'treelib'],
      extras_require={'test': ['pytest']},
      entry_points={'console_scripts': ['binheap = binheap.__main__:main']})
