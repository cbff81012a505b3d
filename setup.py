# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='htmlgen',
  version='0.1.0',
  description='htmlgen builds HTML markup strings: tags, form controls, attributes, and CSS class/style merging.',
  python_requires='>=3.10',

  packages=['htmlgen'],
  extras_require={
    'test': ['pytest'],
  },
)
