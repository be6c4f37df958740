#!/usr/bin/env python3
from setuptools import setup

setup(
    name='unikit',
    version='1.0.0',
    license='GNU Affero GPL v3',
    description='Unicode case folding and General Category lookups from compact tables',
    long_description=open('README.rst').read(),
    install_requires=[
        'numpy >= 1.20',
        'unidecode',
    ],
    extras_require={
        'test': ['pytest'],
    },
    packages=[
        'unikit',
    ],
    package_dir={'': 'src'},
    scripts=[
        'scripts/unikit_db.py',
        'scripts/unikit_query.py',
    ],
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing',
        'Topic :: Text Processing :: Linguistic',
    ],
)
