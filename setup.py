#!/usr/bin/env python

import codecs
import os

from setuptools import find_packages
from setuptools import setup

ROOT_DIR = os.path.dirname(__file__)
SOURCE_DIR = os.path.join(ROOT_DIR)

requirements = [
    'packaging >= 14.0',
    'paramiko >= 3.2.0',
    'requests >= 2.26.0',
]

extras_require = {}

with open(os.path.join(ROOT_DIR, 'test-requirements.txt')) as test_reqs_txt:
    test_requirements = [line.strip() for line in test_reqs_txt
                         if line.strip()]

extras_require['test'] = test_requirements

version = None
exec(open(os.path.join(ROOT_DIR, 'dockerports', 'version.py')).read())

long_description = ''
with codecs.open(os.path.join(ROOT_DIR, 'README.md'),
                 encoding='utf-8') as readme_md:
    long_description = readme_md.read()

setup(
    name="dockerports",
    version=version,
    description="Compact, human readable summaries of Docker port mappings.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=["tests.*", "tests"]),
    install_requires=requirements,
    tests_require=test_requirements,
    extras_require=extras_require,
    python_requires='>=3.7',
    zip_safe=False,
    test_suite='tests',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Other Environment',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development',
        'Topic :: Utilities',
        'License :: OSI Approved :: Apache Software License',
    ],
)
