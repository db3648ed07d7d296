import os

from setuptools import find_packages, setup

VERSION = '1.0.0'


def read_readme():
    try:
        with open(os.path.join(os.path.dirname(__file__), 'README.md')) as fh:
            return fh.read()
    except OSError:
        return ''


TEST_REQS = [
    'coverage>=4.2',
    'pytest',
    'pytest-cov',
]


INSTALL_REQS = [
    'mavis_config>=1.0.0, <2.0.0',
]

DEPLOY_REQS = ['twine', 'wheel']


setup(
    name='bedpesummary',
    version='{}'.format(VERSION),
    package_dir={'': 'src'},
    packages=find_packages(where='src', exclude=['tests']),
    description='Summary statistics for BEDPE files of paired genomic intervals',
    long_description=read_readme(),
    long_description_content_type='text/markdown',
    install_requires=INSTALL_REQS,
    extras_require={
        'test': TEST_REQS,
        'dev': ['black', 'flake8'] + TEST_REQS + DEPLOY_REQS,
        'deploy': DEPLOY_REQS,
    },
    python_requires='>=3.7',
    test_suite='tests',
    entry_points={'console_scripts': ['bedpesummary = bedpesummary.main:main']},
)
