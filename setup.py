import os

import setuptools

with open('README.md', 'r') as fh:
    DESC = fh.read()

REQ_PATH = os.path.join(os.path.dirname(os.path.realpath(__file__)), 'requirements.txt')
INSTALL_REQUIRES = []
if os.path.isfile(REQ_PATH):
    with open(REQ_PATH) as f:
        INSTALL_REQUIRES = [line for line in f.read().splitlines() if line and not line.startswith('#')]

setuptools.setup(
    name='lazysupply',
    version='0.0.1',
    author='The Penny Dreadful Team',
    description='Thread-safe lazily initialized values',
    long_description=DESC,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(include=['lazysupply', 'lazysupply.*']),
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.10',
    install_requires=INSTALL_REQUIRES,
    extras_require={
        'test': [
            'pytest',
            'coverage',
            'click',
            'plumbum',
            'flake8',
            'isort',
            'mypy',
        ],
    },
)
