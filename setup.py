"""A setuptools based setup module."""

from os import path

from setuptools import setup, find_packages

HERE = path.abspath(path.dirname(__file__))
with open(path.join(HERE, 'README.md'), encoding='utf-8') as file:
    LONG_DESCRIPTION = file.read()

setup(
    name='superlist',
    version='0.0.1',
    description='Doubly linked list with functional operations and change '
                'notifications.',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    classifiers=[  # https://pypi.org/classifiers/
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    keywords='linked-list container observer',
    packages=find_packages(exclude=['contrib', 'docs', 'tests']),
    python_requires='>=3.9, <4',
    install_requires=[
        'dataslots>=1.0.2,<1.2'
    ],
    extras_require={
        'dev': [
            'flake8',
            'isort',
            'pycodestyle',
            'pydocstyle',
            'pylint'
        ],
        'test': [
            'pytest'
        ]
    }
)
