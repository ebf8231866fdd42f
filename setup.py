#!/usr/bin/env python
from setuptools import setup, find_packages


def long_desc():
    with open('README.md') as f:
        return f.read()


setup(
    name='termgrid',
    version='1.0',
    description='Pack short strings into terminal columns.',
    author='Justin Mayfield',
    author_email='tooker@gmail.com',
    license='MIT',
    long_description=long_desc(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['test', 'examples']),
    install_requires=[],
    test_suite='test',
    entry_points={
        'console_scripts': [
            'gridcat=termgrid.tools.gridcat:main',
        ]
    },
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.11',
        'Topic :: Software Development :: Libraries',
        'Topic :: Terminals',
    ]
)
