import os
import io
from setuptools import setup

root = os.path.dirname(__file__)
with open(os.path.join(root, 'wisp', 'version.py')) as f:
    exec(f.read())

with io.open(os.path.join(root, 'README.rst'), encoding='utf8') as f:
    readme = f.read()

setup(
    name='WISP',
    version=__version__,
    packages=['wisp'],
    description='Solvers for the weighted interval scheduling problem.',
    long_description=readme,
    keywords='weighted interval scheduling '
        'maximum weight independent set of intervals '
        'dynamic programming optimization',
    python_requires='>=3.6',
    install_requires=[
        'numpy>=1.15.0',
        'pyparsing>=3.0.0',
        'python-dateutil>=2.7.0'],
    extras_require={
        'test': ['pytest']},
    classifiers=[
        'Topic :: Scientific/Engineering :: Mathematics',
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: Apache Software License']
)
