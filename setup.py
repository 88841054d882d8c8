from pathlib import Path

from setuptools import find_packages, setup

setup(
    name='mcpid',
    version='1.0.0',
    packages=find_packages(include=['mcpid', 'mcpid.*']),
    license='GPLv3',
    description='Monte Carlo Particle Numbering Scheme codes, names and antiparticles',
    long_description=(Path(__file__).parent / 'README.rst').read_text(),
    keywords=['particle physics', 'Monte Carlo', 'PDG', 'CORSIKA', 'cosmic rays'],
    classifiers=[
        'Intended Audience :: Science/Research',
        'Intended Audience :: Education',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Physics',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
    ],
    install_requires=['numpy'],
    extras_require={'dev': ['Sphinx', 'ruff', 'coverage']},
)
