"""Monte Carlo Particle Numbering for Python

mcpid maps the numeric particle codes of the Monte Carlo Particle
Numbering Scheme, maintained by the `Particle Data Group
<https://pdg.lbl.gov>`_, to particle names and back.  It knows which
particles are their own antiparticle and classifies codes by family.

The following packages and modules are included:

:mod:`~mcpid.corsika`
    translate CORSIKA particle codes

:mod:`~mcpid.numbering`
    digit structure of the numbering scheme and family classification

:mod:`~mcpid.particles`
    look up names, codes and antiparticles

:mod:`~mcpid.registry`
    the particle value type and the particle table

:mod:`~mcpid.selections`
    apply the particle table to arrays of codes

:mod:`~mcpid.tables`
    package containing the particle constants, grouped by family

:mod:`~mcpid.tests`
    code tests

"""

from . import (
    corsika,
    numbering,
    particles,
    registry,
    selections,
    tables,
)
from .numbering import FAMILIES, nucleus_id
from .particles import anti, family_of, id_of, latex_name, lookup, name_of, particle_id
from .registry import REGISTRY, Particle
from .tests import run_tests

__all__ = [
    'FAMILIES',
    'Particle',
    'REGISTRY',
    'anti',
    'corsika',
    'family_of',
    'id_of',
    'latex_name',
    'lookup',
    'name_of',
    'nucleus_id',
    'numbering',
    'particle_id',
    'particles',
    'registry',
    'run_tests',
    'selections',
    'tables',
]
