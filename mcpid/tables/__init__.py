"""The particle constants, grouped by family

Importing this package fills :data:`mcpid.registry.REGISTRY` and freezes
it.  Each module defines one constant per particle, for example::

    >>> from mcpid.tables import light_baryons
    >>> int(light_baryons.proton)
    2212

The following modules are included:

:mod:`~mcpid.tables.quarks`
    quarks and antiquarks

:mod:`~mcpid.tables.leptons`
    charged leptons and neutrinos

:mod:`~mcpid.tables.bosons`
    gauge and Higgs bosons

:mod:`~mcpid.tables.special`
    graviton, Regge trajectories and generator pseudo particles

:mod:`~mcpid.tables.light_mesons`
    isovector, isoscalar and strange mesons

:mod:`~mcpid.tables.heavy_mesons`
    charmed and bottom mesons, quarkonia

:mod:`~mcpid.tables.light_baryons`
    nucleons, Delta and strange baryons

:mod:`~mcpid.tables.heavy_baryons`
    charmed and bottom baryons

:mod:`~mcpid.tables.diquarks`
    diquarks

:mod:`~mcpid.tables.pentaquarks`
    pentaquarks

:mod:`~mcpid.tables.susy`
    supersymmetric particles

:mod:`~mcpid.tables.technicolor`
    technicolor particles

:mod:`~mcpid.tables.nuclei`
    light nuclei and common cosmic ray primaries

"""
from ..registry import REGISTRY
from . import (
    bosons,
    diquarks,
    heavy_baryons,
    heavy_mesons,
    leptons,
    light_baryons,
    light_mesons,
    nuclei,
    pentaquarks,
    quarks,
    special,
    susy,
    technicolor,
)

REGISTRY.freeze()

__all__ = ['bosons',
           'diquarks',
           'heavy_baryons',
           'heavy_mesons',
           'leptons',
           'light_baryons',
           'light_mesons',
           'nuclei',
           'pentaquarks',
           'quarks',
           'special',
           'susy',
           'technicolor']
