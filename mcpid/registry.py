""" The particle table

This module defines the :class:`Particle` value type and the
:class:`Registry` holding every known particle.  The process-wide table is
:data:`REGISTRY`; it is filled by the modules in :mod:`mcpid.tables` when
the package is imported and frozen afterwards.

Each entry stores whether it is its own antiparticle.  This can not be
derived from the code: the photon (22) is self-conjugate while the muon
(13) is not, and neutral mesons such as the K0 have a distinct
antiparticle.

"""
import logging
from numbers import Integral
from types import MappingProxyType


logger = logging.getLogger('mcpid.registry')


def is_code(value):
    """True for integers which can be particle codes, booleans excluded"""
    return isinstance(value, Integral) and not isinstance(value, bool)


class Particle(object):

    """A particle in the Monte Carlo Particle Numbering Scheme

    Particles are immutable and compare equal when their codes are equal,
    also to plain integers.  Use :func:`int` to get the numeric code.

    """

    __slots__ = ('_id', '_name', '_family', '_self_conjugate', '_latex')

    def __init__(self, pid, name, family, self_conjugate, latex=None):
        self._id = int(pid)
        self._name = name
        self._family = family
        self._self_conjugate = bool(self_conjugate)
        self._latex = latex

    @property
    def id(self):
        """Monte Carlo particle code"""
        return self._id

    @property
    def name(self):
        """Canonical name, None if the particle has no name"""
        return self._name

    @property
    def family(self):
        return self._family

    @property
    def self_conjugate(self):
        """True if the particle is its own antiparticle"""
        return self._self_conjugate

    @property
    def latex(self):
        """Name in LaTeX format, None if not available"""
        return self._latex

    @property
    def is_anti_particle(self):
        return self._id < 0

    def anti(self):
        """Get the antiparticle from the table"""
        return REGISTRY.anti(self)

    def __neg__(self):
        return self.anti()

    def __int__(self):
        return self._id

    def __index__(self):
        return self._id

    def __eq__(self, other):
        if isinstance(other, Particle):
            return self._id == other._id
        if is_code(other):
            return self._id == other
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self._id)

    def __setattr__(self, attr, value):
        if hasattr(self, '_latex'):
            raise AttributeError("'Particle' object is read-only")
        super(Particle, self).__setattr__(attr, value)

    def __repr__(self):
        return '<Particle %d %r>' % (self._id, self._name)

    def __str__(self):
        if self._name is None:
            return str(self._id)
        return self._name


class Registry(object):

    """Table of particles indexed by code and by name

    Particles are added with :meth:`self_conjugate` or
    :meth:`conjugate_pair`, the latter always registers the particle
    together with its antiparticle.  After :meth:`freeze` the table can
    only be read.

    """

    def __init__(self):
        self._by_id = {}
        self._by_name = {}
        self._frozen = False

    def self_conjugate(self, pid, name, family, latex=None):
        """Register a particle which is its own antiparticle

        :return: the new :class:`Particle`.

        """
        particle = Particle(pid, name, family, True, latex)
        self._add(particle)
        return particle

    def conjugate_pair(self, pid, name, anti_name, family, latex=None,
                       anti_latex=None):
        """Register a particle and its antiparticle

        :param pid: positive code of the particle, the antiparticle gets
                    the negated code.
        :return: tuple of the particle and the antiparticle.

        """
        if pid <= 0:
            raise ValueError('Conjugate pairs are registered with a '
                             'positive code, got %d' % pid)
        particle = Particle(pid, name, family, False, latex)
        antiparticle = Particle(-pid, anti_name, family, False, anti_latex)
        if name is not None and name == anti_name:
            raise ValueError('Duplicate particle name %r' % name)
        self._check(particle)
        self._check(antiparticle)
        self._add(particle)
        self._add(antiparticle)
        return particle, antiparticle

    def _check(self, particle):
        if self._frozen:
            raise RuntimeError('The particle table is frozen, can not add '
                               '%r' % particle)
        if particle.id in self._by_id:
            raise ValueError('Duplicate particle code %d: %r and %r' %
                             (particle.id, self._by_id[particle.id],
                              particle))
        if particle.name is not None:
            if particle.name in self._by_name:
                raise ValueError('Duplicate particle name %r' %
                                 particle.name)

    def _add(self, particle):
        self._check(particle)
        if particle.name is not None:
            self._by_name[particle.name] = particle
        self._by_id[particle.id] = particle

    def freeze(self):
        """Disallow further additions"""

        if self._frozen:
            return
        self._by_id = MappingProxyType(self._by_id)
        self._by_name = MappingProxyType(self._by_name)
        self._frozen = True
        logger.debug('Particle table frozen with %d particles.',
                     len(self._by_id))

    @property
    def frozen(self):
        return self._frozen

    def get(self, pid, default=None):
        """Get the particle for a code, or default if it is unknown"""
        return self._by_id.get(int(pid), default)

    def by_name(self, name, default=None):
        """Get the particle with the given canonical name"""
        return self._by_name.get(name, default)

    def anti(self, particle):
        """Get the antiparticle of a registered particle

        :param particle: :class:`Particle` or code.
        :return: the particle itself if it is self-conjugate, otherwise
                 the particle with the negated code.

        """
        particle = self[particle]
        if particle.self_conjugate:
            return particle
        return self._by_id[-particle.id]

    def ids(self):
        return self._by_id.keys()

    def names(self):
        return self._by_name.keys()

    def __getitem__(self, pid):
        return self._by_id[int(pid)]

    def __contains__(self, pid):
        if not isinstance(pid, Particle) and not is_code(pid):
            return False
        return int(pid) in self._by_id

    def __iter__(self):
        return iter(sorted(self._by_id.values(),
                           key=lambda p: (abs(p.id), p.id < 0)))

    def __len__(self):
        return len(self._by_id)


#: The particle table, filled by :mod:`mcpid.tables`.
REGISTRY = Registry()
