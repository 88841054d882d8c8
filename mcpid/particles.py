""" Look up names, codes and antiparticles

Particle codes follow the Monte Carlo Particle Numbering Scheme of the
Particle Data Group.  Use the constants in :mod:`mcpid.tables` instead of
bare numbers, and the functions in this module to go between codes and
names:

.. code-block:: python

    from mcpid import particles
    from mcpid.tables import light_baryons

    particles.id_of(light_baryons.proton)    # 2212
    particles.name_of(-2212)                 # 'anti-proton'
    particles.anti(light_baryons.proton)     # <Particle -2212 'anti-proton'>
    particles.particle_id('carbon14')        # 1000060140

Unknown codes are not an error: :func:`name_of`, :func:`family_of` and
:func:`lookup` return None for codes which are not in the table.

"""
from .numbering import (BOSON, HEAVY_HADRON, LEPTON, LIGHT_BARYON,
                        LIGHT_MESON, PENTAQUARK, QUARK, digits)
from .numbering import family_of as _family_of
from .numbering import is_nucleus  # noqa: F401
from .numbering import nucleus_id_from_name, nucleus_name
from .registry import REGISTRY, Particle, is_code
from .tables import bosons


def id_of(particle):
    """Get the code for a particle

    :param particle: :class:`~mcpid.registry.Particle` or code.
    :return: Monte Carlo particle code.

    """
    return int(particle)


def lookup(pid):
    """Get the registered particle for a code

    :param pid: Monte Carlo particle code.
    :return: :class:`~mcpid.registry.Particle`, or None if the code is not
             in the table.

    """
    if isinstance(pid, Particle):
        pid = pid.id
    if not is_code(pid):
        return None
    return REGISTRY.get(pid)


def name_of(pid):
    """Get the name for a particle code

    Nuclei which are not in the table get a name built from the element
    name and the baryon number, see
    :func:`~mcpid.numbering.nucleus_name`.

    :param pid: Monte Carlo particle code.
    :return: name of the particle, or None for unnamed or unknown codes.

    """
    particle = lookup(pid)
    if particle is not None and particle.name is not None:
        return particle.name
    if is_code(pid) and particle is None:
        return nucleus_name(pid)
    return None


def particle_id(name):
    """Get the code for a particle name

    :param name: canonical name of the particle, or for nuclei the
                 element name with the baryon number appended, e.g.
                 ``carbon14`` or ``anti-helium3``.
    :return: Monte Carlo particle code, None if the name is unknown.

    """
    particle = REGISTRY.by_name(name)
    if particle is not None:
        return particle.id
    return nucleus_id_from_name(name)


def anti(particle):
    """Get the antiparticle

    Self-conjugate particles are returned unchanged, for all others the
    particle with the negated code is returned.

    :param particle: :class:`~mcpid.registry.Particle` or code of a
                     registered particle.
    :return: the antiparticle, a :class:`~mcpid.registry.Particle`.

    """
    return REGISTRY.anti(particle)


def family_of(particle):
    """Get the family of a particle from the numbering scheme

    :param particle: :class:`~mcpid.registry.Particle` or code.
    :return: family tag, see :data:`mcpid.numbering.FAMILIES`, or None.

    """
    return _family_of(int(particle))


def latex_name(particle):
    """Get the name of a particle in LaTeX format

    Only the elementary particles have a LaTeX name.

    """
    particle = lookup(particle)
    if particle is None:
        return None
    return particle.latex


def is_anti_particle(particle):
    return int(particle) < 0


def is_quark(particle):
    return int(particle) > 0 and family_of(particle) == QUARK


def is_anti_quark(particle):
    return is_anti_particle(particle) and family_of(particle) == QUARK


def is_lepton(particle):
    return int(particle) > 0 and family_of(particle) == LEPTON


def is_anti_lepton(particle):
    return is_anti_particle(particle) and family_of(particle) == LEPTON


def is_neutrino(particle):
    return is_lepton(particle) and int(particle) % 2 == 0


def is_anti_neutrino(particle):
    return is_anti_lepton(particle) and -int(particle) % 2 == 0


def is_charged_lepton(particle):
    return is_lepton(particle) and int(particle) % 2 == 1


def is_charged_anti_lepton(particle):
    return is_anti_lepton(particle) and -int(particle) % 2 == 1


def is_gauge_boson(particle):
    """True for the gluon, photon, Z and W bosons"""

    return (bosons.g.id <= abs(int(particle)) <= bosons.W_plus.id and
            family_of(particle) == BOSON)


def is_meson(particle):
    family = family_of(particle)
    if family == LIGHT_MESON:
        return True
    return family == HEAVY_HADRON and digits(particle).nq1 == 0


def is_baryon(particle):
    family = family_of(particle)
    if family == LIGHT_BARYON:
        return True
    return family == HEAVY_HADRON and digits(particle).nq1 != 0


def is_hadron(particle):
    return (is_meson(particle) or is_baryon(particle) or
            family_of(particle) == PENTAQUARK)
