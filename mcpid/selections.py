""" Apply the particle table to arrays of particle codes

Particle data is usually stored as columns, e.g. the ``particle_id``
column of a table of ground particles.  These functions work on such
columns and return numpy arrays of the same shape.

Example::

    >>> import numpy as np
    >>> from mcpid import selections
    >>> ids = np.array([22, 11, -11, 13, 2212])
    >>> ids.compress(selections.family_mask(ids, 'lepton'))
    array([ 11, -11,  13])

"""
import numpy as np

from .numbering import FAMILIES, family_of
from .particles import name_of
from .registry import REGISTRY


def family_mask(pids, *families):
    """Select codes belonging to one or more families

    :param pids: array of Monte Carlo particle codes.
    :param families: family tags, see :data:`mcpid.numbering.FAMILIES`.
    :return: boolean array, True where the code is in one of the
             families.

    """
    unknown = set(families).difference(FAMILIES)
    if unknown:
        raise ValueError('Unknown particle families: %s' %
                         ', '.join(sorted(unknown)))
    pids = np.asarray(pids)
    mask = np.fromiter((family_of(pid) in families for pid in pids.flat),
                       dtype=bool, count=pids.size)
    return mask.reshape(pids.shape)


def anti_ids(pids):
    """Get the codes of the antiparticles

    :param pids: array of codes of registered particles.
    :return: array with the antiparticle codes.

    """
    pids = np.asarray(pids)
    unique = np.unique(pids)
    unknown = [pid for pid in unique if pid not in REGISTRY]
    if unknown:
        raise KeyError('Unknown particle codes: %s' %
                       ', '.join(str(pid) for pid in unknown))
    self_conjugate = [pid for pid in unique if REGISTRY[pid].self_conjugate]
    return np.where(np.isin(pids, self_conjugate), pids, -pids)


def names(pids):
    """Get the names for an array of codes

    :param pids: array of Monte Carlo particle codes.
    :return: object array of names, None for unknown codes.

    """
    pids = np.asarray(pids)
    result = np.empty(pids.shape, dtype=object)
    for index, pid in np.ndenumerate(pids):
        result[index] = name_of(int(pid))
    return result
