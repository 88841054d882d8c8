"""
Translate CORSIKA particle codes to the Monte Carlo numbering scheme

Particle codes as specified in CORSIKA user manual, Table 4.  Nuclei are
coded as ``A x 100 + Z``.

The particle description word in CORSIKA particle data relates to the
code as::

    particle id x 1000 + hadron generation x 10 + no. of observation level

So to select electrons and positrons from CORSIKA particle data:

.. code-block:: python

    from mcpid import corsika
    from mcpid.tables import leptons

    pid = corsika.from_corsika_description(particle.description)
    if pid in [leptons.electron, leptons.positron]:
        pass

"""
import logging

from .numbering import (NUCLEUS, family_of, nucleus_a, nucleus_id,
                        nucleus_isomer, nucleus_n_lambda, nucleus_z)


logger = logging.getLogger('mcpid.corsika')


CORSIKA_TO_PDG = {1: 22,  # gamma
                  2: -11,  # positron
                  3: 11,  # electron
                  5: -13,  # muon +
                  6: 13,  # muon -
                  7: 111,  # pion 0
                  8: 211,  # pion +
                  9: -211,  # pion -
                  10: 130,  # Kaon 0 long
                  11: 321,  # Kaon +
                  12: -321,  # Kaon -
                  13: 2112,  # neutron
                  14: 2212,  # proton
                  15: -2212,  # anti proton
                  16: 310,  # Kaon 0 short
                  17: 221,  # eta
                  18: 3122,  # Lambda
                  19: 3222,  # Sigma +
                  20: 3212,  # Sigma 0
                  21: 3112,  # Sigma -
                  22: 3322,  # Xi 0
                  23: 3312,  # Xi -
                  24: 3334,  # Omega -
                  25: -2112,  # anti neutron
                  26: -3122,  # anti Lambda
                  27: -3222,  # anti Sigma -
                  28: -3212,  # anti Sigma 0
                  29: -3112,  # anti Sigma +
                  30: -3322,  # anti Xi 0
                  31: -3312,  # anti Xi +
                  32: -3334,  # anti Omega +
                  50: 223,  # omega
                  51: 113,  # rho 0
                  52: 213,  # rho +
                  53: -213,  # rho -
                  54: 2224,  # Delta ++
                  55: 2214,  # Delta +
                  56: 2114,  # Delta 0
                  57: 1114,  # Delta -
                  58: -2224,  # anti Delta --
                  59: -2214,  # anti Delta -
                  60: -2114,  # anti Delta 0
                  61: -1114,  # anti Delta +
                  62: 313,  # K* 0
                  63: 323,  # K* +
                  64: -323,  # K* -
                  65: -313,  # anti K* 0
                  66: 12,  # electron neutrino
                  67: -12,  # electron anti neutrino
                  68: 14,  # muon neutrino
                  69: -14,  # muon anti neutrino
                  116: 421,  # D 0
                  117: 411,  # D +
                  118: -411,  # anti D -
                  119: -421,  # anti D 0
                  120: 431,  # D s +
                  121: -431,  # anti D s -
                  122: 441,  # eta c
                  123: 423,  # D* 0
                  124: 413,  # D* +
                  125: -413,  # anti D* -
                  126: -423,  # anti D* 0
                  127: 433,  # D* s +
                  128: -433,  # anti D* s -
                  130: 443,  # J/psi
                  131: -15,  # tau +
                  132: 15,  # tau -
                  133: 16,  # tau neutrino
                  134: -16,  # anti tau neutrino
                  137: 4122,  # Lambda c +
                  138: 4232,  # Xi c +
                  139: 4132,  # Xi c 0
                  140: 4222,  # Sigma c ++
                  141: 4212,  # Sigma c +
                  142: 4112,  # Sigma c 0
                  143: 4322,  # Xi c prime +
                  144: 4312,  # Xi c prime 0
                  145: 4332,  # Omega c 0
                  149: -4122,  # anti Lambda c -
                  150: -4232,  # anti Xi c -
                  151: -4132,  # anti Xi c 0
                  152: -4222,  # anti Sigma c --
                  153: -4212,  # anti Sigma c -
                  154: -4112,  # anti Sigma c 0
                  155: -4322,  # anti Xi c prime -
                  156: -4312,  # anti Xi c prime 0
                  157: -4332,  # anti Omega c 0
                  161: 4224,  # Sigma c * ++
                  162: 4214,  # Sigma c * +
                  163: 4114,  # Sigma c * 0
                  171: -4224,  # anti Sigma c * --
                  172: -4214,  # anti Sigma c * -
                  173: -4114,  # anti Sigma c * 0
                  176: 511,  # B 0
                  177: 521,  # B +
                  178: -521,  # anti B -
                  179: -511,  # anti B 0
                  180: 531,  # B s 0
                  181: -531,  # anti B s 0
                  182: 541,  # B c +
                  183: -541,  # anti B c -
                  184: 5122,  # Lambda b 0
                  185: 5112,  # Sigma b -
                  186: 5222,  # Sigma b +
                  187: 5232,  # Xi b 0
                  188: 5132,  # Xi b -
                  189: 5332,  # Omega b -
                  190: -5122,  # anti Lambda b 0
                  191: -5112,  # anti Sigma b +
                  192: -5222,  # anti Sigma b -
                  193: -5232,  # anti Xi b 0
                  194: -5132,  # anti Xi b +
                  195: -5332}  # anti Omega b +

#: Codes for decay channels and bookkeeping which refer to a particle
#: already in :data:`CORSIKA_TO_PDG`.
CORSIKA_ALIASES = {71: 17,  # eta -> 2 gamma
                   72: 17,  # eta -> 3 pion 0
                   73: 17,  # eta -> pion + pion - pion 0
                   74: 17,  # eta -> pion + pion - gamma
                   75: 5,  # additional muon +
                   76: 6,  # additional muon -
                   85: 5,  # decay start muon +
                   86: 6,  # decay start muon -
                   95: 5,  # decay end muon +
                   96: 6}  # decay end muon -

PDG_TO_CORSIKA = {pid: code for code, pid in CORSIKA_TO_PDG.items()}

#: Largest baryon number representable in CORSIKA nucleus codes.
MAX_CORSIKA_A = 99

#: Single nucleons written as nucleus codes, CORSIKA only has the particles.
NUCLEON_CODES = {1000010010: 14,  # proton
                 1000000010: 13}  # neutron


def from_corsika(code):
    """Get the Monte Carlo particle code for a CORSIKA particle code

    :param code: CORSIKA particle code.
    :return: Monte Carlo particle code, or None if there is no
             equivalent (e.g. Cherenkov photons).

    """
    code = CORSIKA_ALIASES.get(code, code)
    try:
        return CORSIKA_TO_PDG[code]
    except KeyError:
        pass
    if code < 200:
        return None
    a, z = divmod(code, 100)
    if z == 0:
        return None
    try:
        return nucleus_id(z, a)
    except ValueError:
        logger.debug('No nucleus for CORSIKA code %d.', code)
        return None


def from_corsika_description(description):
    """Get the Monte Carlo particle code from a CORSIKA description word

    :param description: particle description, the particle id times
                        1000 plus the hadron generation and observation
                        level.
    :return: Monte Carlo particle code, or None.

    """
    return from_corsika(int(description) // 1000)


def to_corsika(pid):
    """Get the CORSIKA particle code for a Monte Carlo particle code

    :param pid: Monte Carlo particle code, or a registered particle.
    :return: CORSIKA particle code, or None if CORSIKA has no code for
             the particle.  Antinuclei, hypernuclei, excited isomers and
             nuclei with A > 99 have no CORSIKA code, single nucleons
             get the proton and neutron codes.

    """
    pid = int(pid)
    try:
        return PDG_TO_CORSIKA[pid]
    except KeyError:
        pass
    if pid < 0 or family_of(pid) != NUCLEUS:
        return None
    if nucleus_n_lambda(pid) or nucleus_isomer(pid):
        return None
    if pid in NUCLEON_CODES:
        return NUCLEON_CODES[pid]
    a = nucleus_a(pid)
    z = nucleus_z(pid)
    if not 0 < z <= a or not 2 <= a <= MAX_CORSIKA_A:
        return None
    return a * 100 + z
