""" Digit structure of the Monte Carlo Particle Numbering Scheme

The numbering scheme encodes the structure of composite particles in the
digits of the code.  For hadrons the code is read as::

    n nr nL nq1 nq2 nq3 nJ

where ``nq1 nq2 nq3`` is the quark content, ``nJ`` the spin multiplicity
(2J + 1) and ``n``, ``nr`` and ``nL`` distinguish excited states and
exotic extensions.  Nuclei use 10-digit codes::

    10 L ZZZ AAA I

with ``L`` the number of strange quarks (lambdas), ``Z`` the charge, ``A``
the baryon number and ``I`` the isomer level.

The functions in this module work on plain integers and never consult the
particle table.  They are total: codes which fit none of the ranges are
classified as ``None``.

"""
import re
from collections import namedtuple


#: Edition of the Review of Particle Physics the tables follow.
PDG_EDITION = 2023

#: Reference for the numbering scheme.
MC_SCHEME_URL = 'https://pdg.lbl.gov/2023/mcdata/mc_particle_id_contents.html'

# Family tags
QUARK = 'quark'
LEPTON = 'lepton'
BOSON = 'boson'
LIGHT_MESON = 'light meson'
LIGHT_BARYON = 'light baryon'
HEAVY_HADRON = 'heavy hadron'
NUCLEUS = 'nucleus'
DIQUARK = 'diquark'
PENTAQUARK = 'pentaquark'
SUSY = 'susy'
TECHNICOLOR = 'technicolor'
SPECIAL = 'special'

FAMILIES = (QUARK, LEPTON, BOSON, LIGHT_MESON, LIGHT_BARYON, HEAVY_HADRON,
            NUCLEUS, DIQUARK, PENTAQUARK, SUSY, TECHNICOLOR, SPECIAL)

#: Codes below 100 which are classified as special particles:
#: graviton, R0 and leptoquark.
SPECIAL_CODES = (39, 41, 42)

#: Regge trajectories: reggeon, pomeron and odderon.
REGGE_CODES = (110, 990, 9990)

#: Range reserved for generator specific pseudo particles.
GENERATOR_CODES = range(81, 101)

#: The long and short neutral kaons, which do not follow the quark digits.
NEUTRAL_KAON_CODES = (130, 310)

Digits = namedtuple('Digits', ['high', 'n', 'nr', 'nL', 'nq1', 'nq2', 'nq3',
                               'nJ'])

# Z numbers
ELEMENTS = {1: 'hydrogen',
            2: 'helium',
            3: 'lithium',
            4: 'beryllium',
            5: 'boron',
            6: 'carbon',
            7: 'nitrogen',
            8: 'oxygen',
            9: 'fluorine',
            10: 'neon',
            11: 'sodium',
            12: 'magnesium',
            13: 'aluminium',
            14: 'silicon',
            15: 'phosphorus',
            16: 'sulfur',
            17: 'chlorine',
            18: 'argon',
            19: 'potassium',
            20: 'calcium',
            21: 'scandium',
            22: 'titanium',
            23: 'vanadium',
            24: 'chromium',
            25: 'manganese',
            26: 'iron',
            27: 'cobalt',
            28: 'nickel',
            29: 'copper',
            30: 'zinc',
            31: 'gallium',
            32: 'germanium',
            33: 'arsenic',
            34: 'selenium',
            35: 'bromine',
            36: 'krypton',
            37: 'rubidium',
            38: 'strontium',
            39: 'yttrium',
            40: 'zirconium',
            41: 'niobium',
            42: 'molybdenum',
            43: 'technetium',
            44: 'ruthenium',
            45: 'rhodium',
            46: 'palladium',
            47: 'silver',
            48: 'cadmium',
            49: 'indium',
            50: 'tin',
            51: 'antimony',
            52: 'tellurium',
            53: 'iodine',
            54: 'xenon',
            55: 'caesium',
            56: 'barium',
            57: 'lanthanum',
            58: 'cerium',
            59: 'praseodymium',
            60: 'neodymium',
            61: 'promethium',
            62: 'samarium',
            63: 'europium',
            64: 'gadolinium',
            65: 'terbium',
            66: 'dysprosium',
            67: 'holmium',
            68: 'erbium',
            69: 'thulium',
            70: 'ytterbium',
            71: 'lutetium',
            72: 'hafnium',
            73: 'tantalum',
            74: 'tungsten',
            75: 'rhenium',
            76: 'osmium',
            77: 'iridium',
            78: 'platinum',
            79: 'gold',
            80: 'mercury',
            81: 'thallium',
            82: 'lead',
            83: 'bismuth',
            84: 'polonium',
            85: 'astatine',
            86: 'radon',
            87: 'francium',
            88: 'radium',
            89: 'actinium',
            90: 'thorium',
            91: 'protactinium',
            92: 'uranium',
            93: 'neptunium',
            94: 'plutonium',
            95: 'americium',
            96: 'curium',
            97: 'berkelium',
            98: 'californium',
            99: 'einsteinium'}

ELEMENT_Z = {element: z for z, element in ELEMENTS.items()}

NUCLEUS_NAME_RE = re.compile(r'^(anti-)?([a-z]+)(\d+)$')

ANTI_PREFIX = 'anti-'


def digits(pid):
    """Split a code into the digits of the numbering scheme

    The sign is dropped.  Everything above the seventh digit is returned
    as ``high``.

    :param pid: Monte Carlo particle code.
    :return: :class:`Digits` tuple.

    """
    pid = abs(int(pid))
    return Digits(high=pid // 10000000,
                  n=(pid // 1000000) % 10,
                  nr=(pid // 100000) % 10,
                  nL=(pid // 10000) % 10,
                  nq1=(pid // 1000) % 10,
                  nq2=(pid // 100) % 10,
                  nq3=(pid // 10) % 10,
                  nJ=pid % 10)


def family_of(pid):
    """Classify a code by the range of the numbering scheme it falls in

    :param pid: Monte Carlo particle code, the sign is ignored.
    :return: one of the family tags in :data:`FAMILIES`, or None if the
             code fits no range.

    """
    apid = abs(int(pid))

    if apid == 0:
        return None
    if apid in SPECIAL_CODES or apid in REGGE_CODES or apid in GENERATOR_CODES:
        return SPECIAL
    if apid <= 8:
        return QUARK
    if 11 <= apid <= 18:
        return LEPTON
    if 21 <= apid <= 25 or 32 <= apid <= 38 or apid == 40:
        return BOSON
    if apid < 100:
        return None
    if apid in NEUTRAL_KAON_CODES:
        return LIGHT_MESON
    if apid >= 1000000000:
        return NUCLEUS if apid // 100000000 == 10 else None
    if apid >= 100000000:
        return PENTAQUARK if apid // 100000000 == 1 else None

    d = digits(apid)
    if d.n in (1, 2):
        return SUSY
    if d.n == 3:
        return TECHNICOLOR
    if d.n not in (0, 9) or d.nJ == 0:
        return None
    if d.nq1 == 0:
        if d.nq2 == 0 or d.nq3 == 0:
            return None
        return HEAVY_HADRON if max(d.nq2, d.nq3) >= 4 else LIGHT_MESON
    if d.nq2 == 0:
        return None
    if d.nq3 == 0:
        return DIQUARK
    return HEAVY_HADRON if max(d.nq1, d.nq2, d.nq3) >= 4 else LIGHT_BARYON


def is_nucleus(pid):
    return family_of(pid) == NUCLEUS


def nucleus_id(z, a, n_lambda=0, isomer=0):
    """Get the code for a nucleus

    :param z: charge (number of protons).
    :param a: baryon number (protons, neutrons and lambdas).
    :param n_lambda: number of lambdas in a hypernucleus.
    :param isomer: isomer level, 0 for the ground state.
    :return: 10-digit code ``10LZZZAAAI``.

    """
    if not 0 <= z <= 999 or not 1 <= a <= 999 or z > a:
        raise ValueError('Invalid nucleus: Z=%d, A=%d' % (z, a))
    if not 0 <= n_lambda <= 9 or not 0 <= isomer <= 9:
        raise ValueError('Invalid nucleus: L=%d, I=%d' % (n_lambda, isomer))
    return (1000000000 + n_lambda * 10000000 + z * 10000 + a * 10 +
            isomer)


def nucleus_z(pid):
    """Get the charge Z of a nucleus code, None for other codes"""

    if not is_nucleus(pid):
        return None
    return (abs(int(pid)) // 10000) % 1000


def nucleus_a(pid):
    """Get the baryon number A of a nucleus code, None for other codes"""

    if not is_nucleus(pid):
        return None
    return (abs(int(pid)) // 10) % 1000


def nucleus_n_lambda(pid):
    if not is_nucleus(pid):
        return None
    return (abs(int(pid)) // 10000000) % 10


def nucleus_isomer(pid):
    if not is_nucleus(pid):
        return None
    return abs(int(pid)) % 10


def nucleus_name(pid):
    """Build a name for a nucleus code

    The name is the element name with the baryon number appended, e.g.
    ``carbon14``, prefixed with ``anti-`` for antinuclei.  There is no
    name for hypernuclei, excited isomers or unknown elements.

    :param pid: Monte Carlo particle code.
    :return: name of the nucleus or None.

    """
    if not is_nucleus(pid):
        return None
    if nucleus_n_lambda(pid) or nucleus_isomer(pid):
        return None
    try:
        element = ELEMENTS[nucleus_z(pid)]
    except KeyError:
        return None
    name = '%s%d' % (element, nucleus_a(pid))
    if int(pid) < 0:
        name = ANTI_PREFIX + name
    return name


def nucleus_id_from_name(name):
    """Get the nucleus code for a name like ``carbon14``

    :param name: element name with the baryon number appended,
                 optionally prefixed with ``anti-``.
    :return: code of the (anti)nucleus, or None if the name is not
             understood.

    """
    match = NUCLEUS_NAME_RE.match(name)
    if match is None:
        return None
    anti, element, a = match.groups()
    try:
        pid = nucleus_id(ELEMENT_Z[element], int(a))
    except (KeyError, ValueError):
        return None
    return -pid if anti else pid
