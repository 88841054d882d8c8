"""Special particles and generator specific pseudo particles

Codes 81-100 are reserved for the internal use of event generators.
Only the PYTHIA pseudo particles that are commonly written to event
records are named here.

"""
from ..numbering import SPECIAL
from ..registry import REGISTRY

_pair = REGISTRY.conjugate_pair
_single = REGISTRY.self_conjugate


G = _single(39, 'graviton', SPECIAL, 'G')
R_0, R_0_bar = _pair(41, 'R0', 'anti-R0', SPECIAL, 'R^0', r'\bar{R}^0')
LQ_c, LQ_c_bar = _pair(42, 'leptoquark', 'anti-leptoquark', SPECIAL,
                       'LQ_c', r'\bar{LQ}_c')

system = _single(90, 'system', SPECIAL)
cluster = _single(91, 'cluster', SPECIAL)
string = _single(92, 'string', SPECIAL)
independent = _single(93, 'independent', SPECIAL)
cm_shower = _single(94, 'CM shower', SPECIAL)

reggeon = _single(110, 'reggeon', SPECIAL)
pomeron = _single(990, 'pomeron', SPECIAL)
odderon = _single(9990, 'odderon', SPECIAL)

graviton = G
