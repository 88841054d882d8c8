"""Gauge and Higgs bosons"""
from ..numbering import BOSON
from ..registry import REGISTRY

_pair = REGISTRY.conjugate_pair
_single = REGISTRY.self_conjugate


g = _single(21, 'gluon', BOSON, 'g')
gamma = _single(22, 'photon', BOSON, r'\gamma')
Z = _single(23, 'Z', BOSON, 'Z')
W_plus, W_minus = _pair(24, 'W plus', 'W minus', BOSON, 'W^+', 'W^-')
h = _single(25, 'Higgs', BOSON, 'h')
Z_prime = _single(32, 'Z prime', BOSON, "Z'")
Z_prime_prime = _single(33, 'Z prime prime', BOSON, "Z''")
W_prime, W_prime_minus = _pair(34, 'W prime', 'W prime minus', BOSON,
                               "W'^+", "W'^-")
H0 = _single(35, 'heavy Higgs', BOSON, 'H^0')
A0 = _single(36, 'pseudoscalar Higgs', BOSON, 'A^0')
H_plus, H_minus = _pair(37, 'Higgs plus', 'Higgs minus', BOSON, 'H^+', 'H^-')
H_plus_plus, H_minus_minus = _pair(38, 'Higgs plus plus', 'Higgs minus minus',
                                   BOSON, 'H^{++}', 'H^{--}')
a0 = _single(40, 'light pseudoscalar Higgs', BOSON, 'a_0')

gluon = g
photon = gamma
H = Higgs = h
H_0 = H0
A_0 = A0
a_0 = a0
