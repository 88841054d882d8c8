"""Pentaquarks, 9-digit codes ``1 nr nL nq1 nq2 nq3 nq4 nq5 nJ``"""
from ..numbering import PENTAQUARK
from ..registry import REGISTRY

_pair = REGISTRY.conjugate_pair


Theta_plus, Theta_plus_bar = _pair(100221132, 'Theta(1540)+',
                                   'anti-Theta(1540)-', PENTAQUARK)
Phi_minus_minus, Phi_minus_minus_bar = _pair(100331122, 'Phi(1860)--',
                                             'anti-Phi(1860)++', PENTAQUARK)
