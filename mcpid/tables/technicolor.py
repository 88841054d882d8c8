"""Technicolor particles, n = 3"""
from ..numbering import TECHNICOLOR
from ..registry import REGISTRY

_pair = REGISTRY.conjugate_pair
_single = REGISTRY.self_conjugate


pi_tc_0 = _single(3000111, 'pi_tc0', TECHNICOLOR)
pi_tc_plus, pi_tc_minus = _pair(3000211, 'pi_tc+', 'pi_tc-', TECHNICOLOR)
pi_prime_tc_0 = _single(3000221, "pi'_tc0", TECHNICOLOR)
eta_tc_0 = _single(3100221, 'eta_tc0', TECHNICOLOR)
rho_tc_0 = _single(3000113, 'rho_tc0', TECHNICOLOR)
rho_tc_plus, rho_tc_minus = _pair(3000213, 'rho_tc+', 'rho_tc-', TECHNICOLOR)
omega_tc = _single(3000223, 'omega_tc', TECHNICOLOR)
V8_tc = _single(3100021, 'V8_tc', TECHNICOLOR)
pi_22_1_tc = _single(3100111, 'pi_22_1_tc', TECHNICOLOR)
pi_22_8_tc = _single(3200111, 'pi_22_8_tc', TECHNICOLOR)
rho_11_tc = _single(3100113, 'rho_11_tc', TECHNICOLOR)
rho_12_tc = _single(3200113, 'rho_12_tc', TECHNICOLOR)
rho_21_tc = _single(3300113, 'rho_21_tc', TECHNICOLOR)
rho_22_tc = _single(3400113, 'rho_22_tc', TECHNICOLOR)
