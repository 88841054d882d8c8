"""Quarks, including the fourth generation b' and t'"""
from ..numbering import QUARK
from ..registry import REGISTRY

_pair = REGISTRY.conjugate_pair


d, d_bar = _pair(1, 'down', 'anti-down', QUARK, 'd', r'\bar{d}')
u, u_bar = _pair(2, 'up', 'anti-up', QUARK, 'u', r'\bar{u}')
s, s_bar = _pair(3, 'strange', 'anti-strange', QUARK, 's', r'\bar{s}')
c, c_bar = _pair(4, 'charm', 'anti-charm', QUARK, 'c', r'\bar{c}')
b, b_bar = _pair(5, 'bottom', 'anti-bottom', QUARK, 'b', r'\bar{b}')
t, t_bar = _pair(6, 'top', 'anti-top', QUARK, 't', r'\bar{t}')
b_prime, b_prime_bar = _pair(7, 'bottom prime', 'anti-bottom prime', QUARK,
                             "b'", r"\bar{b}'")
t_prime, t_prime_bar = _pair(8, 'top prime', 'anti-top prime', QUARK,
                             "t'", r"\bar{t}'")

down, anti_down = d, d_bar
up, anti_up = u, u_bar
strange, anti_strange = s, s_bar
charm, anti_charm = c, c_bar
bottom, anti_bottom = b, b_bar
top, anti_top = t, t_bar
