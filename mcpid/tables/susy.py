"""Supersymmetric partners of the standard model particles

Left and right handed sfermions have n = 1 and n = 2 respectively.  The
gluino, the neutralinos and the gravitino are Majorana particles and
their own antiparticle.

"""
from ..numbering import SUSY
from ..registry import REGISTRY

_pair = REGISTRY.conjugate_pair
_single = REGISTRY.self_conjugate


d_tilde_L, d_tilde_bar_L = _pair(1000001, '~d_L', '~d_Lbar', SUSY)
u_tilde_L, u_tilde_bar_L = _pair(1000002, '~u_L', '~u_Lbar', SUSY)
s_tilde_L, s_tilde_bar_L = _pair(1000003, '~s_L', '~s_Lbar', SUSY)
c_tilde_L, c_tilde_bar_L = _pair(1000004, '~c_L', '~c_Lbar', SUSY)
b_tilde_1, b_tilde_bar_1 = _pair(1000005, '~b_1', '~b_1bar', SUSY)
t_tilde_1, t_tilde_bar_1 = _pair(1000006, '~t_1', '~t_1bar', SUSY)
e_tilde_L, e_tilde_bar_L = _pair(1000011, '~e_L-', '~e_L+', SUSY)
nu_e_tilde_L, nu_e_tilde_bar_L = _pair(1000012, '~nu_eL', '~nu_eLbar', SUSY)
mu_tilde_L, mu_tilde_bar_L = _pair(1000013, '~mu_L-', '~mu_L+', SUSY)
nu_mu_tilde_L, nu_mu_tilde_bar_L = _pair(1000014, '~nu_muL', '~nu_muLbar',
                                         SUSY)
tau_tilde_1, tau_tilde_bar_1 = _pair(1000015, '~tau_1-', '~tau_1+', SUSY)
nu_tau_tilde_L, nu_tau_tilde_bar_L = _pair(1000016, '~nu_tauL',
                                           '~nu_tauLbar', SUSY)
d_tilde_R, d_tilde_bar_R = _pair(2000001, '~d_R', '~d_Rbar', SUSY)
u_tilde_R, u_tilde_bar_R = _pair(2000002, '~u_R', '~u_Rbar', SUSY)
s_tilde_R, s_tilde_bar_R = _pair(2000003, '~s_R', '~s_Rbar', SUSY)
c_tilde_R, c_tilde_bar_R = _pair(2000004, '~c_R', '~c_Rbar', SUSY)
b_tilde_2, b_tilde_bar_2 = _pair(2000005, '~b_2', '~b_2bar', SUSY)
t_tilde_2, t_tilde_bar_2 = _pair(2000006, '~t_2', '~t_2bar', SUSY)
e_tilde_R, e_tilde_bar_R = _pair(2000011, '~e_R-', '~e_R+', SUSY)
mu_tilde_R, mu_tilde_bar_R = _pair(2000013, '~mu_R-', '~mu_R+', SUSY)
tau_tilde_2, tau_tilde_bar_2 = _pair(2000015, '~tau_2-', '~tau_2+', SUSY)
g_tilde = _single(1000021, '~g', SUSY)
chi_tilde_0_1 = _single(1000022, '~chi_10', SUSY)
chi_tilde_0_2 = _single(1000023, '~chi_20', SUSY)
chi_tilde_plus_1, chi_tilde_minus_1 = _pair(1000024, '~chi_1+', '~chi_1-',
                                            SUSY)
chi_tilde_0_3 = _single(1000025, '~chi_30', SUSY)
chi_tilde_0_4 = _single(1000035, '~chi_40', SUSY)
chi_tilde_plus_2, chi_tilde_minus_2 = _pair(1000037, '~chi_2+', '~chi_2-',
                                            SUSY)
G_tilde = _single(1000039, '~Gravitino', SUSY)

gluino = g_tilde
gravitino = G_tilde
