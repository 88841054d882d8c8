"""Charmed and bottom baryons"""
from ..numbering import HEAVY_HADRON
from ..registry import REGISTRY

_pair = REGISTRY.conjugate_pair


# Charmed
Lambda_c_plus, Lambda_c_plus_bar = _pair(4122, 'Lambda_c+', 'anti-Lambda_c-',
                                         HEAVY_HADRON)
Sigma_c_plus_plus, Sigma_c_plus_plus_bar = _pair(4222, 'Sigma_c++',
                                                 'anti-Sigma_c--',
                                                 HEAVY_HADRON)
Sigma_c_plus, Sigma_c_plus_bar = _pair(4212, 'Sigma_c+', 'anti-Sigma_c-',
                                       HEAVY_HADRON)
Sigma_c_0, Sigma_c_0_bar = _pair(4112, 'Sigma_c0', 'anti-Sigma_c0',
                                 HEAVY_HADRON)
Sigma_c_star_plus_plus, Sigma_c_star_plus_plus_bar = _pair(
    4224, 'Sigma_c*++', 'anti-Sigma_c*--', HEAVY_HADRON)
Sigma_c_star_plus, Sigma_c_star_plus_bar = _pair(4214, 'Sigma_c*+',
                                                 'anti-Sigma_c*-',
                                                 HEAVY_HADRON)
Sigma_c_star_0, Sigma_c_star_0_bar = _pair(4114, 'Sigma_c*0',
                                           'anti-Sigma_c*0', HEAVY_HADRON)
Xi_c_plus, Xi_c_plus_bar = _pair(4232, 'Xi_c+', 'anti-Xi_c-', HEAVY_HADRON)
Xi_c_0, Xi_c_0_bar = _pair(4132, 'Xi_c0', 'anti-Xi_c0', HEAVY_HADRON)
Xi_c_prime_plus, Xi_c_prime_plus_bar = _pair(4322, "Xi_c'+", "anti-Xi_c'-",
                                             HEAVY_HADRON)
Xi_c_prime_0, Xi_c_prime_0_bar = _pair(4312, "Xi_c'0", "anti-Xi_c'0",
                                       HEAVY_HADRON)
Xi_c_star_plus, Xi_c_star_plus_bar = _pair(4324, 'Xi_c*+', 'anti-Xi_c*-',
                                           HEAVY_HADRON)
Xi_c_star_0, Xi_c_star_0_bar = _pair(4314, 'Xi_c*0', 'anti-Xi_c*0',
                                     HEAVY_HADRON)
Omega_c_0, Omega_c_0_bar = _pair(4332, 'Omega_c0', 'anti-Omega_c0',
                                 HEAVY_HADRON)
Omega_c_star_0, Omega_c_star_0_bar = _pair(4334, 'Omega_c*0',
                                           'anti-Omega_c*0', HEAVY_HADRON)
Xi_cc_plus, Xi_cc_plus_bar = _pair(4412, 'Xi_cc+', 'anti-Xi_cc-',
                                   HEAVY_HADRON)
Xi_cc_plus_plus, Xi_cc_plus_plus_bar = _pair(4422, 'Xi_cc++',
                                             'anti-Xi_cc--', HEAVY_HADRON)
Xi_cc_star_plus, Xi_cc_star_plus_bar = _pair(4414, 'Xi_cc*+',
                                             'anti-Xi_cc*-', HEAVY_HADRON)
Xi_cc_star_plus_plus, Xi_cc_star_plus_plus_bar = _pair(4424, 'Xi_cc*++',
                                                       'anti-Xi_cc*--',
                                                       HEAVY_HADRON)
Omega_cc_plus, Omega_cc_plus_bar = _pair(4432, 'Omega_cc+', 'anti-Omega_cc-',
                                         HEAVY_HADRON)
Omega_cc_star_plus, Omega_cc_star_plus_bar = _pair(4434, 'Omega_cc*+',
                                                   'anti-Omega_cc*-',
                                                   HEAVY_HADRON)
Omega_ccc_plus_plus, Omega_ccc_plus_plus_bar = _pair(4444, 'Omega_ccc++',
                                                     'anti-Omega_ccc--',
                                                     HEAVY_HADRON)

# Bottom
Lambda_b_0, Lambda_b_0_bar = _pair(5122, 'Lambda_b0', 'anti-Lambda_b0',
                                   HEAVY_HADRON)
Sigma_b_minus, Sigma_b_minus_bar = _pair(5112, 'Sigma_b-', 'anti-Sigma_b+',
                                         HEAVY_HADRON)
Sigma_b_0, Sigma_b_0_bar = _pair(5212, 'Sigma_b0', 'anti-Sigma_b0',
                                 HEAVY_HADRON)
Sigma_b_plus, Sigma_b_plus_bar = _pair(5222, 'Sigma_b+', 'anti-Sigma_b-',
                                       HEAVY_HADRON)
Sigma_b_star_minus, Sigma_b_star_minus_bar = _pair(5114, 'Sigma_b*-',
                                                   'anti-Sigma_b*+',
                                                   HEAVY_HADRON)
Sigma_b_star_0, Sigma_b_star_0_bar = _pair(5214, 'Sigma_b*0',
                                           'anti-Sigma_b*0', HEAVY_HADRON)
Sigma_b_star_plus, Sigma_b_star_plus_bar = _pair(5224, 'Sigma_b*+',
                                                 'anti-Sigma_b*-',
                                                 HEAVY_HADRON)
Xi_b_minus, Xi_b_minus_bar = _pair(5132, 'Xi_b-', 'anti-Xi_b+',
                                   HEAVY_HADRON)
Xi_b_0, Xi_b_0_bar = _pair(5232, 'Xi_b0', 'anti-Xi_b0', HEAVY_HADRON)
Xi_b_prime_minus, Xi_b_prime_minus_bar = _pair(5312, "Xi_b'-", "anti-Xi_b'+",
                                               HEAVY_HADRON)
Xi_b_prime_0, Xi_b_prime_0_bar = _pair(5322, "Xi_b'0", "anti-Xi_b'0",
                                       HEAVY_HADRON)
Xi_b_star_minus, Xi_b_star_minus_bar = _pair(5314, 'Xi_b*-', 'anti-Xi_b*+',
                                             HEAVY_HADRON)
Xi_b_star_0, Xi_b_star_0_bar = _pair(5324, 'Xi_b*0', 'anti-Xi_b*0',
                                     HEAVY_HADRON)
Omega_b_minus, Omega_b_minus_bar = _pair(5332, 'Omega_b-', 'anti-Omega_b+',
                                         HEAVY_HADRON)
Omega_b_star_minus, Omega_b_star_minus_bar = _pair(5334, 'Omega_b*-',
                                                   'anti-Omega_b*+',
                                                   HEAVY_HADRON)
Xi_bc_0, Xi_bc_0_bar = _pair(5142, 'Xi_bc0', 'anti-Xi_bc0', HEAVY_HADRON)
Xi_bc_plus, Xi_bc_plus_bar = _pair(5242, 'Xi_bc+', 'anti-Xi_bc-',
                                   HEAVY_HADRON)
Xi_bc_prime_0, Xi_bc_prime_0_bar = _pair(5412, "Xi_bc'0", "anti-Xi_bc'0",
                                         HEAVY_HADRON)
Xi_bc_prime_plus, Xi_bc_prime_plus_bar = _pair(5422, "Xi_bc'+",
                                               "anti-Xi_bc'-", HEAVY_HADRON)
Xi_bc_star_0, Xi_bc_star_0_bar = _pair(5414, 'Xi_bc*0', 'anti-Xi_bc*0',
                                       HEAVY_HADRON)
Xi_bc_star_plus, Xi_bc_star_plus_bar = _pair(5424, 'Xi_bc*+',
                                             'anti-Xi_bc*-', HEAVY_HADRON)
Omega_bc_0, Omega_bc_0_bar = _pair(5342, 'Omega_bc0', 'anti-Omega_bc0',
                                   HEAVY_HADRON)
Omega_bc_prime_0, Omega_bc_prime_0_bar = _pair(5432, "Omega_bc'0",
                                               "anti-Omega_bc'0",
                                               HEAVY_HADRON)
Omega_bc_star_0, Omega_bc_star_0_bar = _pair(5434, 'Omega_bc*0',
                                             'anti-Omega_bc*0', HEAVY_HADRON)
Omega_bcc_plus, Omega_bcc_plus_bar = _pair(5442, 'Omega_bcc+',
                                           'anti-Omega_bcc-', HEAVY_HADRON)
Omega_bcc_star_plus, Omega_bcc_star_plus_bar = _pair(5444, 'Omega_bcc*+',
                                                     'anti-Omega_bcc*-',
                                                     HEAVY_HADRON)
Xi_bb_minus, Xi_bb_minus_bar = _pair(5512, 'Xi_bb-', 'anti-Xi_bb+',
                                     HEAVY_HADRON)
Xi_bb_0, Xi_bb_0_bar = _pair(5522, 'Xi_bb0', 'anti-Xi_bb0', HEAVY_HADRON)
Xi_bb_star_minus, Xi_bb_star_minus_bar = _pair(5514, 'Xi_bb*-',
                                               'anti-Xi_bb*+', HEAVY_HADRON)
Xi_bb_star_0, Xi_bb_star_0_bar = _pair(5524, 'Xi_bb*0', 'anti-Xi_bb*0',
                                       HEAVY_HADRON)
Omega_bb_minus, Omega_bb_minus_bar = _pair(5532, 'Omega_bb-',
                                           'anti-Omega_bb+', HEAVY_HADRON)
Omega_bb_star_minus, Omega_bb_star_minus_bar = _pair(5534, 'Omega_bb*-',
                                                     'anti-Omega_bb*+',
                                                     HEAVY_HADRON)
Omega_bbc_0, Omega_bbc_0_bar = _pair(5542, 'Omega_bbc0', 'anti-Omega_bbc0',
                                     HEAVY_HADRON)
Omega_bbc_star_0, Omega_bbc_star_0_bar = _pair(5544, 'Omega_bbc*0',
                                               'anti-Omega_bbc*0',
                                               HEAVY_HADRON)
Omega_bbb_minus, Omega_bbb_minus_bar = _pair(5554, 'Omega_bbb-',
                                             'anti-Omega_bbb+', HEAVY_HADRON)
