"""Charmed and bottom mesons, charmonium and bottomonium

Quarkonia are their own antiparticle, all open flavour mesons have a
distinct antiparticle, including the neutral D0, B0 and Bs0.

"""
from ..numbering import HEAVY_HADRON
from ..registry import REGISTRY

_pair = REGISTRY.conjugate_pair
_single = REGISTRY.self_conjugate


# Charmed
D_plus, D_minus = _pair(411, 'D+', 'D-', HEAVY_HADRON)
D_0, D_0_bar = _pair(421, 'D0', 'anti-D0', HEAVY_HADRON)
D_0_star_2400_plus, D_0_star_2400_minus = _pair(10411, 'D0*(2400)+',
                                                'D0*(2400)-', HEAVY_HADRON)
D_0_star_2400_0, D_0_star_2400_0_bar = _pair(10421, 'D0*(2400)0',
                                             'anti-D0*(2400)0', HEAVY_HADRON)
D_star_2010_plus, D_star_2010_minus = _pair(413, 'D*(2010)+', 'D*(2010)-',
                                            HEAVY_HADRON)
D_star_2007_0, D_star_2007_0_bar = _pair(423, 'D*(2007)0',
                                         'anti-D*(2007)0', HEAVY_HADRON)
D_1_2420_plus, D_1_2420_minus = _pair(10413, 'D1(2420)+', 'D1(2420)-',
                                      HEAVY_HADRON)
D_1_2420_0, D_1_2420_0_bar = _pair(10423, 'D1(2420)0', 'anti-D1(2420)0',
                                   HEAVY_HADRON)
D_1_H_plus, D_1_H_minus = _pair(20413, 'D1(H)+', 'D1(H)-', HEAVY_HADRON)
D_1_2430_0, D_1_2430_0_bar = _pair(20423, 'D1(2430)0', 'anti-D1(2430)0',
                                   HEAVY_HADRON)
D_2_star_2460_plus, D_2_star_2460_minus = _pair(415, 'D2*(2460)+',
                                                'D2*(2460)-', HEAVY_HADRON)
D_2_star_2460_0, D_2_star_2460_0_bar = _pair(425, 'D2*(2460)0',
                                             'anti-D2*(2460)0', HEAVY_HADRON)
D_s_plus, D_s_minus = _pair(431, 'Ds+', 'Ds-', HEAVY_HADRON)
D_s0_star_2317_plus, D_s0_star_2317_minus = _pair(10431, 'Ds0*(2317)+',
                                                  'Ds0*(2317)-', HEAVY_HADRON)
D_s_star_plus, D_s_star_minus = _pair(433, 'Ds*+', 'Ds*-', HEAVY_HADRON)
D_s_1_2536_plus, D_s_1_2536_minus = _pair(10433, 'Ds1(2536)+', 'Ds1(2536)-',
                                          HEAVY_HADRON)
D_s_1_2460_plus, D_s_1_2460_minus = _pair(20433, 'Ds1(2460)+', 'Ds1(2460)-',
                                          HEAVY_HADRON)
D_s_2_star_2573_plus, D_s_2_star_2573_minus = _pair(435, 'Ds2*(2573)+',
                                                    'Ds2*(2573)-',
                                                    HEAVY_HADRON)

# Bottom
B_0, B_0_bar = _pair(511, 'B0', 'anti-B0', HEAVY_HADRON)
B_plus, B_minus = _pair(521, 'B+', 'B-', HEAVY_HADRON)
B_0_star_0, B_0_star_0_bar = _pair(10511, 'B0*0', 'anti-B0*0', HEAVY_HADRON)
B_0_star_plus, B_0_star_minus = _pair(10521, 'B0*+', 'B0*-', HEAVY_HADRON)
B_star_0, B_star_0_bar = _pair(513, 'B*0', 'anti-B*0', HEAVY_HADRON)
B_star_plus, B_star_minus = _pair(523, 'B*+', 'B*-', HEAVY_HADRON)
B_1_L_0, B_1_L_0_bar = _pair(10513, 'B1(L)0', 'anti-B1(L)0', HEAVY_HADRON)
B_1_L_plus, B_1_L_minus = _pair(10523, 'B1(L)+', 'B1(L)-', HEAVY_HADRON)
B_1_H_0, B_1_H_0_bar = _pair(20513, 'B1(H)0', 'anti-B1(H)0', HEAVY_HADRON)
B_1_H_plus, B_1_H_minus = _pair(20523, 'B1(H)+', 'B1(H)-', HEAVY_HADRON)
B_2_star_0, B_2_star_0_bar = _pair(515, 'B2*0', 'anti-B2*0', HEAVY_HADRON)
B_2_star_plus, B_2_star_minus = _pair(525, 'B2*+', 'B2*-', HEAVY_HADRON)
B_s_0, B_s_0_bar = _pair(531, 'Bs0', 'anti-Bs0', HEAVY_HADRON)
B_s_0_star_0, B_s_0_star_0_bar = _pair(10531, 'Bs0*0', 'anti-Bs0*0',
                                       HEAVY_HADRON)
B_s_star_0, B_s_star_0_bar = _pair(533, 'Bs*0', 'anti-Bs*0', HEAVY_HADRON)
B_s_1_L_0, B_s_1_L_0_bar = _pair(10533, 'Bs1(L)0', 'anti-Bs1(L)0',
                                 HEAVY_HADRON)
B_s_1_H_0, B_s_1_H_0_bar = _pair(20533, 'Bs1(H)0', 'anti-Bs1(H)0',
                                 HEAVY_HADRON)
B_s_2_star_0, B_s_2_star_0_bar = _pair(535, 'Bs2*0', 'anti-Bs2*0',
                                       HEAVY_HADRON)
B_c_plus, B_c_minus = _pair(541, 'Bc+', 'Bc-', HEAVY_HADRON)
B_c_0_star_plus, B_c_0_star_minus = _pair(10541, 'Bc0*+', 'Bc0*-',
                                          HEAVY_HADRON)
B_c_star_plus, B_c_star_minus = _pair(543, 'Bc*+', 'Bc*-', HEAVY_HADRON)
B_c_1_L_plus, B_c_1_L_minus = _pair(10543, 'Bc1(L)+', 'Bc1(L)-',
                                    HEAVY_HADRON)
B_c_1_H_plus, B_c_1_H_minus = _pair(20543, 'Bc1(H)+', 'Bc1(H)-',
                                    HEAVY_HADRON)
B_c_2_star_plus, B_c_2_star_minus = _pair(545, 'Bc2*+', 'Bc2*-',
                                          HEAVY_HADRON)

# c cbar
eta_c_1S = _single(441, 'eta_c(1S)', HEAVY_HADRON)
chi_c_0_1P = _single(10441, 'chi_c0(1P)', HEAVY_HADRON)
eta_c_2S = _single(100441, 'eta_c(2S)', HEAVY_HADRON)
J_psi_1S = _single(443, 'J/psi(1S)', HEAVY_HADRON)
h_c_1P = _single(10443, 'h_c(1P)', HEAVY_HADRON)
chi_c_1_1P = _single(20443, 'chi_c1(1P)', HEAVY_HADRON)
psi_2S = _single(100443, 'psi(2S)', HEAVY_HADRON)
psi_3770 = _single(30443, 'psi(3770)', HEAVY_HADRON)
psi_4040 = _single(9000443, 'psi(4040)', HEAVY_HADRON)
psi_4160 = _single(9010443, 'psi(4160)', HEAVY_HADRON)
psi_4415 = _single(9020443, 'psi(4415)', HEAVY_HADRON)
chi_c_2_1P = _single(445, 'chi_c2(1P)', HEAVY_HADRON)
chi_c_2_3930 = _single(100445, 'chi_c2(3930)', HEAVY_HADRON)

# b bbar
eta_b_1S = _single(551, 'eta_b(1S)', HEAVY_HADRON)
chi_b_0_1P = _single(10551, 'chi_b0(1P)', HEAVY_HADRON)
eta_b_2S = _single(100551, 'eta_b(2S)', HEAVY_HADRON)
chi_b_0_2P = _single(110551, 'chi_b0(2P)', HEAVY_HADRON)
eta_b_3S = _single(200551, 'eta_b(3S)', HEAVY_HADRON)
chi_b_0_3P = _single(210551, 'chi_b0(3P)', HEAVY_HADRON)
Upsilon_1S = _single(553, 'Upsilon(1S)', HEAVY_HADRON)
h_b_1P = _single(10553, 'h_b(1P)', HEAVY_HADRON)
chi_b_1_1P = _single(20553, 'chi_b1(1P)', HEAVY_HADRON)
Upsilon_1_1D = _single(30553, 'Upsilon_1(1D)', HEAVY_HADRON)
Upsilon_2S = _single(100553, 'Upsilon(2S)', HEAVY_HADRON)
h_b_2P = _single(110553, 'h_b(2P)', HEAVY_HADRON)
chi_b_1_2P = _single(120553, 'chi_b1(2P)', HEAVY_HADRON)
Upsilon_1_2D = _single(130553, 'Upsilon_1(2D)', HEAVY_HADRON)
Upsilon_3S = _single(200553, 'Upsilon(3S)', HEAVY_HADRON)
h_b_3P = _single(210553, 'h_b(3P)', HEAVY_HADRON)
chi_b_1_3P = _single(220553, 'chi_b1(3P)', HEAVY_HADRON)
Upsilon_4S = _single(300553, 'Upsilon(4S)', HEAVY_HADRON)
Upsilon_10860 = _single(9000553, 'Upsilon(10860)', HEAVY_HADRON)
Upsilon_11020 = _single(9010553, 'Upsilon(11020)', HEAVY_HADRON)
chi_b_2_1P = _single(555, 'chi_b2(1P)', HEAVY_HADRON)
eta_b_2_1D = _single(10555, 'eta_b2(1D)', HEAVY_HADRON)
Upsilon_2_1D = _single(20555, 'Upsilon_2(1D)', HEAVY_HADRON)
chi_b_2_2P = _single(100555, 'chi_b2(2P)', HEAVY_HADRON)
eta_b_2_2D = _single(110555, 'eta_b2(2D)', HEAVY_HADRON)
Upsilon_2_2D = _single(120555, 'Upsilon_2(2D)', HEAVY_HADRON)
chi_b_2_3P = _single(200555, 'chi_b2(3P)', HEAVY_HADRON)
Upsilon_3_1D = _single(557, 'Upsilon_3(1D)', HEAVY_HADRON)
Upsilon_3_2D = _single(100557, 'Upsilon_3(2D)', HEAVY_HADRON)

J_psi = J_psi_1S
