"""Light mesons: isovector, isoscalar and strange mesons

Neutral isovector and all isoscalar mesons are their own antiparticle.
The neutral kaons are not: the K0 and anti-K0 are distinct particles,
and the long and short kaons are kept as conjugate pairs as well.

"""
from ..numbering import LIGHT_MESON
from ..registry import REGISTRY

_pair = REGISTRY.conjugate_pair
_single = REGISTRY.self_conjugate


# I = 1
pi_0 = _single(111, 'pi0', LIGHT_MESON)
pi_plus, pi_minus = _pair(211, 'pi+', 'pi-', LIGHT_MESON)
a_0_980_0 = _single(9000111, 'a0(980)0', LIGHT_MESON)
a_0_980_plus, a_0_980_minus = _pair(9000211, 'a0(980)+', 'a0(980)-',
                                    LIGHT_MESON)
pi_1300_0 = _single(100111, 'pi(1300)0', LIGHT_MESON)
pi_1300_plus, pi_1300_minus = _pair(100211, 'pi(1300)+', 'pi(1300)-',
                                    LIGHT_MESON)
a_0_1450_0 = _single(10111, 'a0(1450)0', LIGHT_MESON)
a_0_1450_plus, a_0_1450_minus = _pair(10211, 'a0(1450)+', 'a0(1450)-',
                                      LIGHT_MESON)
pi_1800_0 = _single(9010111, 'pi(1800)0', LIGHT_MESON)
pi_1800_plus, pi_1800_minus = _pair(9010211, 'pi(1800)+', 'pi(1800)-',
                                    LIGHT_MESON)
rho_770_0 = _single(113, 'rho(770)0', LIGHT_MESON)
rho_770_plus, rho_770_minus = _pair(213, 'rho(770)+', 'rho(770)-',
                                    LIGHT_MESON)
b_1_1235_0 = _single(10113, 'b1(1235)0', LIGHT_MESON)
b_1_1235_plus, b_1_1235_minus = _pair(10213, 'b1(1235)+', 'b1(1235)-',
                                      LIGHT_MESON)
a_1_1260_0 = _single(20113, 'a1(1260)0', LIGHT_MESON)
a_1_1260_plus, a_1_1260_minus = _pair(20213, 'a1(1260)+', 'a1(1260)-',
                                      LIGHT_MESON)
pi_1_1400_0 = _single(9000113, 'pi1(1400)0', LIGHT_MESON)
pi_1_1400_plus, pi_1_1400_minus = _pair(9000213, 'pi1(1400)+', 'pi1(1400)-',
                                        LIGHT_MESON)
rho_1450_0 = _single(100113, 'rho(1450)0', LIGHT_MESON)
rho_1450_plus, rho_1450_minus = _pair(100213, 'rho(1450)+', 'rho(1450)-',
                                      LIGHT_MESON)
pi_1_1600_0 = _single(9010113, 'pi1(1600)0', LIGHT_MESON)
pi_1_1600_plus, pi_1_1600_minus = _pair(9010213, 'pi1(1600)+', 'pi1(1600)-',
                                        LIGHT_MESON)
a_1_1640_0 = _single(9020113, 'a1(1640)0', LIGHT_MESON)
a_1_1640_plus, a_1_1640_minus = _pair(9020213, 'a1(1640)+', 'a1(1640)-',
                                      LIGHT_MESON)
rho_1700_0 = _single(30113, 'rho(1700)0', LIGHT_MESON)
rho_1700_plus, rho_1700_minus = _pair(30213, 'rho(1700)+', 'rho(1700)-',
                                      LIGHT_MESON)
rho_1900_0 = _single(9030113, 'rho(1900)0', LIGHT_MESON)
rho_1900_plus, rho_1900_minus = _pair(9030213, 'rho(1900)+', 'rho(1900)-',
                                      LIGHT_MESON)
rho_2150_0 = _single(9040113, 'rho(2150)0', LIGHT_MESON)
rho_2150_plus, rho_2150_minus = _pair(9040213, 'rho(2150)+', 'rho(2150)-',
                                      LIGHT_MESON)
a_2_1320_0 = _single(115, 'a2(1320)0', LIGHT_MESON)
a_2_1320_plus, a_2_1320_minus = _pair(215, 'a2(1320)+', 'a2(1320)-',
                                      LIGHT_MESON)
pi_2_1670_0 = _single(10115, 'pi2(1670)0', LIGHT_MESON)
pi_2_1670_plus, pi_2_1670_minus = _pair(10215, 'pi2(1670)+', 'pi2(1670)-',
                                        LIGHT_MESON)
a_2_1700_0 = _single(9000115, 'a2(1700)0', LIGHT_MESON)
a_2_1700_plus, a_2_1700_minus = _pair(9000215, 'a2(1700)+', 'a2(1700)-',
                                      LIGHT_MESON)
pi_2_2100_0 = _single(9010115, 'pi2(2100)0', LIGHT_MESON)
pi_2_2100_plus, pi_2_2100_minus = _pair(9010215, 'pi2(2100)+', 'pi2(2100)-',
                                        LIGHT_MESON)
rho_3_1690_0 = _single(117, 'rho3(1690)0', LIGHT_MESON)
rho_3_1690_plus, rho_3_1690_minus = _pair(217, 'rho3(1690)+', 'rho3(1690)-',
                                          LIGHT_MESON)
rho_3_1990_0 = _single(9000117, 'rho3(1990)0', LIGHT_MESON)
rho_3_1990_plus, rho_3_1990_minus = _pair(9000217, 'rho3(1990)+',
                                          'rho3(1990)-', LIGHT_MESON)
rho_3_2250_0 = _single(9010117, 'rho3(2250)0', LIGHT_MESON)
rho_3_2250_plus, rho_3_2250_minus = _pair(9010217, 'rho3(2250)+',
                                          'rho3(2250)-', LIGHT_MESON)
a_4_2040_0 = _single(119, 'a4(2040)0', LIGHT_MESON)
a_4_2040_plus, a_4_2040_minus = _pair(219, 'a4(2040)+', 'a4(2040)-',
                                      LIGHT_MESON)

# I = 0
eta = _single(221, 'eta', LIGHT_MESON)
eta_prime_958 = _single(331, "eta'(958)", LIGHT_MESON)
f_0_500 = _single(9000221, 'f0(500)', LIGHT_MESON)
f_0_980 = _single(9010221, 'f0(980)', LIGHT_MESON)
eta_1295 = _single(100221, 'eta(1295)', LIGHT_MESON)
f_0_1370 = _single(10221, 'f0(1370)', LIGHT_MESON)
eta_1405 = _single(9020221, 'eta(1405)', LIGHT_MESON)
eta_1475 = _single(100331, 'eta(1475)', LIGHT_MESON)
f_0_1500 = _single(9030221, 'f0(1500)', LIGHT_MESON)
f_0_1710 = _single(10331, 'f0(1710)', LIGHT_MESON)
eta_1760 = _single(9040221, 'eta(1760)', LIGHT_MESON)
f_0_2020 = _single(9050221, 'f0(2020)', LIGHT_MESON)
f_0_2100 = _single(9060221, 'f0(2100)', LIGHT_MESON)
f_0_2200 = _single(9070221, 'f0(2200)', LIGHT_MESON)
eta_2225 = _single(9080221, 'eta(2225)', LIGHT_MESON)
omega_782 = _single(223, 'omega(782)', LIGHT_MESON)
phi_1020 = _single(333, 'phi(1020)', LIGHT_MESON)
h_1_1170 = _single(10223, 'h1(1170)', LIGHT_MESON)
f_1_1285 = _single(20223, 'f1(1285)', LIGHT_MESON)
h_1_1380 = _single(10333, 'h1(1380)', LIGHT_MESON)
f_1_1420 = _single(20333, 'f1(1420)', LIGHT_MESON)
omega_1420 = _single(100223, 'omega(1420)', LIGHT_MESON)
f_1_1510 = _single(9000223, 'f1(1510)', LIGHT_MESON)
h_1_1595 = _single(9010223, 'h1(1595)', LIGHT_MESON)
omega_1650 = _single(30223, 'omega(1650)', LIGHT_MESON)
phi_1680 = _single(100333, 'phi(1680)', LIGHT_MESON)
f_2_1270 = _single(225, 'f2(1270)', LIGHT_MESON)
f_2_1430 = _single(9000225, 'f2(1430)', LIGHT_MESON)
f_2_prime_1525 = _single(335, "f2'(1525)", LIGHT_MESON)
f_2_1565 = _single(9010225, 'f2(1565)', LIGHT_MESON)
f_2_1640 = _single(9020225, 'f2(1640)', LIGHT_MESON)
eta_2_1645 = _single(10225, 'eta2(1645)', LIGHT_MESON)
f_2_1810 = _single(9030225, 'f2(1810)', LIGHT_MESON)
eta_2_1870 = _single(10335, 'eta2(1870)', LIGHT_MESON)
f_2_1910 = _single(9040225, 'f2(1910)', LIGHT_MESON)
f_2_1950 = _single(9050225, 'f2(1950)', LIGHT_MESON)
f_2_2010 = _single(9060225, 'f2(2010)', LIGHT_MESON)
f_2_2150 = _single(9070225, 'f2(2150)', LIGHT_MESON)
f_2_2300 = _single(9080225, 'f2(2300)', LIGHT_MESON)
f_2_2340 = _single(9090225, 'f2(2340)', LIGHT_MESON)
omega_3_1670 = _single(227, 'omega3(1670)', LIGHT_MESON)
phi_3_1850 = _single(337, 'phi3(1850)', LIGHT_MESON)
f_4_2050 = _single(229, 'f4(2050)', LIGHT_MESON)
f_J_2220 = _single(9000229, 'fJ(2220)', LIGHT_MESON)
f_4_2300 = _single(9010229, 'f4(2300)', LIGHT_MESON)

# Strange
K_0_L, K_0_L_bar = _pair(130, 'K(L)0', 'anti-K(L)0', LIGHT_MESON)
K_0_S, K_0_S_bar = _pair(310, 'K(S)0', 'anti-K(S)0', LIGHT_MESON)
K_0, K_0_bar = _pair(311, 'K0', 'anti-K0', LIGHT_MESON)
K_plus, K_minus = _pair(321, 'K+', 'K-', LIGHT_MESON)
K_0_star_700_0, K_0_star_700_0_bar = _pair(9000311, 'K0*(700)0',
                                           'anti-K0*(700)0', LIGHT_MESON)
K_0_star_700_plus, K_0_star_700_minus = _pair(9000321, 'K0*(700)+',
                                              'K0*(700)-', LIGHT_MESON)
K_0_star_1430_0, K_0_star_1430_0_bar = _pair(10311, 'K0*(1430)0',
                                             'anti-K0*(1430)0', LIGHT_MESON)
K_0_star_1430_plus, K_0_star_1430_minus = _pair(10321, 'K0*(1430)+',
                                                'K0*(1430)-', LIGHT_MESON)
K_1460_0, K_1460_0_bar = _pair(100311, 'K(1460)0', 'anti-K(1460)0',
                               LIGHT_MESON)
K_1460_plus, K_1460_minus = _pair(100321, 'K(1460)+', 'K(1460)-',
                                  LIGHT_MESON)
K_1830_0, K_1830_0_bar = _pair(9010311, 'K(1830)0', 'anti-K(1830)0',
                               LIGHT_MESON)
K_1830_plus, K_1830_minus = _pair(9010321, 'K(1830)+', 'K(1830)-',
                                  LIGHT_MESON)
K_0_star_1950_0, K_0_star_1950_0_bar = _pair(9020311, 'K0*(1950)0',
                                             'anti-K0*(1950)0', LIGHT_MESON)
K_0_star_1950_plus, K_0_star_1950_minus = _pair(9020321, 'K0*(1950)+',
                                                'K0*(1950)-', LIGHT_MESON)
K_star_892_0, K_star_892_0_bar = _pair(313, 'K*(892)0', 'anti-K*(892)0',
                                       LIGHT_MESON)
K_star_892_plus, K_star_892_minus = _pair(323, 'K*(892)+', 'K*(892)-',
                                          LIGHT_MESON)
K_1_1270_0, K_1_1270_0_bar = _pair(10313, 'K1(1270)0', 'anti-K1(1270)0',
                                   LIGHT_MESON)
K_1_1270_plus, K_1_1270_minus = _pair(10323, 'K1(1270)+', 'K1(1270)-',
                                      LIGHT_MESON)
K_1_1400_0, K_1_1400_0_bar = _pair(20313, 'K1(1400)0', 'anti-K1(1400)0',
                                   LIGHT_MESON)
K_1_1400_plus, K_1_1400_minus = _pair(20323, 'K1(1400)+', 'K1(1400)-',
                                      LIGHT_MESON)
K_star_1410_0, K_star_1410_0_bar = _pair(100313, 'K*(1410)0',
                                         'anti-K*(1410)0', LIGHT_MESON)
K_star_1410_plus, K_star_1410_minus = _pair(100323, 'K*(1410)+',
                                            'K*(1410)-', LIGHT_MESON)
K_1_1650_0, K_1_1650_0_bar = _pair(9000313, 'K1(1650)0', 'anti-K1(1650)0',
                                   LIGHT_MESON)
K_1_1650_plus, K_1_1650_minus = _pair(9000323, 'K1(1650)+', 'K1(1650)-',
                                      LIGHT_MESON)
K_star_1680_0, K_star_1680_0_bar = _pair(30313, 'K*(1680)0',
                                         'anti-K*(1680)0', LIGHT_MESON)
K_star_1680_plus, K_star_1680_minus = _pair(30323, 'K*(1680)+',
                                            'K*(1680)-', LIGHT_MESON)
K_2_star_1430_0, K_2_star_1430_0_bar = _pair(315, 'K2*(1430)0',
                                             'anti-K2*(1430)0', LIGHT_MESON)
K_2_star_1430_plus, K_2_star_1430_minus = _pair(325, 'K2*(1430)+',
                                                'K2*(1430)-', LIGHT_MESON)
K_2_1580_0, K_2_1580_0_bar = _pair(9000315, 'K2(1580)0', 'anti-K2(1580)0',
                                   LIGHT_MESON)
K_2_1580_plus, K_2_1580_minus = _pair(9000325, 'K2(1580)+', 'K2(1580)-',
                                      LIGHT_MESON)
K_2_1770_0, K_2_1770_0_bar = _pair(10315, 'K2(1770)0', 'anti-K2(1770)0',
                                   LIGHT_MESON)
K_2_1770_plus, K_2_1770_minus = _pair(10325, 'K2(1770)+', 'K2(1770)-',
                                      LIGHT_MESON)
K_2_1820_0, K_2_1820_0_bar = _pair(20315, 'K2(1820)0', 'anti-K2(1820)0',
                                   LIGHT_MESON)
K_2_1820_plus, K_2_1820_minus = _pair(20325, 'K2(1820)+', 'K2(1820)-',
                                      LIGHT_MESON)
K_2_star_1980_0, K_2_star_1980_0_bar = _pair(9010315, 'K2*(1980)0',
                                             'anti-K2*(1980)0', LIGHT_MESON)
K_2_star_1980_plus, K_2_star_1980_minus = _pair(9010325, 'K2*(1980)+',
                                                'K2*(1980)-', LIGHT_MESON)
K_2_2250_0, K_2_2250_0_bar = _pair(9020315, 'K2(2250)0', 'anti-K2(2250)0',
                                   LIGHT_MESON)
K_2_2250_plus, K_2_2250_minus = _pair(9020325, 'K2(2250)+', 'K2(2250)-',
                                      LIGHT_MESON)
K_3_star_1780_0, K_3_star_1780_0_bar = _pair(317, 'K3*(1780)0',
                                             'anti-K3*(1780)0', LIGHT_MESON)
K_3_star_1780_plus, K_3_star_1780_minus = _pair(327, 'K3*(1780)+',
                                                'K3*(1780)-', LIGHT_MESON)
K_3_2320_0, K_3_2320_0_bar = _pair(9010317, 'K3(2320)0', 'anti-K3(2320)0',
                                   LIGHT_MESON)
K_3_2320_plus, K_3_2320_minus = _pair(9010327, 'K3(2320)+', 'K3(2320)-',
                                      LIGHT_MESON)
K_4_star_2045_0, K_4_star_2045_0_bar = _pair(319, 'K4*(2045)0',
                                             'anti-K4*(2045)0', LIGHT_MESON)
K_4_star_2045_plus, K_4_star_2045_minus = _pair(329, 'K4*(2045)+',
                                                'K4*(2045)-', LIGHT_MESON)
K_4_2500_0, K_4_2500_0_bar = _pair(9000319, 'K4(2500)0', 'anti-K4(2500)0',
                                   LIGHT_MESON)
K_4_2500_plus, K_4_2500_minus = _pair(9000329, 'K4(2500)+', 'K4(2500)-',
                                      LIGHT_MESON)

pi_zero = pi_0
K_long = K_0_L
K_short = K_0_S
