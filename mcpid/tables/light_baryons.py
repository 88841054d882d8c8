"""Nucleons, Delta resonances and strange baryons"""
from ..numbering import LIGHT_BARYON
from ..registry import REGISTRY

_pair = REGISTRY.conjugate_pair


p, p_bar = _pair(2212, 'proton', 'anti-proton', LIGHT_BARYON)
n, n_bar = _pair(2112, 'neutron', 'anti-neutron', LIGHT_BARYON)
Delta_plus_plus, Delta_plus_plus_bar = _pair(2224, 'Delta(1232)++',
                                             'anti-Delta(1232)--',
                                             LIGHT_BARYON)
Delta_plus, Delta_plus_bar = _pair(2214, 'Delta(1232)+', 'anti-Delta(1232)-',
                                   LIGHT_BARYON)
Delta_0, Delta_0_bar = _pair(2114, 'Delta(1232)0', 'anti-Delta(1232)0',
                             LIGHT_BARYON)
Delta_minus, Delta_minus_bar = _pair(1114, 'Delta(1232)-',
                                     'anti-Delta(1232)+', LIGHT_BARYON)

# Strange
Lambda, Lambda_bar = _pair(3122, 'Lambda', 'anti-Lambda', LIGHT_BARYON)
Sigma_plus, Sigma_plus_bar = _pair(3222, 'Sigma+', 'anti-Sigma-',
                                   LIGHT_BARYON)
Sigma_0, Sigma_0_bar = _pair(3212, 'Sigma0', 'anti-Sigma0', LIGHT_BARYON)
Sigma_minus, Sigma_minus_bar = _pair(3112, 'Sigma-', 'anti-Sigma+',
                                     LIGHT_BARYON)
Sigma_star_plus, Sigma_star_plus_bar = _pair(3224, 'Sigma(1385)+',
                                             'anti-Sigma(1385)-',
                                             LIGHT_BARYON)
Sigma_star_0, Sigma_star_0_bar = _pair(3214, 'Sigma(1385)0',
                                       'anti-Sigma(1385)0', LIGHT_BARYON)
Sigma_star_minus, Sigma_star_minus_bar = _pair(3114, 'Sigma(1385)-',
                                               'anti-Sigma(1385)+',
                                               LIGHT_BARYON)
Xi_0, Xi_0_bar = _pair(3322, 'Xi0', 'anti-Xi0', LIGHT_BARYON)
Xi_minus, Xi_minus_bar = _pair(3312, 'Xi-', 'anti-Xi+', LIGHT_BARYON)
Xi_star_0, Xi_star_0_bar = _pair(3324, 'Xi(1530)0', 'anti-Xi(1530)0',
                                 LIGHT_BARYON)
Xi_star_minus, Xi_star_minus_bar = _pair(3314, 'Xi(1530)-',
                                         'anti-Xi(1530)+', LIGHT_BARYON)
Omega_minus, Omega_minus_bar = _pair(3334, 'Omega-', 'anti-Omega+',
                                     LIGHT_BARYON)

proton, anti_proton = p, p_bar
neutron, anti_neutron = n, n_bar
