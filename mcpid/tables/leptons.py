"""Charged leptons and neutrinos, including the fourth generation"""
from ..numbering import LEPTON
from ..registry import REGISTRY

_pair = REGISTRY.conjugate_pair


e, e_bar = _pair(11, 'electron', 'positron', LEPTON, 'e^-', 'e^+')
nu_e, nu_e_bar = _pair(12, 'electron neutrino', 'electron anti-neutrino',
                       LEPTON, r'\nu_e', r'\bar{\nu}_e')
mu, mu_bar = _pair(13, 'muon', 'anti-muon', LEPTON, r'\mu^-', r'\mu^+')
nu_mu, nu_mu_bar = _pair(14, 'muon neutrino', 'muon anti-neutrino', LEPTON,
                         r'\nu_\mu', r'\bar{\nu}_\mu')
tau, tau_bar = _pair(15, 'tau', 'anti-tau', LEPTON, r'\tau^-', r'\tau^+')
nu_tau, nu_tau_bar = _pair(16, 'tau neutrino', 'tau anti-neutrino', LEPTON,
                           r'\nu_\tau', r'\bar{\nu}_\tau')
tau_prime, tau_prime_bar = _pair(17, 'tau prime', 'anti-tau prime', LEPTON,
                                 r"\tau'^-", r"\tau'^+")
nu_tau_prime, nu_tau_prime_bar = _pair(18, 'tau prime neutrino',
                                       'tau prime anti-neutrino', LEPTON,
                                       r"\nu_{\tau'}", r"\bar{\nu}_{\tau'}")

electron = e_minus = e
positron = e_plus = e_bar
electron_neutrino = nu_e
electron_anti_neutrino = nu_e_bar
muon = mu_minus = mu
mu_plus = mu_bar
muon_neutrino = nu_mu
muon_anti_neutrino = nu_mu_bar
tau_minus = tau
tau_plus = tau_bar
tau_neutrino = nu_tau
tau_anti_neutrino = nu_tau_bar
tau_prime_neutrino = nu_tau_prime
tau_prime_anti_neutrino = nu_tau_prime_bar
