import unittest

from mcpid import particles
from mcpid.numbering import LEPTON, LIGHT_BARYON, LIGHT_MESON, NUCLEUS
from mcpid.registry import REGISTRY
from mcpid.tables import (bosons, heavy_baryons, heavy_mesons, leptons,
                          light_baryons, light_mesons, nuclei, quarks)


class LookupTests(unittest.TestCase):

    def test_proton(self):
        proton = light_baryons.proton
        self.assertEqual(particles.id_of(proton), 2212)
        self.assertEqual(particles.name_of(2212), 'proton')
        self.assertEqual(particles.anti(proton).id, -2212)
        self.assertEqual(particles.name_of(-2212), 'anti-proton')
        self.assertEqual(particles.family_of(proton), LIGHT_BARYON)

    def test_photon(self):
        """The photon is its own antiparticle"""

        self.assertEqual(particles.id_of(bosons.photon), 22)
        self.assertIs(particles.anti(bosons.photon), bosons.photon)
        self.assertIsNone(particles.lookup(-22))
        self.assertIsNone(particles.name_of(-22))

    def test_electron(self):
        self.assertEqual(particles.id_of(leptons.electron), 11)
        self.assertEqual(particles.id_of(leptons.positron), -11)
        self.assertEqual(particles.anti(leptons.electron), leptons.positron)
        self.assertEqual(particles.anti(leptons.positron), leptons.electron)
        self.assertEqual(particles.family_of(-11), LEPTON)

    def test_neutral_pion(self):
        self.assertEqual(particles.id_of(light_mesons.pi_zero), 111)
        self.assertEqual(particles.name_of(111), 'pi0')
        self.assertIs(particles.anti(111), light_mesons.pi_zero)
        self.assertEqual(particles.family_of(111), LIGHT_MESON)

    def test_neutral_kaons(self):
        """Neutral kaons are not their own antiparticle"""

        for kaon in [light_mesons.K_short, light_mesons.K_long,
                     light_mesons.K_0]:
            self.assertFalse(kaon.self_conjugate)
            self.assertNotEqual(particles.anti(kaon), kaon)
            self.assertEqual(particles.anti(kaon).id, -kaon.id)
        self.assertEqual(particles.name_of(-310), 'anti-K(S)0')

    def test_unknown_code(self):
        """Unknown codes give None, not an error"""

        for pid in [0, 999999999, 10, -21, 1001200240, 1000060141,
                    1010060120]:
            self.assertIsNone(particles.name_of(pid), pid)
            self.assertIsNone(particles.lookup(pid), pid)
        self.assertIsNone(particles.name_of('proton'))
        self.assertIsNone(particles.name_of(None))

    def test_booleans_are_not_codes(self):
        self.assertIsNone(particles.name_of(True))
        self.assertIsNone(particles.lookup(True))
        self.assertIsNone(particles.lookup(False))
        self.assertNotEqual(quarks.d, True)

    def test_lookup(self):
        self.assertIs(particles.lookup(2212), light_baryons.proton)
        self.assertIs(particles.lookup(light_baryons.proton),
                      light_baryons.proton)
        self.assertIsNone(particles.lookup('2212'))

    def test_anti_of_integer(self):
        self.assertEqual(particles.anti(13), leptons.mu_plus)
        self.assertIs(particles.anti(23), bosons.Z)
        self.assertIs(particles.anti(-4122), heavy_baryons.Lambda_c_plus)

    def test_anti_of_unknown_code(self):
        self.assertRaises(KeyError, particles.anti, 999999999)
        self.assertRaises(KeyError, particles.anti, -22)

    def test_anti_is_involution(self):
        for particle in REGISTRY:
            antiparticle = particles.anti(particle)
            self.assertIs(particles.anti(antiparticle), particle)
            if particle.self_conjugate:
                self.assertIs(antiparticle, particle)
            else:
                self.assertEqual(antiparticle.id, -particle.id)
                self.assertFalse(antiparticle.self_conjugate)

    def test_names_round_trip(self):
        for particle in REGISTRY:
            if particle.name is None:
                continue
            self.assertEqual(particles.name_of(particle.id), particle.name)
            self.assertEqual(particles.particle_id(particle.name),
                             particle.id)

    def test_family_matches_table(self):
        for particle in REGISTRY:
            self.assertEqual(particles.family_of(particle), particle.family,
                             particle)


class NucleusNameTests(unittest.TestCase):

    def test_unregistered_nucleus(self):
        self.assertEqual(particles.name_of(1000060140), 'carbon14')
        self.assertEqual(particles.name_of(-1000020030), 'anti-helium3')
        self.assertEqual(particles.name_of(1000922380), 'uranium238')

    def test_registered_nucleus(self):
        self.assertEqual(particles.name_of(1000020040), 'alpha')
        self.assertEqual(particles.name_of(1000260560), 'iron56')
        self.assertEqual(particles.family_of(nuclei.iron56), NUCLEUS)

    def test_particle_id(self):
        self.assertEqual(particles.particle_id('proton'), 2212)
        self.assertEqual(particles.particle_id('anti-proton'), -2212)
        self.assertEqual(particles.particle_id('carbon14'), 1000060140)
        self.assertEqual(particles.particle_id('helium4'), 1000020040)
        self.assertEqual(particles.particle_id('anti-helium3'), -1000020030)
        self.assertEqual(particles.particle_id('hypertriton'), 1010010030)

    def test_unknown_names(self):
        for name in ['protonium', 'carbon', 'unobtainium12', 'carbon2',
                     'anti-', '']:
            self.assertIsNone(particles.particle_id(name), name)


class LatexTests(unittest.TestCase):

    def test_latex(self):
        self.assertEqual(particles.latex_name(bosons.photon), r'\gamma')
        self.assertEqual(particles.latex_name(-11), 'e^+')
        self.assertEqual(particles.latex_name(quarks.u_bar), r'\bar{u}')

    def test_no_latex(self):
        self.assertIsNone(particles.latex_name(2212))
        self.assertIsNone(particles.latex_name(999999999))


class PredicateTests(unittest.TestCase):

    def test_quarks(self):
        self.assertTrue(particles.is_quark(quarks.u))
        self.assertFalse(particles.is_quark(quarks.u_bar))
        self.assertTrue(particles.is_anti_quark(-6))
        self.assertFalse(particles.is_anti_quark(11))

    def test_leptons(self):
        self.assertTrue(particles.is_lepton(11))
        self.assertTrue(particles.is_charged_lepton(13))
        self.assertFalse(particles.is_charged_lepton(14))
        self.assertTrue(particles.is_neutrino(leptons.nu_tau))
        self.assertFalse(particles.is_neutrino(-12))
        self.assertTrue(particles.is_anti_neutrino(-12))
        self.assertTrue(particles.is_anti_lepton(leptons.positron))
        self.assertTrue(particles.is_charged_anti_lepton(-15))
        self.assertFalse(particles.is_charged_anti_lepton(15))

    def test_bosons(self):
        for pid in [21, 22, 23, 24, -24, bosons.W_minus]:
            self.assertTrue(particles.is_gauge_boson(pid), pid)
        for pid in [20, 25, 32, 11, 2212]:
            self.assertFalse(particles.is_gauge_boson(pid), pid)

    def test_hadrons(self):
        self.assertTrue(particles.is_meson(211))
        self.assertTrue(particles.is_meson(heavy_mesons.J_psi))
        self.assertFalse(particles.is_meson(2212))
        self.assertTrue(particles.is_baryon(-2212))
        self.assertTrue(particles.is_baryon(heavy_baryons.Lambda_c_plus))
        self.assertFalse(particles.is_baryon(421))
        self.assertTrue(particles.is_hadron(100221132))
        self.assertTrue(particles.is_hadron(130))
        self.assertFalse(particles.is_hadron(22))
        self.assertFalse(particles.is_hadron(1103))
        self.assertFalse(particles.is_hadron(1000060120))

    def test_anti_particle(self):
        self.assertTrue(particles.is_anti_particle(-2212))
        self.assertFalse(particles.is_anti_particle(bosons.photon))
        self.assertTrue(particles.is_nucleus(-1000020040))


if __name__ == '__main__':
    unittest.main()
