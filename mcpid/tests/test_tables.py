import unittest

from mcpid import numbering, tables
from mcpid.numbering import (BOSON, DIQUARK, HEAVY_HADRON, LEPTON,
                             LIGHT_BARYON, LIGHT_MESON, NUCLEUS, PENTAQUARK,
                             QUARK, SPECIAL, SUSY, TECHNICOLOR)
from mcpid.registry import REGISTRY, Particle
from mcpid.tables import (bosons, diquarks, heavy_baryons, heavy_mesons,
                          leptons, light_baryons, light_mesons, nuclei,
                          pentaquarks, quarks, special, susy, technicolor)


def module_particles(module):
    return [value for value in vars(module).values()
            if isinstance(value, Particle)]


class TableModuleTests(unittest.TestCase):

    def setUp(self):
        self.modules = [(quarks, QUARK), (leptons, LEPTON), (bosons, BOSON),
                        (special, SPECIAL), (light_mesons, LIGHT_MESON),
                        (heavy_mesons, HEAVY_HADRON),
                        (light_baryons, LIGHT_BARYON),
                        (heavy_baryons, HEAVY_HADRON),
                        (diquarks, DIQUARK), (pentaquarks, PENTAQUARK),
                        (susy, SUSY), (technicolor, TECHNICOLOR),
                        (nuclei, NUCLEUS)]

    def test_all_modules_listed(self):
        self.assertEqual(sorted(module.__name__.rsplit('.', 1)[-1]
                                for module, _ in self.modules),
                         sorted(tables.__all__))

    def test_constants_are_registered(self):
        for module, _ in self.modules:
            for particle in module_particles(module):
                self.assertIs(REGISTRY[particle.id], particle, particle)

    def test_module_families(self):
        for module, family in self.modules:
            constants = module_particles(module)
            self.assertTrue(constants, module.__name__)
            for particle in constants:
                self.assertEqual(particle.family, family, particle)

    def test_every_entry_has_a_module(self):
        constants = set()
        for module, _ in self.modules:
            constants.update(p.id for p in module_particles(module))
        self.assertEqual(constants, set(REGISTRY.ids()))


class RegistryContentTests(unittest.TestCase):

    def test_frozen(self):
        self.assertTrue(REGISTRY.frozen)
        self.assertRaises(RuntimeError, REGISTRY.conjugate_pair, 43,
                          'unregistered', 'anti-unregistered', None)

    def test_unique_ids(self):
        ids = [particle.id for particle in REGISTRY]
        self.assertEqual(len(ids), len(set(ids)))

    def test_unique_names(self):
        names = [particle.name for particle in REGISTRY
                 if particle.name is not None]
        self.assertEqual(len(names), len(set(names)))
        self.assertEqual(len(names), len(REGISTRY.names()))

    def test_family_of_entries(self):
        for particle in REGISTRY:
            self.assertEqual(numbering.family_of(particle.id),
                             particle.family, particle)
            self.assertIn(particle.family, numbering.FAMILIES)

    def test_pairs_are_complete(self):
        for particle in REGISTRY:
            if particle.self_conjugate:
                self.assertNotIn(-particle.id, REGISTRY, particle)
                self.assertGreater(particle.id, 0)
            else:
                self.assertIn(-particle.id, REGISTRY, particle)

    def test_latex_only_for_elementary_particles(self):
        for particle in REGISTRY:
            if particle.latex is not None:
                self.assertIn(particle.family,
                              (QUARK, LEPTON, BOSON, SPECIAL), particle)


class TableValueTests(unittest.TestCase):

    def test_quarks(self):
        self.assertEqual(quarks.d, 1)
        self.assertEqual(quarks.t, 6)
        self.assertEqual(quarks.t_prime, 8)
        self.assertEqual(quarks.anti_top, -6)

    def test_bosons(self):
        self.assertTrue(bosons.photon.self_conjugate)
        self.assertTrue(bosons.Z.self_conjugate)
        self.assertFalse(bosons.W_plus.self_conjugate)
        self.assertEqual(bosons.W_minus, -24)
        self.assertEqual(bosons.Higgs, 25)

    def test_special(self):
        self.assertEqual(special.graviton, 39)
        self.assertEqual(special.pomeron.name, 'pomeron')
        self.assertTrue(special.string.self_conjugate)

    def test_nuclei(self):
        self.assertEqual(nuclei.alpha, 1000020040)
        self.assertIs(nuclei.helium4, nuclei.alpha)
        self.assertEqual(nuclei.anti_deuteron, -1000010020)
        self.assertEqual(nuclei.hypertriton, 1010010030)
        self.assertEqual(nuclei.lead208, 1000822080)

    def test_majorana(self):
        self.assertTrue(susy.gluino.self_conjugate)
        self.assertTrue(susy.gravitino.self_conjugate)
        self.assertFalse(susy.chi_tilde_plus_1.self_conjugate)

    def test_quarkonia(self):
        self.assertTrue(heavy_mesons.J_psi.self_conjugate)
        self.assertFalse(heavy_mesons.D_0.self_conjugate)
        self.assertEqual(heavy_mesons.D_0.anti(), heavy_mesons.D_0_bar)


if __name__ == '__main__':
    unittest.main()
