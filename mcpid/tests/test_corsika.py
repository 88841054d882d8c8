import unittest

from mcpid import corsika
from mcpid.numbering import nucleus_id
from mcpid.particles import name_of
from mcpid.registry import REGISTRY
from mcpid.tables import leptons, nuclei


class FromCorsikaTests(unittest.TestCase):

    def setUp(self):
        self.codes = [(1, 22), (2, -11), (3, 11), (5, -13), (6, 13),
                      (7, 111), (10, 130), (14, 2212), (15, -2212),
                      (16, 310), (66, 12), (132, 15), (176, 511),
                      (201, 1000010020), (301, 1000010030),
                      (302, 1000020030), (402, 1000020040),
                      (1206, 1000060120), (1407, 1000070140),
                      (5626, 1000260560)]

    def test_from_corsika(self):
        for code, pid in self.codes:
            self.assertEqual(corsika.from_corsika(code), pid, code)

    def test_to_corsika(self):
        for code, pid in self.codes:
            self.assertEqual(corsika.to_corsika(pid), code, pid)

    def test_aliases(self):
        """Decay channels and additional muons map onto their particle"""

        for code in [71, 72, 73, 74]:
            self.assertEqual(corsika.from_corsika(code), 221)
        for code in [75, 85, 95]:
            self.assertEqual(corsika.from_corsika(code), -13)
        for code in [76, 86, 96]:
            self.assertEqual(corsika.from_corsika(code), 13)

    def test_no_equivalent(self):
        for code in [4, 101, 199, 9900, 0]:
            self.assertIsNone(corsika.from_corsika(code), code)

    def test_invalid_nucleus(self):
        with self.assertLogs('mcpid.corsika', 'DEBUG') as cm:
            self.assertIsNone(corsika.from_corsika(305))
        self.assertIn('305', cm.output[0])

    def test_description(self):
        self.assertEqual(corsika.from_corsika_description(14011), 2212)
        self.assertEqual(corsika.from_corsika_description(1001), 22)
        self.assertEqual(corsika.from_corsika_description(5626001),
                         1000260560)
        self.assertIsNone(corsika.from_corsika_description(9900001))

    def test_names(self):
        self.assertEqual(name_of(corsika.from_corsika(27)), 'anti-Sigma-')
        self.assertEqual(name_of(corsika.from_corsika(29)), 'anti-Sigma+')
        self.assertEqual(name_of(corsika.from_corsika(402)), 'alpha')

    def test_table_is_registered(self):
        for pid in corsika.CORSIKA_TO_PDG.values():
            self.assertIn(pid, REGISTRY)

    def test_table_is_one_to_one(self):
        self.assertEqual(len(corsika.PDG_TO_CORSIKA),
                         len(corsika.CORSIKA_TO_PDG))


class ToCorsikaTests(unittest.TestCase):

    def test_particles(self):
        self.assertEqual(corsika.to_corsika(leptons.electron), 3)
        self.assertEqual(corsika.to_corsika(nuclei.iron56), 5626)
        self.assertEqual(corsika.to_corsika(-3222), 27)

    def test_no_equivalent(self):
        for pid in [25, 2000006, nuclei.anti_alpha, nuclei.hypertriton,
                    nuclei.lead208, 1000060121, 999999999, 1000000000,
                    1000000020, 1000050030, -1000010010]:
            self.assertIsNone(corsika.to_corsika(pid), pid)

    def test_nucleons(self):
        """Single nucleons map onto the proton and neutron codes"""

        self.assertEqual(corsika.to_corsika(1000010010), 14)
        self.assertEqual(corsika.to_corsika(1000000010), 13)
        self.assertEqual(corsika.from_corsika(14), 2212)
        self.assertEqual(corsika.from_corsika(13), 2112)

    def test_nucleus_round_trip(self):
        for a in range(2, corsika.MAX_CORSIKA_A + 1):
            for z in range(1, a + 1):
                pid = nucleus_id(z, a)
                code = corsika.to_corsika(pid)
                self.assertEqual(code, a * 100 + z, pid)
                self.assertEqual(corsika.from_corsika(code), pid, code)

    def test_code_round_trip(self):
        for code in range(200, 10000):
            pid = corsika.from_corsika(code)
            if pid is not None:
                self.assertEqual(corsika.to_corsika(pid), code, pid)


if __name__ == '__main__':
    unittest.main()
