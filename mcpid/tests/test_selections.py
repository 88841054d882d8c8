import unittest

import numpy as np
from numpy.testing import assert_array_equal

from mcpid import selections
from mcpid.numbering import LEPTON, LIGHT_BARYON, NUCLEUS


class FamilyMaskTests(unittest.TestCase):

    def setUp(self):
        self.pids = np.array([22, 11, -11, 13, 2212, 1000020040, 0])

    def test_single_family(self):
        mask = selections.family_mask(self.pids, LEPTON)
        assert_array_equal(mask, [False, True, True, True, False, False,
                                  False])
        assert_array_equal(self.pids.compress(mask), [11, -11, 13])

    def test_multiple_families(self):
        mask = selections.family_mask(self.pids, LIGHT_BARYON, NUCLEUS)
        assert_array_equal(mask, [False, False, False, False, True, True,
                                  False])

    def test_shape(self):
        pids = self.pids[:6].reshape(2, 3)
        mask = selections.family_mask(pids, LEPTON)
        self.assertEqual(mask.shape, (2, 3))
        self.assertEqual(mask.dtype, bool)

    def test_empty(self):
        mask = selections.family_mask([], LEPTON)
        self.assertEqual(mask.shape, (0,))

    def test_unknown_family(self):
        self.assertRaises(ValueError, selections.family_mask, self.pids,
                          'lepton', 'glueball')


class AntiIdsTests(unittest.TestCase):

    def test_anti_ids(self):
        pids = np.array([22, 11, -11, 111, 310, 2212, 1000020040])
        assert_array_equal(selections.anti_ids(pids),
                           [22, -11, 11, 111, -310, -2212, -1000020040])

    def test_shape(self):
        pids = np.array([[13, 22], [-13, 23]])
        assert_array_equal(selections.anti_ids(pids), [[-13, 22], [13, 23]])

    def test_unknown_codes(self):
        with self.assertRaises(KeyError) as cm:
            selections.anti_ids([11, -22, 999999999])
        self.assertIn('-22', str(cm.exception))
        self.assertIn('999999999', str(cm.exception))


class NamesTests(unittest.TestCase):

    def test_names(self):
        result = selections.names([2212, -2212, 1000060140, 999999999])
        self.assertEqual(result.dtype, object)
        self.assertEqual(list(result),
                         ['proton', 'anti-proton', 'carbon14', None])

    def test_shape(self):
        result = selections.names(np.array([[22, 11], [-11, 111]]))
        self.assertEqual(result.shape, (2, 2))
        self.assertEqual(result[1, 1], 'pi0')


if __name__ == '__main__':
    unittest.main()
