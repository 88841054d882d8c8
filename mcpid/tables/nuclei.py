"""Light nuclei and the primaries commonly used in air shower simulations

Other nuclei have no constant but do have a name, see
:func:`mcpid.numbering.nucleus_name`.

"""
from ..numbering import NUCLEUS, nucleus_id
from ..registry import REGISTRY


def _nucleus(z, a, name, n_lambda=0):
    return REGISTRY.conjugate_pair(nucleus_id(z, a, n_lambda), name,
                                   'anti-' + name, NUCLEUS)


deuteron, anti_deuteron = _nucleus(1, 2, 'deuteron')
triton, anti_triton = _nucleus(1, 3, 'triton')
hypertriton, anti_hypertriton = _nucleus(1, 3, 'hypertriton', n_lambda=1)
helium3, anti_helium3 = _nucleus(2, 3, 'helium3')
alpha, anti_alpha = _nucleus(2, 4, 'alpha')
lithium7, anti_lithium7 = _nucleus(3, 7, 'lithium7')
beryllium9, anti_beryllium9 = _nucleus(4, 9, 'beryllium9')
boron11, anti_boron11 = _nucleus(5, 11, 'boron11')
carbon12, anti_carbon12 = _nucleus(6, 12, 'carbon12')
nitrogen14, anti_nitrogen14 = _nucleus(7, 14, 'nitrogen14')
oxygen16, anti_oxygen16 = _nucleus(8, 16, 'oxygen16')
neon20, anti_neon20 = _nucleus(10, 20, 'neon20')
magnesium24, anti_magnesium24 = _nucleus(12, 24, 'magnesium24')
aluminium27, anti_aluminium27 = _nucleus(13, 27, 'aluminium27')
silicon28, anti_silicon28 = _nucleus(14, 28, 'silicon28')
sulfur32, anti_sulfur32 = _nucleus(16, 32, 'sulfur32')
argon40, anti_argon40 = _nucleus(18, 40, 'argon40')
calcium40, anti_calcium40 = _nucleus(20, 40, 'calcium40')
iron56, anti_iron56 = _nucleus(26, 56, 'iron56')
nickel58, anti_nickel58 = _nucleus(28, 58, 'nickel58')
lead208, anti_lead208 = _nucleus(82, 208, 'lead208')

helium4, anti_helium4 = alpha, anti_alpha
