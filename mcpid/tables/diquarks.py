"""Diquarks, as used in string fragmentation"""
from ..numbering import DIQUARK
from ..registry import REGISTRY

_pair = REGISTRY.conjugate_pair


dd_1, dd_1_bar = _pair(1103, 'dd_1', 'dd_1bar', DIQUARK)
ud_0, ud_0_bar = _pair(2101, 'ud_0', 'ud_0bar', DIQUARK)
ud_1, ud_1_bar = _pair(2103, 'ud_1', 'ud_1bar', DIQUARK)
uu_1, uu_1_bar = _pair(2203, 'uu_1', 'uu_1bar', DIQUARK)
sd_0, sd_0_bar = _pair(3101, 'sd_0', 'sd_0bar', DIQUARK)
sd_1, sd_1_bar = _pair(3103, 'sd_1', 'sd_1bar', DIQUARK)
su_0, su_0_bar = _pair(3201, 'su_0', 'su_0bar', DIQUARK)
su_1, su_1_bar = _pair(3203, 'su_1', 'su_1bar', DIQUARK)
ss_1, ss_1_bar = _pair(3303, 'ss_1', 'ss_1bar', DIQUARK)
cd_0, cd_0_bar = _pair(4101, 'cd_0', 'cd_0bar', DIQUARK)
cd_1, cd_1_bar = _pair(4103, 'cd_1', 'cd_1bar', DIQUARK)
cu_0, cu_0_bar = _pair(4201, 'cu_0', 'cu_0bar', DIQUARK)
cu_1, cu_1_bar = _pair(4203, 'cu_1', 'cu_1bar', DIQUARK)
cs_0, cs_0_bar = _pair(4301, 'cs_0', 'cs_0bar', DIQUARK)
cs_1, cs_1_bar = _pair(4303, 'cs_1', 'cs_1bar', DIQUARK)
cc_1, cc_1_bar = _pair(4403, 'cc_1', 'cc_1bar', DIQUARK)
bd_0, bd_0_bar = _pair(5101, 'bd_0', 'bd_0bar', DIQUARK)
bd_1, bd_1_bar = _pair(5103, 'bd_1', 'bd_1bar', DIQUARK)
bu_0, bu_0_bar = _pair(5201, 'bu_0', 'bu_0bar', DIQUARK)
bu_1, bu_1_bar = _pair(5203, 'bu_1', 'bu_1bar', DIQUARK)
bs_0, bs_0_bar = _pair(5301, 'bs_0', 'bs_0bar', DIQUARK)
bs_1, bs_1_bar = _pair(5303, 'bs_1', 'bs_1bar', DIQUARK)
bc_0, bc_0_bar = _pair(5401, 'bc_0', 'bc_0bar', DIQUARK)
bc_1, bc_1_bar = _pair(5403, 'bc_1', 'bc_1bar', DIQUARK)
bb_1, bb_1_bar = _pair(5503, 'bb_1', 'bb_1bar', DIQUARK)
