__version__ = "0.1.0"

from .barr_zee import F1, F1t, F2, F3, f_PS, f_S, f_sferm
from .config import Config
from .export import Export
from .fafb import G3, G4, Fa, Fb
from .iabc import Iabc, Ixyz
from .loopf import LoopF
from .phi import Phi
from .regime import Regime
from .sfermion import F1C, F1N, F2C, F2N, F3C, F3N, F4C, F4N
from .two_loop import FA, FS, FdHp, FlHp, FuHp, G, Gn
