from __future__ import annotations

from ._pystamp import *
from ._pystamp import (  # for the docs and pickling
    __all__,
    __version__,
    _unpkl_ts,
)
