'''higher-order functions over finite sequences

## Overview

The `seqops` package provides predicate tests, mapping, filtering,
folding, duplicate removal, and chunking for in-memory sequences.

Each function reads its input once, left to right, and returns a new
value. No function modifies its input.

Symbols defined in the operation modules are available from this
module directly, e.g `seqops.chunk`.
'''

__all__ = []

from .naming import export, module_all  # NOQA E402

from .exception import *  # NOQA E402
export(__name__, __all__, module_all(__name__ + ".exception"))  # NOQA: F405

from .predicates import *  # NOQA E402
export(__name__, __all__, module_all(__name__ + ".predicates"))  # NOQA: F405

from .transform import *  # NOQA E402
export(__name__, __all__, module_all(__name__ + ".transform"))  # NOQA: F405

from .colib import *  # NOQA E402
export(__name__, __all__, module_all(__name__ + ".colib"))  # NOQA: F405
