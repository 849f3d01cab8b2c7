"""fdrtidy - tidy tables from false discovery rate results.

Converts q-value results into three standardized tables: a lambda sweep
(``tidy``), a per-record table (``augment``) and a one-row summary
(``glance``).
"""

from fdrtidy.core.results import MissingFieldError, QValueResult
from fdrtidy.tidiers import (
    OutputFlavor,
    QValueTidier,
    ResultTidier,
    augment,
    get_tidier,
    glance,
    register_tidier,
    tidy,
)

__version__ = "0.1.0"

__all__ = [
    "MissingFieldError",
    "OutputFlavor",
    "QValueResult",
    "QValueTidier",
    "ResultTidier",
    "__version__",
    "augment",
    "get_tidier",
    "glance",
    "register_tidier",
    "tidy",
]
