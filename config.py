"""Centralized configuration for polysolve.

Values are read once at import time. Each one can be overridden through an
environment variable prefixed with ``POLYSOLVE_``.
"""

import os

try:
    import importlib.metadata

    VERSION = importlib.metadata.version("polysolve")
except Exception:
    # Running from a source checkout that was never installed
    VERSION = "0.1.0"

# Floating-point cubic roots closer than this to an integer are snapped to it
SNAP_TOLERANCE = float(os.getenv("POLYSOLVE_SNAP_TOLERANCE", "1e-15"))

# LaTeX operator name placed between unsimplified coefficient factors
DEFAULT_MULTIPLICATION = os.getenv("POLYSOLVE_TEX_MULTIPLICATION", "cdot")

LOG_LEVEL = os.getenv("POLYSOLVE_LOG_LEVEL", "WARNING")

# Variable names rendered as LaTeX commands (``alpha`` -> ``\alpha``)
GREEK_LETTERS = frozenset(
    {
        "alpha",
        "beta",
        "gamma",
        "Gamma",
        "delta",
        "Delta",
        "epsilon",
        "varepsilon",
        "zeta",
        "eta",
        "theta",
        "vartheta",
        "Theta",
        "iota",
        "kappa",
        "lambda",
        "Lambda",
        "mu",
        "nu",
        "xi",
        "Xi",
        "pi",
        "Pi",
        "rho",
        "varrho",
        "sigma",
        "Sigma",
        "tau",
        "upsilon",
        "Upsilon",
        "phi",
        "varphi",
        "Phi",
        "chi",
        "psi",
        "Psi",
        "omega",
        "Omega",
    }
)
