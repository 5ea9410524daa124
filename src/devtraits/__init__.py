"""devtraits: Inspect device-trait databases shipped inside developer toolchains."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
