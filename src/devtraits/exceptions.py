"""devtraits exception hierarchy.

All public exceptions inherit from DevTraitsError, giving callers a single
base class to catch when they want to handle any devtraits-specific failure
without swallowing unrelated errors.

The report pipeline itself converts I/O failures into absent results at the
component that performs the I/O; these exceptions mark the seams where that
conversion happens.
"""


class DevTraitsError(Exception):
    """Base exception for all devtraits errors."""


class DatabaseReadError(DevTraitsError):
    """Raised when a platform's device-traits database cannot be read.

    Covers missing files, databases that refuse to open, and query or row
    errors while draining the ``Devices`` table.
    """


class BundleError(DevTraitsError):
    """Raised when a path cannot be resolved to a toolchain bundle."""


class ExportError(DevTraitsError):
    """Raised when a report cannot be serialized or parsed back.

    Covers encoding failures, unsupported formats, and structured
    documents that do not match the report shape.
    """
