"""Root conftest — pre-import workspace packages.

Without this, pytest's directory traversal registers package directories as
namespace packages before test collection, which shadows the real packages
installed from <pkg>/src/.  Importing them here (while pythonpath is already in
effect) caches the correct module in sys.modules.
"""

import one_ring_futures  # noqa: F401
