"""Make `import ductflow` work when the tests run without installing the
package: the repository root is put on sys.path.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))


@pytest.fixture()
def registry():
    from ductflow.units import create_default_registry

    return create_default_registry()
