import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from fastconf.backends import available_backends  # noqa: E402


@pytest.fixture(params=sorted(available_backends()))
def backend(request):
    """Every backend installed in the current environment."""
    return available_backends()[request.param]


@pytest.fixture()
def cfg_dir(tmp_path: Path) -> Path:
    d = tmp_path / "cfg"
    d.mkdir()
    return d
