import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from family_tree import FamilyTree  # noqa: E402

REFERENCE_PAIRS = [
    ("Nancy", "Adam"),
    ("Nancy", "Jill"),
    ("Nancy", "Carl"),
    ("Jill", "Kevin"),
    ("Carl", "Catherine"),
    ("Carl", "Joseph"),
    ("Kevin", "Samuel"),
    ("Kevin", "George"),
    ("Kevin", "James"),
    ("Kevin", "Aaron"),
    ("George", "Patrick"),
    ("George", "Robert"),
    ("James", "Mary"),
]


@pytest.fixture
def nancy_tree() -> FamilyTree:
    """The reference family rooted at Nancy, built one add_child at a time."""
    tree = FamilyTree.with_root("Nancy")
    for parent, child in REFERENCE_PAIRS:
        tree.add_child(parent, child)
    return tree
