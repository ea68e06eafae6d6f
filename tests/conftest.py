import pytest

from structural_patterns.domain.forest import Forest, TreeTypeFactory
from structural_patterns.domain.graphic import CompositeGraphic, Leaf


@pytest.fixture(autouse=True)
def clean_pattern_env(monkeypatch):
    """Keep host PATTERNS_* variables out of configuration tests."""
    for var in ("PATTERNS_LOG_LEVEL", "PATTERNS_LOG_DESTINATION",
                "PATTERNS_LOG_FILE", "PATTERNS_OUTPUT_FORMAT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def nested_groups():
    """G2 holds C2 and G1; G1 holds C1 and R1."""
    c1 = Leaf.circle("C1")
    r1 = Leaf.rectangle("R1")
    c2 = Leaf.circle("C2")

    g1 = CompositeGraphic(name="G1")
    g1.add(c1)
    g1.add(r1)

    g2 = CompositeGraphic(name="G2")
    g2.add(c2)
    g2.add(g1)
    return {"g1": g1, "g2": g2, "c1": c1, "r1": r1, "c2": c2}


@pytest.fixture
def tree_factory():
    return TreeTypeFactory()


@pytest.fixture
def forest(tree_factory):
    return Forest(tree_factory)
