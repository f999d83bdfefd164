"""
Shared diagrams for the test suite.
"""

import pytest

from khcube.diagram.planar import PlanarDiagram

# Two crossings, edges 1..4; faces are the bigons {1,2}, {2,3}, {3,4}, {4,1}.
HOPF = [[1, 2, 3, 4], [3, 4, 1, 2]]
TREFOIL = [[1, 5, 2, 4], [3, 1, 4, 6], [5, 3, 6, 2]]
FIGURE_EIGHT = [[4, 2, 5, 1], [8, 6, 1, 5], [6, 3, 7, 4], [2, 7, 3, 8]]
SELF_CROSSING = [[1, 2, 1, 2]]


@pytest.fixture
def hopf():
    return PlanarDiagram.from_pd_code(HOPF)


@pytest.fixture
def trefoil():
    return PlanarDiagram.from_pd_code(TREFOIL)


@pytest.fixture
def figure_eight():
    return PlanarDiagram.from_pd_code(FIGURE_EIGHT)


@pytest.fixture
def self_crossing():
    return PlanarDiagram.from_pd_code(SELF_CROSSING)


@pytest.fixture
def hopf_with_kink():
    # Hopf diagram plus a separate one-crossing unknot on edges 5, 6
    return PlanarDiagram.from_pd_code(HOPF + [[5, 5, 6, 6]])
