"""
Tests for the diagram model and circle tracing.
"""

import pytest

from khcube.diagram.planar import PlanarDiagram
from khcube.topology.circles import circle_mask, resolution_circles, strand_pairings


class TestPlanarDiagram:
    def test_size_and_labels(self, trefoil):
        assert trefoil.size() == 3
        assert len(trefoil) == 3
        assert trefoil.labels() == (1, 2, 3, 4, 5, 6)

    def test_crossings_are_int_tuples(self):
        D = PlanarDiagram.from_pd_code([["1", "2", "3", "4"], [3, 4, 1, 2]])
        assert D.crossings == ((1, 2, 3, 4), (3, 4, 1, 2))

    def test_wrong_arity_raises(self):
        with pytest.raises(ValueError):
            PlanarDiagram.from_pd_code([[1, 2, 3]])

    def test_from_flat(self):
        D = PlanarDiagram.from_flat([1, 2, 3, 4, 3, 4, 1, 2])
        assert D.to_pd_code() == [[1, 2, 3, 4], [3, 4, 1, 2]]

    def test_from_flat_incomplete_raises(self):
        with pytest.raises(ValueError):
            PlanarDiagram.from_flat([1, 2, 3, 4, 5])

    def test_empty(self):
        assert PlanarDiagram().size() == 0


class TestStrandPairings:
    def test_choice_zero(self):
        assert strand_pairings((1, 2, 3, 4), 0) == ((1, 2), (3, 4))

    def test_choice_one(self):
        assert strand_pairings((1, 2, 3, 4), 1) == ((1, 4), (2, 3))


class TestResolutionCircles:
    def test_single_self_crossing(self, self_crossing):
        assert resolution_circles(self_crossing, 0) == {(1, 2)}
        assert resolution_circles(self_crossing, 1) == {(1, 2)}

    def test_hopf_resolutions(self, hopf):
        assert resolution_circles(hopf, 0b00) == {(1, 2), (3, 4)}
        assert resolution_circles(hopf, 0b01) == {(1, 2, 3, 4)}
        assert resolution_circles(hopf, 0b10) == {(1, 2, 3, 4)}
        assert resolution_circles(hopf, 0b11) == {(1, 4), (2, 3)}

    def test_trefoil_extremes(self, trefoil):
        assert resolution_circles(trefoil, 0b000) == {(1, 3, 5), (2, 4, 6)}
        assert resolution_circles(trefoil, 0b111) == {(1, 4), (2, 5), (3, 6)}
        assert resolution_circles(trefoil, 0b001) == {(1, 2, 3, 4, 5, 6)}

    def test_kink(self):
        D = PlanarDiagram.from_pd_code([[5, 5, 6, 6]])
        assert resolution_circles(D, 0) == {(5,), (6,)}
        assert resolution_circles(D, 1) == {(5, 6)}

    @pytest.mark.parametrize("name", ["trefoil", "figure_eight", "hopf_with_kink"])
    def test_every_label_in_exactly_one_circle(self, name, request):
        D = request.getfixturevalue(name)
        labels = D.labels()
        for r in range(1 << D.size()):
            circles = resolution_circles(D, r)
            seen = [x for c in circles for x in c]
            assert sorted(seen) == list(labels)

    def test_circles_are_sorted_tuples(self, figure_eight):
        for r in range(1 << figure_eight.size()):
            for c in resolution_circles(figure_eight, r):
                assert c == tuple(sorted(c))


class TestCircleMask:
    def test_mask_bits(self):
        assert circle_mask((1, 3)) == 0b101
        assert circle_mask((2, 3, 5)) == 0b10110
        assert circle_mask(()) == 0
