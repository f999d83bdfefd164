"""
Tests for the merge and split rules.
"""

import pytest

from khcube.algebra.frobenius import (
    MINUS,
    PLUS,
    annular_merge,
    annular_split,
    merge,
    split,
)
from khcube.core.errors import InvalidSurgeryError, KhovanovError


class TestRegularRules:
    def test_merge_is_xor(self):
        assert merge(MINUS, MINUS) == [MINUS]
        assert merge(MINUS, PLUS) == [PLUS]
        assert merge(PLUS, MINUS) == [PLUS]
        assert merge(PLUS, PLUS) == [MINUS]

    def test_split_plus(self):
        assert sorted(split(PLUS)) == [(MINUS, MINUS), (PLUS, PLUS)]

    def test_split_minus(self):
        assert sorted(split(MINUS)) == [(MINUS, PLUS), (PLUS, MINUS)]


class TestAnnularMerge:
    def test_trivial_circles_follow_regular_rule(self):
        for a in (MINUS, PLUS):
            for b in (MINUS, PLUS):
                assert annular_merge(a, False, b, False) == merge(a, b)

    def test_essential_equal_labels_vanish(self):
        assert annular_merge(PLUS, True, PLUS, True) == []
        assert annular_merge(MINUS, True, MINUS, True) == []

    def test_essential_different_labels(self):
        assert annular_merge(PLUS, True, MINUS, True) == [MINUS, PLUS]
        assert annular_merge(MINUS, True, PLUS, True) == [MINUS, PLUS]

    def test_essential_absorbs_trivial(self):
        assert annular_merge(PLUS, True, MINUS, False) == [PLUS]
        assert annular_merge(MINUS, True, PLUS, False) == [MINUS]
        assert annular_merge(PLUS, False, MINUS, True) == [MINUS]
        assert annular_merge(MINUS, False, PLUS, True) == [PLUS]


class TestAnnularSplit:
    def test_all_trivial(self):
        assert annular_split(PLUS, False, (False, False)) == split(PLUS)
        assert annular_split(MINUS, False, (False, False)) == split(MINUS)

    def test_essential_source_first_result(self):
        assert annular_split(PLUS, True, (True, False)) == [(PLUS, MINUS), (PLUS, PLUS)]

    def test_essential_source_second_result(self):
        assert annular_split(MINUS, True, (False, True)) == [(MINUS, MINUS), (PLUS, MINUS)]

    def test_trivial_into_two_essential(self):
        expected = [(PLUS, MINUS), (MINUS, PLUS)]
        assert annular_split(PLUS, False, (True, True)) == expected
        assert annular_split(MINUS, False, (True, True)) == expected

    @pytest.mark.parametrize("punctured, results", [
        (False, (True, False)),
        (False, (False, True)),
        (True, (True, True)),
        (True, (False, False)),
    ])
    def test_invalid_configurations_raise(self, punctured, results):
        with pytest.raises(InvalidSurgeryError) as info:
            annular_split(PLUS, punctured, results)
        assert isinstance(info.value, KhovanovError)
        assert info.value.source == punctured
        assert info.value.results == results
