"""
Unit tests for the element / set / map model.

Core claims:
    - Elements of different runtime types are never equal, and comparing
      them never raises
    - Sets re-enumerate their generating elements on every call
    - Missing check/filter predicates accept everything
    - A map refuses (returns None for) elements of the wrong type
    - Diagram construction rejects out-of-range map indices
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from commuter.core.elements import Element, erase
from commuter.core.sets import Set, common_type
from commuter.core.maps import Map
from commuter.core.diagram import Diagram, DiagramEdge
from commuter.core.errors import ContractViolation, CyclicGraphError


# ── Element ──────────────────────────────────────────────────────────────────

class TestElement:
    def test_equal_values(self):
        assert Element((1, 2)).eq(Element((1, 2)))

    def test_unequal_values(self):
        assert not Element(1).eq(Element(2))

    def test_cross_type_is_not_equal(self):
        assert not Element(1).eq(Element(1.0))
        assert not Element(1).eq(Element("1"))
        assert not Element((1, 2)).eq(Element([1, 2]))

    def test_bool_is_not_int(self):
        assert not Element(True).eq(Element(1))

    def test_eq_against_non_element(self):
        assert not Element(1).eq(1)

    def test_name_is_repr(self):
        assert Element((0, 0, 4)).name == "(0, 0, 4)"
        assert Element("x").name == "'x'"

    def test_type_tag(self):
        assert Element(3).type_tag is int

    def test_downcast(self):
        assert Element(3).downcast(int) == 3
        assert Element(3).downcast(None) == 3

    def test_downcast_mismatch_raises(self):
        with pytest.raises(ContractViolation, match="Expected an element of type str"):
            Element(3).downcast(str)

    def test_erase_is_idempotent(self):
        e = Element(5)
        assert erase(e) is e
        assert erase(5) == e

    @given(st.integers() | st.text() | st.tuples(st.integers(), st.integers()))
    def test_eq_is_reflexive(self, value):
        assert Element(value).eq(Element(value))

    @given(st.integers(), st.text())
    def test_cross_type_never_equal(self, a, b):
        assert not Element(a).eq(Element(b))
        assert not Element(b).eq(Element(a))


# ── Set ──────────────────────────────────────────────────────────────────────

class TestSet:
    def test_elements_are_restartable(self):
        s = Set([1, 2, 3])
        assert [e.value for e in s.elements()] == [1, 2, 3]
        assert [e.value for e in s.elements()] == [1, 2, 3]

    def test_lazy_input_is_materialised(self):
        s = Set(x * x for x in range(4))
        assert [e.value for e in s.elements()] == [0, 1, 4, 9]
        assert len(s) == 4

    def test_unseeded_has_no_elements(self):
        s = Set.unseeded(element_type=int)
        assert list(s.elements()) == []
        assert len(s) == 0

    def test_element_type_inferred(self):
        assert Set([(1, 2)]).element_type is tuple
        assert Set.unseeded().element_type is None

    def test_default_predicates_accept(self):
        s = Set([1])
        assert s.check(Element(-100))
        assert s.filter(Element(-100))
        assert not s.is_checked
        assert not s.is_filtered

    def test_checked(self):
        s = Set([1, -1], check=lambda x: x >= 0)
        assert s.is_checked
        assert s.check(Element(1))
        assert not s.check(Element(-1))
        assert s.filter(Element(-1))

    def test_filtered(self):
        s = Set([1, -1], filter=lambda x: x >= 0)
        assert s.is_filtered
        assert not s.filter(Element(-1))
        assert s.check(Element(-1))

    def test_checked_and_filtered(self):
        s = Set.unseeded(check=lambda x: x < 10, filter=lambda x: x % 2 == 0, element_type=int)
        assert s.check(Element(4)) and s.filter(Element(4))
        assert not s.check(Element(12))
        assert not s.filter(Element(3))

    def test_wrong_type_is_contract_violation(self):
        s = Set([1], check=lambda x: x >= 0)
        with pytest.raises(ContractViolation):
            s.check(Element("one"))
        with pytest.raises(ContractViolation):
            s.filter(Element("one"))

    def test_mixed_seed_types_share_no_declared_type(self):
        assert Set([None, 1, 2]).element_type is None
        assert Set([0, 0.5, 1]).element_type is None

    def test_mixed_seeds_pass_check_and_filter(self):
        s = Set([None, 1, 2], check=lambda x: x is None or x > 0,
                filter=lambda x: x != 2)
        assert all(s.check(e) for e in s.elements())
        assert [s.filter(e) for e in s.elements()] == [True, True, False]

    def test_subclass_seeds_use_common_base(self):
        assert Set([True, 2, False]).element_type is int
        assert Set([2, True]).element_type is int

    def test_common_type(self):
        class Base:
            pass

        class Left(Base):
            pass

        class Right(Base):
            pass

        assert common_type([Left, Right, Left]) is Base
        assert common_type([int, int]) is int
        assert common_type([int, str]) is None
        assert common_type([]) is None

    def test_label(self):
        assert Set([1], name="ints").label == "ints"
        assert Set([1]).label == "int"
        assert Set.unseeded().label == "?"


# ── Map ──────────────────────────────────────────────────────────────────────

class TestMap:
    def test_invoke(self):
        m = Map(0, 1, lambda x: x + 1, "succ", domain=int)
        assert m.invoke(Element(1)) == Element(2)

    def test_invoke_wrong_type_returns_none(self):
        m = Map(0, 1, lambda x: x + 1, "succ", domain=int)
        assert m.invoke(Element("a")) is None

    def test_untyped_map_accepts_anything(self):
        m = Map(0, 1, lambda x: x * 2, "double")
        assert m.invoke(Element("a")) == Element("aa")

    def test_output_is_erased(self):
        m = Map(0, 1, lambda p: p[0] + p[1], "(+)", domain=tuple)
        result = m.invoke(Element((2, 3)))
        assert isinstance(result, Element)
        assert result.type_tag is int

    def test_invoke_does_not_double_wrap(self):
        m = Map(0, 1, lambda x: Element(x * 2), "pre-wrapped", domain=int)
        result = m.invoke(Element(3))
        assert result == Element(6)
        assert result.eq(Element(6))

    def test_bound_to(self):
        m = Map(0, 1, abs, "abs")
        bound = m.bound_to(int)
        assert bound.domain is int
        assert m.domain is None
        assert bound.bound_to(str) is bound


# ── Diagram ──────────────────────────────────────────────────────────────────

class TestDiagram:
    def test_nodes_are_set_indices(self):
        d = Diagram([Set([1]), Set.unseeded(), Set.unseeded()], [])
        assert d.nodes() == [0, 1, 2]

    def test_outbounds_carry_map_index(self):
        d = Diagram(
            [Set([1]), Set.unseeded(), Set.unseeded()],
            [Map(0, 1, abs, "a"), Map(1, 2, abs, "b"), Map(0, 2, abs, "c")],
        )
        assert d.outbounds(0) == [DiagramEdge(0, 1, 0), DiagramEdge(0, 2, 2)]
        assert d.outbounds(2) == []

    def test_parallel_maps_are_separate_edges(self):
        d = Diagram(
            [Set([1]), Set.unseeded()],
            [Map(0, 1, abs, "abs"), Map(0, 1, lambda x: x, "id")],
        )
        assert len(d.outbounds(0)) == 2
        assert len(d.paths()) == 2

    def test_maps_bound_to_source_type(self):
        d = Diagram([Set([1]), Set.unseeded()], [Map(0, 1, abs, "abs")])
        assert d.maps[0].domain is int

    def test_edges_and_map_for(self):
        d = Diagram(
            [Set([1]), Set.unseeded(), Set.unseeded()],
            [Map(0, 1, abs, "f"), Map(1, 2, abs, "g"), Map(0, 1, abs, "h")],
        )
        assert d.edges() == [DiagramEdge(0, 1, 0), DiagramEdge(1, 2, 1), DiagramEdge(0, 1, 2)]
        assert [d.map_for(e).name for e in d.edges()] == ["f", "g", "h"]

    def test_describe_path(self):
        d = Diagram(
            [Set([1]), Set.unseeded(), Set.unseeded()],
            [Map(0, 1, abs, "f"), Map(1, 2, abs, "g")],
        )
        path = (DiagramEdge(0, 1, 0), DiagramEdge(1, 2, 1))
        assert d.describe_path(path) == "f -> g"

    def test_out_of_range_map_rejected(self):
        with pytest.raises(ContractViolation, match="only has 2 sets"):
            Diagram([Set([1]), Set.unseeded()], [Map(0, 2, abs, "bad")])

    def test_negative_index_rejected(self):
        with pytest.raises(ContractViolation):
            Diagram([Set([1])], [Map(-1, 0, abs, "bad")])

    def test_non_set_rejected(self):
        with pytest.raises(ContractViolation):
            Diagram([[1, 2, 3]], [])

    def test_non_map_rejected(self):
        with pytest.raises(ContractViolation):
            Diagram([Set([1])], [(0, 0, abs)])

    def test_cyclic_diagram(self):
        d = Diagram(
            [Set([1]), Set.unseeded()],
            [Map(0, 1, abs, "there"), Map(1, 0, abs, "back")],
        )
        with pytest.raises(CyclicGraphError):
            d.paths()
