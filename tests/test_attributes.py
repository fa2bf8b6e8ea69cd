"""Tests for fundeps/attributes.py module."""

import unittest

from fundeps import ParseError
from fundeps.attributes import Attribute, AttributeSet
from fundeps.dependencies import DependencySet
from .common import iter_subsets


class TestAttribute(unittest.TestCase):
    def test_equality_by_name(self):
        self.assertEqual(Attribute('A'), Attribute('A'))
        self.assertNotEqual(Attribute('A'), Attribute('B'))
        self.assertEqual(hash(Attribute('A')), hash(Attribute('A')))

    def test_whitespace_stripped(self):
        self.assertEqual(Attribute('  name\t'), Attribute('name'))

    def test_ordering(self):
        attrs = [Attribute('C'), Attribute('A'), Attribute('B')]
        self.assertEqual(sorted(attrs), [Attribute('A'), Attribute('B'), Attribute('C')])
        self.assertLessEqual(Attribute('A'), Attribute('A'))
        self.assertGreater(Attribute('b'), Attribute('a'))

    def test_not_equal_to_str(self):
        """Attributes only compare equal to other attributes."""
        self.assertNotEqual(Attribute('A'), 'A')

    def test_str_and_repr(self):
        attr = Attribute('emp_id')
        self.assertEqual(str(attr), 'emp_id')
        self.assertEqual(repr(attr), "Attribute('emp_id')")

    def test_invalid_names(self):
        for name in ['', '   ', 'A,B', 'A->B', 'A\nB']:
            with self.subTest(name=name):
                with self.assertRaises(ParseError):
                    Attribute(name)

    def test_bad_type(self):
        with self.assertRaises(TypeError):
            Attribute(123)


class TestAttributeSet(unittest.TestCase):
    def test_canonical_order(self):
        attrs = AttributeSet(['C', 'A', 'B'])
        self.assertEqual(list(attrs), [Attribute('A'), Attribute('B'), Attribute('C')])

    def test_no_duplicates(self):
        attrs = AttributeSet(['A', 'A', Attribute('A'), 'B'])
        self.assertEqual(len(attrs), 2)

    def test_contains(self):
        attrs = AttributeSet(['A', 'B'])
        self.assertIn('A', attrs)
        self.assertIn(Attribute('B'), attrs)
        self.assertNotIn('C', attrs)
        self.assertNotIn('', attrs)

    def test_equality_and_hash(self):
        self.assertEqual(AttributeSet(['B', 'A']), AttributeSet(['A', 'B']))
        self.assertEqual(hash(AttributeSet(['B', 'A'])), hash(AttributeSet(['A', 'B'])))
        self.assertNotEqual(AttributeSet(['A']), AttributeSet(['A', 'B']))

    def test_set_operators(self):
        ab = AttributeSet('AB')
        bc = AttributeSet('BC')
        self.assertEqual(ab | bc, AttributeSet('ABC'))
        self.assertEqual(ab & bc, AttributeSet('B'))
        self.assertEqual(ab - bc, AttributeSet('A'))
        self.assertIsInstance(ab | bc, AttributeSet)
        self.assertTrue(AttributeSet('A') <= ab)
        self.assertTrue(AttributeSet('A') < ab)
        self.assertFalse(ab < ab)
        self.assertTrue(ab >= AttributeSet('B'))

    def test_set_methods(self):
        ab = AttributeSet('AB')
        self.assertEqual(ab.union('C', ['D']), AttributeSet('ABCD'))
        self.assertEqual(ab.difference(['A']), AttributeSet('B'))
        self.assertEqual(ab.intersection('BC'), AttributeSet('B'))
        self.assertTrue(ab.issubset('ABC'))
        self.assertTrue(ab.issuperset(['A']))
        self.assertFalse(ab.issuperset('AC'))

    def test_operations_leave_original_unchanged(self):
        ab = AttributeSet('AB')
        ab.union('C')
        ab.difference('A')
        self.assertEqual(ab, AttributeSet('AB'))

    def test_str_and_repr(self):
        attrs = AttributeSet(['C', 'A', 'B'])
        self.assertEqual(str(attrs), 'A, B, C')
        self.assertEqual(repr(attrs), "AttributeSet(['A', 'B', 'C'])")
        self.assertEqual(str(AttributeSet()), '')

    def test_sort_key(self):
        sets = [AttributeSet('B'), AttributeSet('AB'), AttributeSet('A')]
        result = sorted(sets, key=AttributeSet.sort_key)
        self.assertEqual(result, [AttributeSet('A'), AttributeSet('AB'), AttributeSet('B')])


class TestAttributeSetFromString(unittest.TestCase):
    def test_comma_separated(self):
        attrs = AttributeSet.from_string('A, B, C')
        self.assertEqual(attrs, AttributeSet(['A', 'B', 'C']))

    def test_whitespace(self):
        attrs = AttributeSet.from_string('  first_name ,last_name\t')
        self.assertEqual(attrs, AttributeSet(['first_name', 'last_name']))

    def test_multicharacter_names(self):
        attrs = AttributeSet.from_string('AB, C')
        self.assertEqual(len(attrs), 2)
        self.assertIn('AB', attrs)

    def test_empty(self):
        self.assertEqual(AttributeSet.from_string(''), AttributeSet())
        self.assertEqual(AttributeSet.from_string('   '), AttributeSet())

    def test_empty_item(self):
        for text in ['A,,B', 'A,', ',A', ' , ']:
            with self.subTest(text=text):
                with self.assertRaises(ParseError):
                    AttributeSet.from_string(text)

    def test_parse_error_is_value_error(self):
        with self.assertRaises(ValueError):
            AttributeSet.from_string('A,,B')

    def test_round_trip(self):
        attrs = AttributeSet.from_string('C, A, B')
        self.assertEqual(AttributeSet.from_string(str(attrs)), attrs)

    def test_simple_form(self):
        self.assertEqual(AttributeSet.from_simple_form('CAB'), AttributeSet(['A', 'B', 'C']))
        self.assertEqual(AttributeSet.from_simple_form('A B'), AttributeSet(['A', 'B']))
        self.assertEqual(AttributeSet.from_simple_form(''), AttributeSet())


class TestClosure(unittest.TestCase):
    def setUp(self):
        self.deps = DependencySet.from_string("""
            A, B -> C, D
            C -> E, F
            A -> F
            E -> F
        """)

    def test_single_attribute(self):
        result = AttributeSet('A').closure(self.deps)
        self.assertEqual(result, AttributeSet('AF'))

    def test_full_closure(self):
        result = AttributeSet('AB').closure(self.deps)
        self.assertEqual(result, AttributeSet('ABCDEF'))

    def test_transitive_chain(self):
        deps = DependencySet.from_string('A -> B\nB -> C\nC -> D')
        self.assertEqual(AttributeSet('A').closure(deps), AttributeSet('ABCD'))
        self.assertEqual(AttributeSet('C').closure(deps), AttributeSet('CD'))

    def test_empty_set_and_empty_dependencies(self):
        self.assertEqual(AttributeSet().closure(DependencySet()), AttributeSet())

    def test_no_dependencies(self):
        self.assertEqual(AttributeSet('AB').closure(DependencySet()), AttributeSet('AB'))

    def test_empty_left_side(self):
        deps = DependencySet.from_string(' -> A')
        self.assertEqual(AttributeSet().closure(deps), AttributeSet('A'))

    def test_does_not_modify_input(self):
        attrs = AttributeSet('A')
        attrs.closure(self.deps)
        self.assertEqual(attrs, AttributeSet('A'))

    def test_reflexive(self):
        for subset in iter_subsets('ABCDEF'):
            with self.subTest(subset=str(subset)):
                self.assertTrue(subset.closure(self.deps) >= subset)

    def test_monotonic(self):
        subsets = list(iter_subsets('ABCDEF'))
        closures = {x: x.closure(self.deps) for x in subsets}
        for x in subsets:
            for y in subsets:
                if x <= y:
                    self.assertTrue(closures[x] <= closures[y], msg=f'{x} / {y}')

    def test_idempotent(self):
        for subset in iter_subsets('ABCDEF'):
            closure = subset.closure(self.deps)
            self.assertEqual(closure.closure(self.deps), closure)

    def test_independent_of_order(self):
        """Closure should not depend on which dependency applies first."""
        deps = DependencySet.from_string('D -> E\nC -> D\nB -> C\nA -> B')
        self.assertEqual(AttributeSet('A').closure(deps), AttributeSet('ABCDE'))


class TestIsSuperkey(unittest.TestCase):
    def test_superkey(self):
        deps = DependencySet.from_string('A -> B\nB -> C')
        self.assertTrue(AttributeSet('A').is_superkey(deps))
        self.assertTrue(AttributeSet('AB').is_superkey(deps))
        self.assertFalse(AttributeSet('B').is_superkey(deps))

    def test_explicit_universe(self):
        deps = DependencySet.from_string('A -> B')
        self.assertTrue(AttributeSet('A').is_superkey(deps))
        self.assertFalse(AttributeSet('A').is_superkey(deps, universe='ABC'))
        self.assertTrue(AttributeSet('AC').is_superkey(deps, universe='ABC'))


if __name__ == '__main__':
    unittest.main()
