"""Attributes and attribute sets for functional dependency analysis."""

from functools import total_ordering
from ._typing import (
    AbstractSet,
    Any,
    FrozenSet,
    Iterable,
    Iterator,
    Optional,
    Self,
    Tuple,
    Union,
    TYPE_CHECKING,
)
from ._utils import (
    ARROW,
    ParseError,
    check_type,
    split_names,
)

if TYPE_CHECKING:
    from .dependencies import DependencySet


@total_ordering
class Attribute(object):
    """An immutable name representing one column of a relation.

    Attributes are compared and ordered by name::

        >>> Attribute('A') < Attribute('B')
        True
        >>> Attribute(' A ') == Attribute('A')
        True
    """
    __slots__ = ('_name',)
    _name: str

    def __init__(self, name: Union[str, 'Attribute']) -> None:
        if isinstance(name, Attribute):
            name = name.name
        name = check_type(name, str).strip()

        if not name:
            raise ParseError('attribute name cannot be empty')
        if ',' in name or ARROW in name or '\n' in name or '\r' in name:
            raise ParseError(f'invalid attribute name: {name!r}')

        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._name!r})'

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Attribute):
            return NotImplemented
        return self._name == other._name

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Attribute):
            return NotImplemented
        return self._name < other._name

    def __hash__(self) -> int:
        return hash((Attribute, self._name))


AttributeLike = Union[str, Attribute]


class AttributeSet(AbstractSet[Attribute]):
    """An immutable set of attributes with a canonical (sorted)
    iteration order.

    Create an AttributeSet from attributes or from plain strings::

        >>> AttributeSet(['B', 'A', Attribute('C')])
        AttributeSet(['A', 'B', 'C'])

    Create an AttributeSet from its text form::

        >>> AttributeSet.from_string('A, B, C')
        AttributeSet(['A', 'B', 'C'])

    AttributeSets support the usual set operators and always return
    new sets::

        >>> AttributeSet('AB') | AttributeSet('BC')
        AttributeSet(['A', 'B', 'C'])
        >>> AttributeSet('AB') <= AttributeSet('ABC')
        True

    Note that a plain string is iterated character by character, so
    ``AttributeSet('AB')`` holds the two attributes A and B.
    """
    __slots__ = ('_members', '_ordered')
    _members: FrozenSet[Attribute]
    _ordered: Tuple[Attribute, ...]

    def __init__(self, attributes: Iterable[AttributeLike] = ()) -> None:
        if isinstance(attributes, AttributeSet):
            self._members = attributes._members
            self._ordered = attributes._ordered
            return  # <- EXIT!

        members = frozenset(Attribute(x) for x in attributes)
        self._members = members
        self._ordered = tuple(sorted(members))

    @classmethod
    def _from_iterable(cls, it: Iterable[AttributeLike]) -> Self:
        # Used by the `collections.abc.Set` mixin operators.
        return cls(it)

    @classmethod
    def from_string(cls, string: str) -> Self:
        """Parse comma-separated attribute names (surrounding
        whitespace is ignored). Empty text gives an empty set.
        """
        return cls(split_names(check_type(string, str)))

    @classmethod
    def from_simple_form(cls, string: str) -> Self:
        """Make a set of single-character attributes, one for each
        non-whitespace character in *string*::

            >>> AttributeSet.from_simple_form('ACD')
            AttributeSet(['A', 'C', 'D'])
        """
        return cls(char for char in check_type(string, str) if not char.isspace())

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            try:
                item = Attribute(item)
            except ParseError:
                return False
        return item in self._members

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._members)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, AttributeSet):
            return self._members == other._members
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash((AttributeSet, self._members))

    def __repr__(self) -> str:
        names = [x.name for x in self._ordered]
        return f'{self.__class__.__name__}({names!r})'

    def __str__(self) -> str:
        return ', '.join(x.name for x in self._ordered)

    def sort_key(self) -> Tuple[str, ...]:
        """Return a key that totally orders attribute sets by their
        canonical sequence of names.
        """
        return tuple(x.name for x in self._ordered)

    def union(self, *others: Iterable[AttributeLike]) -> Self:
        members = set(self._members)
        for other in others:
            members.update(AttributeSet(other)._members)
        return self.__class__(members)

    def difference(self, *others: Iterable[AttributeLike]) -> Self:
        members = set(self._members)
        for other in others:
            members.difference_update(AttributeSet(other)._members)
        return self.__class__(members)

    def intersection(self, *others: Iterable[AttributeLike]) -> Self:
        members = set(self._members)
        for other in others:
            members.intersection_update(AttributeSet(other)._members)
        return self.__class__(members)

    def issubset(self, other: Iterable[AttributeLike]) -> bool:
        return self._members <= AttributeSet(other)._members

    def issuperset(self, other: Iterable[AttributeLike]) -> bool:
        return self._members >= AttributeSet(other)._members

    def closure(self, dependencies: 'DependencySet') -> 'AttributeSet':
        """Return the closure of this set under *dependencies*: every
        attribute functionally determined by this set.

        .. code-block::

            >>> deps = DependencySet.from_string('A -> B\\nB -> C')
            >>> AttributeSet('A').closure(deps)
            AttributeSet(['A', 'B', 'C'])

        Starting from the set itself (reflexivity), the right side of
        every dependency whose left side is already contained in the
        closure is added. Passes repeat until one makes no change.
        Because the closure only grows within a finite universe, the
        loop always terminates and the result does not depend on the
        order the dependencies are visited.
        """
        closure = set(self._members)
        changed = True
        while changed:
            changed = False
            for dependency in dependencies:
                left = dependency.left._members
                right = dependency.right._members
                if left <= closure and not right <= closure:
                    closure |= right
                    changed = True
        return AttributeSet(closure)

    def is_superkey(
        self,
        dependencies: 'DependencySet',
        universe: Optional[Iterable[AttributeLike]] = None,
    ) -> bool:
        """Return True if the closure of this set contains *universe*
        (defaults to the effective attributes of *dependencies*).
        """
        if universe is None:
            universe = dependencies.effective_attributes()
        return self.closure(dependencies).issuperset(universe)
