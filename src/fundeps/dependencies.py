"""Functional dependencies and the algorithms that reason over them."""

import logging
from collections import defaultdict
from ._typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    MutableSet,
    Optional,
    Self,
    Set,
    Tuple,
)
from ._utils import (
    ParseError,
    TooManyKeysError,
    check_type,
    iter_content_lines,
    split_arrow,
)
from .attributes import (
    Attribute,
    AttributeLike,
    AttributeSet,
)


logger = logging.getLogger(__name__)


class Dependency(object):
    """A functional dependency: the *left* attribute set determines
    the *right* attribute set.

    .. code-block::

        >>> dep = Dependency.from_string('A, B -> C, D')
        >>> dep
        Dependency(AttributeSet(['A', 'B']), AttributeSet(['C', 'D']))
        >>> print(dep)
        A, B -> C, D

    Dependencies are immutable and compare by their (left, right) pair,
    so ``A -> B`` and ``B -> A`` are different dependencies.
    """
    __slots__ = ('_left', '_right')
    _left: AttributeSet
    _right: AttributeSet

    def __init__(
        self,
        left: Iterable[AttributeLike],
        right: Iterable[AttributeLike],
    ) -> None:
        self._left = AttributeSet(left)
        self._right = AttributeSet(right)

    @classmethod
    def from_set_pair(
        cls, pair: Tuple[Iterable[AttributeLike], Iterable[AttributeLike]]
    ) -> Self:
        left, right = pair
        return cls(left, right)

    @classmethod
    def from_string(cls, string: str) -> Self:
        """Parse text of the form ``'<left> -> <right>'`` where each
        side is a comma-separated list of attribute names. A ParseError
        is raised if the ``->`` separator is missing.
        """
        left, right = split_arrow(check_type(string, str))
        return cls(AttributeSet.from_string(left), AttributeSet.from_string(right))

    @classmethod
    def from_simple_form(cls, pair: Tuple[str, str]) -> Self:
        """Make a dependency from a pair of single-character attribute
        strings::

            >>> print(Dependency.from_simple_form(('AC', 'H')))
            A, C -> H
        """
        left, right = pair
        return cls(
            AttributeSet.from_simple_form(left),
            AttributeSet.from_simple_form(right),
        )

    @property
    def left(self) -> AttributeSet:
        """Determinant attributes."""
        return self._left

    @property
    def right(self) -> AttributeSet:
        """Dependent attributes."""
        return self._right

    def as_pair(self) -> Tuple[AttributeSet, AttributeSet]:
        return (self._left, self._right)

    def is_trivial(self) -> bool:
        return self._left == self._right

    def sort_key(self) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        return (self._left.sort_key(), self._right.sort_key())

    def minimize(self, dependencies: 'DependencySet') -> 'Dependency':
        """Return an equivalent dependency whose left side has no
        extraneous attributes under *dependencies*.

        Each attribute of the original left side is tried in canonical
        order: it is dropped if the closure of the remaining attributes
        still contains the whole right side.

        .. code-block::

            >>> deps = DependencySet.from_string('A -> B\\nA, B -> C')
            >>> print(Dependency.from_string('A, B -> C').minimize(deps))
            A -> C
        """
        left = self._left
        for attr in self._left:  # <- Iterate over original (immutable) side.
            reduced = left.difference([attr])
            if reduced.closure(dependencies).issuperset(self._right):
                left = reduced
        return self.__class__(left, self._right)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Dependency):
            return NotImplemented
        return self._left == other._left and self._right == other._right

    def __hash__(self) -> int:
        return hash((Dependency, self._left, self._right))

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._left!r}, {self._right!r})'

    def __str__(self) -> str:
        return f'{self._left} -> {self._right}'


class DependencySet(MutableSet[Dependency]):
    """A set of functional dependencies, iterated in canonical (sorted)
    order.

    Create a DependencySet from its text form, one dependency per line::

        >>> deps = DependencySet.from_string('''
        ...     A, B -> C, D
        ...     C -> E, F
        ...     A -> F
        ...     E -> F
        ... ''')
        >>> print(deps)
        F {
            A -> F
            A, B -> C, D
            C -> E, F
            E -> F
        }

    Adding an equal dependency a second time has no effect.
    """
    __slots__ = ('_dependencies',)
    _dependencies: Set[Dependency]

    def __init__(self, dependencies: Iterable[Dependency] = ()) -> None:
        self._dependencies = {check_type(x, Dependency) for x in dependencies}

    @classmethod
    def _from_iterable(cls, it: Iterable[Dependency]) -> Self:
        # Used by the `collections.abc.Set` mixin operators.
        return cls(it)

    @classmethod
    def from_string(cls, string: str) -> Self:
        """Parse one dependency per line, ignoring blank lines. If any
        line cannot be parsed, a ParseError is raised and no partial
        result is returned.
        """
        dependencies = []
        for line_no, line in enumerate(iter_content_lines(check_type(string, str)), 1):
            try:
                dependencies.append(Dependency.from_string(line))
            except ParseError as e:
                raise ParseError(f'dependency {line_no}: {e}') from e
        return cls(dependencies)

    @classmethod
    def from_simple_form(cls, pairs: Iterable[Tuple[str, str]]) -> Self:
        """Make a dependency set from pairs of single-character
        attribute strings::

            >>> deps = DependencySet.from_simple_form([('A', 'BC'), ('B', 'CE')])
            >>> len(deps)
            2
        """
        return cls(Dependency.from_simple_form(pair) for pair in pairs)

    def __contains__(self, item: object) -> bool:
        return item in self._dependencies

    def __iter__(self) -> Iterator[Dependency]:
        return iter(sorted(self._dependencies, key=Dependency.sort_key))

    def __len__(self) -> int:
        return len(self._dependencies)

    def add(self, value: Dependency) -> None:
        self._dependencies.add(check_type(value, Dependency))

    def discard(self, value: Dependency) -> None:
        self._dependencies.discard(value)

    def copy(self) -> Self:
        return self.__class__(self._dependencies)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({list(self)!r})'

    def __str__(self) -> str:
        lines = ''.join(f'\n    {dependency}' for dependency in self)
        return f'F {{{lines}\n}}'

    def effective_attributes(self) -> AttributeSet:
        """Return every attribute used on either side of any dependency."""
        attributes: Set[Attribute] = set()
        for dependency in self._dependencies:
            attributes.update(dependency.left)
            attributes.update(dependency.right)
        return AttributeSet(attributes)

    def implies(self, dependency: Dependency) -> bool:
        """Return True if *dependency* can be derived from this set."""
        left, right = check_type(dependency, Dependency).as_pair()
        return left.closure(self).issuperset(right)

    def is_equivalent(self, other: Iterable[Dependency]) -> bool:
        """Return True if this set and *other* imply one another."""
        if not isinstance(other, DependencySet):
            other = DependencySet(other)
        return (
            all(self.implies(dependency) for dependency in other)
            and all(other.implies(dependency) for dependency in self)
        )

    @staticmethod
    def _merge_left_sides(dependencies: 'DependencySet') -> 'DependencySet':
        """Combine dependencies with the same left side into a single
        dependency (union rule).
        """
        merged: Dict[AttributeSet, AttributeSet] = defaultdict(AttributeSet)
        for dependency in dependencies:
            left, right = dependency.as_pair()
            merged[left] = merged[left] | right
        return DependencySet(Dependency(left, right) for left, right in merged.items())

    def minimal_cover(self) -> 'DependencySet':
        """Return a minimal (canonical) cover of this dependency set.

        The result is equivalent to the original set but none of its
        dependencies, none of their right-hand attributes, and none
        of their left-hand attributes can be removed without changing
        the closure of some attribute set. Dependencies sharing a left
        side are combined into one.

        .. code-block::

            >>> deps = DependencySet.from_simple_form(
            ...     [('A', 'BC'), ('B', 'CE'), ('A', 'E'), ('AC', 'H'), ('D', 'B')]
            ... )
            >>> print(deps.minimal_cover())
            F {
                A -> B, H
                B -> C, E
                D -> B
            }

        Trivial dependencies are discarded first. After that, passes
        of union-merging, right side reduction, and left side reduction
        repeat until a pass makes no change. Because dependencies are
        visited in canonical order, the same input always gives the
        same cover.
        """
        cover = self.__class__(x for x in self._dependencies if not x.is_trivial())

        pass_count = 0
        changed = True
        while changed:
            pass_count += 1

            merged = self._merge_left_sides(cover)
            changed = merged != cover
            cover = merged

            for dependency in list(cover):  # <- Snapshot, cover changes below.
                cover.discard(dependency)
                left, right = dependency.as_pair()

                # Remove right side attributes derivable from the rest
                # of the cover (excluding the attribute being tested).
                for attr in dependency.right:
                    reduced = right.difference([attr])
                    trial = cover.copy()
                    trial.add(Dependency(left, reduced))
                    if attr in left.closure(trial):
                        right = reduced
                        changed = True

                if not right:
                    continue  # <- Redundant, every attribute was derivable.

                # Remove extraneous left side attributes.
                reduced_dependency = Dependency(left, right)
                trial = cover.copy()
                trial.add(reduced_dependency)
                minimized = reduced_dependency.minimize(trial)
                if minimized != reduced_dependency:
                    changed = True

                cover.add(minimized)

        logger.debug(f'minimal cover found after {pass_count} passes')
        return cover

    def candidate_keys(
        self,
        universe: Optional[Iterable[AttributeLike]] = None,
        max_keys: Optional[int] = None,
    ) -> List[AttributeSet]:
        """Return every candidate key for the *universe* of attributes
        (defaults to the effective attributes of this set).

        A candidate key is a minimal set of attributes whose closure
        contains the entire universe.

        .. code-block::

            >>> deps = DependencySet.from_string('A -> B\\nB -> A\\nC -> D')
            >>> [str(key) for key in deps.candidate_keys()]
            ['B, C', 'A, C']

        The first key is found by minimizing ``universe -> universe``.
        Every known key K is then combined with every dependency
        L -> R to give the superkey ``L | (K - R)``. When no known
        key is contained in this superkey, it is minimized and added
        as a new key. Enumeration ends once every key has been
        combined with every dependency.

        If *max_keys* is given and more keys than that are found, a
        TooManyKeysError is raised.
        """
        if universe is None:
            universe = self.effective_attributes()
        else:
            universe = AttributeSet(universe)
            outside = self.effective_attributes() - universe
            if outside:
                msg = f'dependencies use attributes outside of universe: {outside}'
                raise ValueError(msg)

        if max_keys is not None and max_keys < 1:
            raise ValueError(f'max_keys must be a positive integer, got {max_keys!r}')

        def minimize_key(superkey: AttributeSet) -> AttributeSet:
            return Dependency(superkey, universe).minimize(self).left

        dependencies = list(self)  # <- Fixed canonical order.
        keys = [minimize_key(universe)]

        index = 0
        while index < len(keys):
            key = keys[index]
            for dependency in dependencies:
                superkey = dependency.left | (key - dependency.right)
                if any(known.issubset(superkey) for known in keys):
                    continue

                keys.append(minimize_key(superkey))
                if max_keys is not None and len(keys) > max_keys:
                    msg = f'found more than {max_keys} candidate keys'
                    raise TooManyKeysError(msg)
            index += 1

        logger.debug(f'found {len(keys)} candidate keys')
        return keys
