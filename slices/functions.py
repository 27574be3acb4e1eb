"""
generic helpers over ordered, indexable sequences.

every helper comes in two flavours: a value variant that uses the natural
`==` of the elements, and a `_func` variant that takes a caller-supplied
predicate. the value variants are thin wrappers over the `_func` ones.
none of these mutate their input and none of them cache anything.
"""
from .types import *


# --- equality ---

def equal(s1: Sequence[T], s2: Sequence[T]) -> bool:
    """reports whether two sequences have the same length and equal elements"""
    return equal_func(s1, s2, lambda left, right: left == right)


def equal_func(s1: Sequence[T1], s2: Sequence[T2], f: EqualityComparer[T1, T2]) -> bool:
    """
    reports whether two sequences are equal using f on each pair of elements.
    f is called in index order and never once the lengths differ;
    the first pair it rejects ends the comparison.
    """
    if len(s1) != len(s2):
        return False

    for i, e in enumerate(s1):
        if not f(e, s2[i]):
            return False

    return True


# --- search ---

def index(s: Sequence[T], v: T) -> int:
    """index of the first occurrence of v in s, or -1 if not present"""
    return index_func(s, lambda e: e == v)


def index_func(s: Sequence[T], f: Predicate[T]) -> int:
    """index of the first element satisfying f, or -1 if none do"""
    for i, e in enumerate(s):
        if f(e):
            return i

    return -1


def contains(s: Sequence[T], v: T) -> bool:
    """reports whether v is present in s"""
    return index(s, v) != -1


def contains_func(s: Sequence[T], f: Predicate[T]) -> bool:
    """reports whether any element of s satisfies f"""
    return index_func(s, f) != -1


# --- deduplication ---

def compact(s: Sequence[T]) -> List[T]:
    """
    drops every element equal to one kept earlier, keeping first occurrences.
    ex: [2, 3, 4, 2, 1, 5, 1] -> [2, 3, 4, 1, 5]
    """
    return compact_func(s, lambda left, right: left == right)


def compact_func(s: Sequence[T], f: EqualityComparer[T, T]) -> List[T]:
    """
    like compact, but uses f to decide whether two elements are equal.

    f is always called as f(candidate, kept), never the other way round, so a
    non-symmetric f gives results that depend on that order. elements need
    not be hashable: each candidate is checked against the kept list in turn.
    """
    result = []

    for candidate in s:
        found = False

        for kept in result:
            if f(candidate, kept):
                found = True
                break

        if not found:
            result.append(candidate)

    return result


# --- transformation ---

def map_(s: Sequence[T], f: Selector[T, U]) -> List[U]:
    """new list holding f(e) for every element of s, in order"""
    return [f(e) for e in s]


def filter_(s: Sequence[T], f: Predicate[T]) -> List[T]:
    """new list holding the elements of s that satisfy f, in order"""
    return [e for e in s if f(e)]
