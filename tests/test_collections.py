import copy

from objectsize.collections import IdentitySet


def test_membership_is_by_identity():
    a, b = [], []
    members = IdentitySet([a])
    assert a in members
    assert b not in members
    members.add(b)
    assert len(members) == 2


def test_equality_hooks_are_not_called():
    class Loud:
        def __eq__(self, other):
            raise AssertionError("__eq__ called")

        def __hash__(self):
            raise AssertionError("__hash__ called")

    a, b = Loud(), Loud()
    members = IdentitySet([a, b, a])
    assert len(members) == 2
    assert a in members


def test_iteration_order_and_discard():
    a, b, c = {}, {}, {}
    members = IdentitySet([a, b, c])
    members.discard(b)
    members.discard(b)
    assert [m is e for m, e in zip(members, [a, c])] == [True, True]
    assert len(members) == 2


def test_copy_is_independent():
    a, b = [], []
    members = IdentitySet([a])
    other = copy.copy(members)
    other.add(b)
    assert b not in members
    assert len(other) == 2


def test_set_operations():
    a, b = [], []
    union = IdentitySet([a]) | IdentitySet([b])
    assert isinstance(union, IdentitySet)
    assert len(union) == 2


def test_repr():
    assert repr(IdentitySet([1])) == 'IdentitySet([1])'
