from collections import deque

import pytest

from containers import ContainerPool, NullRejectingDeque, OrderedSet
from selector import InvalidArgumentError, UnsupportedContainerError, UsageProfile, recommend
from typesafe import contains_element, remove_all, remove_element, retain_all


@pytest.fixture(autouse=True)
def clean_pool():
    yield
    ContainerPool.clear()


class TestContainerPool:

    @pytest.mark.parametrize("profile, expected", [
        (UsageProfile(random_access_by_position=True), list),
        (UsageProfile(insert_or_remove_at_front=True, queue_semantics=True), NullRejectingDeque),
        (UsageProfile(insert_or_remove_at_front=True, nulls_supported=True), deque),
        (UsageProfile(), list),
        (UsageProfile(allow_duplicates=False, preserve_insertion_order=True), OrderedSet),
        (UsageProfile(allow_duplicates=False), set),
        (UsageProfile(concurrency_required=True), list),
        (UsageProfile(allow_duplicates=False, concurrency_required=True), set),
    ])
    def test_builtin_defaults(self, profile, expected):
        assert type(ContainerPool.create_for(profile)) is expected

    def test_fresh_instance_each_call(self):
        rec = recommend(UsageProfile())
        assert ContainerPool.create(rec) is not ContainerPool.create(rec)

    @pytest.mark.parametrize("profile", [
        UsageProfile(allow_duplicates=False, sort_by_comparator=True),
        UsageProfile(concurrency_required=True, more_reads_than_writes=True),
        UsageProfile(allow_duplicates=False, concurrency_required=True, sort_by_comparator=True),
    ])
    def test_unregistered_combination(self, profile):
        with pytest.raises(UnsupportedContainerError):
            ContainerPool.create_for(profile)

    def test_register_for(self):
        rec = recommend(UsageProfile(allow_duplicates=False, sort_by_comparator=True))
        ContainerPool.register_for(rec, list)
        assert ContainerPool.create(rec) == []
        assert rec.key in ContainerPool.registered()

    def test_clear_restores_defaults(self):
        rec = recommend(UsageProfile(allow_duplicates=False, sort_by_comparator=True))
        ContainerPool.register_for(rec, list)
        ContainerPool.clear()
        with pytest.raises(UnsupportedContainerError):
            ContainerPool.create(rec)
        assert type(ContainerPool.create_for(UsageProfile())) is list

    def test_verbose(self, capsys, monkeypatch):
        monkeypatch.setattr(ContainerPool, "_verbose", True)
        ContainerPool.create_for(UsageProfile(allow_duplicates=False))
        assert "[pool] hashed/none/none -> set" in capsys.readouterr().out


class TestNullRejectingDeque:

    def queue(self):
        return ContainerPool.create_for(
            UsageProfile(insert_or_remove_at_front=True, queue_semantics=True)
        )

    @pytest.mark.parametrize("insert", [
        lambda q: q.append(None),
        lambda q: q.appendleft(None),
        lambda q: q.extend([1, None]),
        lambda q: q.extendleft([None]),
        lambda q: q.insert(0, None),
    ])
    def test_none_rejected(self, insert):
        queue = self.queue()
        queue.append(1)
        with pytest.raises(InvalidArgumentError):
            insert(queue)
        assert list(queue) == [1]

    def test_setitem_and_iadd_rejected(self):
        queue = NullRejectingDeque([1])
        with pytest.raises(InvalidArgumentError):
            queue[0] = None
        with pytest.raises(InvalidArgumentError):
            queue += [None]
        assert list(queue) == [1]

    def test_constructor_rejects_none(self):
        with pytest.raises(InvalidArgumentError):
            NullRejectingDeque([1, None])

    def test_behaves_as_deque(self):
        queue = self.queue()
        queue.extend([1, 2])
        queue.appendleft(0)
        assert queue.popleft() == 0
        assert list(queue) == [1, 2]

    def test_linked_fallback_still_accepts_none(self):
        linked = ContainerPool.create_for(
            UsageProfile(insert_or_remove_at_front=True, nulls_supported=True)
        )
        linked.append(None)
        assert list(linked) == [None]


class TestOrderedSet:

    def ordered(self):
        return ContainerPool.create_for(
            UsageProfile(allow_duplicates=False, preserve_insertion_order=True)
        )

    def test_keeps_insertion_order_and_uniqueness(self):
        items = self.ordered()
        for value in ("b", "a", "b", "c"):
            items.add(value)
        assert list(items) == ["b", "a", "c"]
        assert len(items) == 3

    def test_typed_access_round_trip(self):
        items = self.ordered()
        items |= ["a", "b", "c", "d"]
        assert contains_element(items, "a") is True
        assert remove_element(items, "a") is True
        assert remove_element(items, "a") is False
        assert remove_all(items, ["d"]) is True
        assert retain_all(items, {"c"}) is True
        assert list(items) == ["c"]

    def test_set_comparison(self):
        assert OrderedSet([1, 2]) == {2, 1}
        assert repr(OrderedSet([2, 1])) == "OrderedSet([2, 1])"
