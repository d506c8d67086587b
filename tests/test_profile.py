import pytest

from selector import (
    ConcurrencyMode,
    ContainerShape,
    InvalidArgumentError,
    UsageProfile,
    recommend,
)


class TestUsageProfile:

    def test_defaults(self):
        profile = UsageProfile()
        assert profile.allow_duplicates is True
        assert profile.capacity_hint == 0
        assert profile.concurrency_required is False

    def test_frozen(self):
        profile = UsageProfile()
        with pytest.raises(AttributeError):
            profile.allow_duplicates = False

    def test_value_semantics(self):
        assert UsageProfile(capacity_hint=8) == UsageProfile(capacity_hint=8)
        assert hash(UsageProfile(capacity_hint=8)) == hash(UsageProfile(capacity_hint=8))

    @pytest.mark.parametrize("hint", [-1, 1.5, True, "16"])
    def test_bad_capacity_hint(self, hint):
        with pytest.raises(InvalidArgumentError):
            UsageProfile(capacity_hint=hint)

    def test_non_bool_flag(self):
        with pytest.raises(InvalidArgumentError):
            UsageProfile(queue_semantics=1)

    def test_conflict_is_constructible(self):
        profile = UsageProfile(preserve_insertion_order=True, sort_by_comparator=True)
        assert profile.has_conflicting_order is True

    def test_from_dict(self):
        profile = UsageProfile.from_dict({"allow_duplicates": False, "capacity_hint": 32})
        assert profile == UsageProfile(allow_duplicates=False, capacity_hint=32)

    def test_from_dict_unknown_field(self):
        with pytest.raises(InvalidArgumentError, match="thread_safe"):
            UsageProfile.from_dict({"thread_safe": True})

    def test_to_dict_round_trip(self):
        profile = UsageProfile(queue_semantics=True, capacity_hint=4)
        assert UsageProfile.from_dict(profile.to_dict()) == profile


class TestContainerRecommendation:

    def test_str(self):
        assert str(recommend(UsageProfile(insert_or_remove_at_front=True))) == "linked/insertion/none"
        assert str(recommend(UsageProfile(concurrency_required=True))) == "sequential/insertion/lock-wrapped"

    def test_python_type_hints(self):
        assert recommend(UsageProfile()).python_type == "list"
        assert recommend(UsageProfile(
            insert_or_remove_at_front=True, queue_semantics=True
        )).python_type == "collections.deque"
        assert recommend(UsageProfile(allow_duplicates=False)).python_type == "set"
        assert "threading.Lock" in recommend(UsageProfile(concurrency_required=True)).python_type

    def test_to_dict(self):
        data = recommend(UsageProfile(allow_duplicates=False, sort_by_comparator=True)).to_dict()
        assert data["shape"] == ContainerShape.TREE.value
        assert data["ordering"] == "sorted"
        assert data["concurrency"] == ConcurrencyMode.NONE.value
        assert data["rule"] == "comparator-sorted-set"
        assert data["notes"] == []

    def test_frozen(self):
        rec = recommend(UsageProfile())
        with pytest.raises(AttributeError):
            rec.shape = ContainerShape.TREE


class TestFromDictKeys:

    def test_non_string_key(self):
        with pytest.raises(InvalidArgumentError, match="1"):
            UsageProfile.from_dict({1: True, "queue_semantics": True})
