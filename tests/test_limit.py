import pytest
from lazy import Range


class TestLimit:
    """Test the limit stage and construction-time validation"""

    def test_limit_zero_is_empty(self):
        """Test that limit(0) yields nothing and never touches the upstream"""
        calls = []

        def seed():
            calls.append(1)
            return 1

        assert Range.from_(seed).limit(0).materialize() == []
        assert calls == [], "limit(0) should not pull from the upstream"

    def test_limit_does_not_overpull(self):
        """Test that limit(n) pulls exactly n upstream elements"""
        calls = []

        def seed():
            calls.append(1)
            return len(calls)

        result = Range.from_(seed).limit(4).materialize()
        assert result == [1, 2, 3, 4]
        assert len(calls) == 4, f"Expected 4 upstream pulls, got {len(calls)}"

    @pytest.mark.parametrize("n", [0, 1, 3, 5, 8, 100])
    def test_limit_yields_min_of_n_and_available(self, n):
        """Test that limit(n) over a finite source yields min(n, len) in order"""
        source = [9, 7, 5, 3, 1]
        result = Range(source).limit(n).to_list()
        assert result == source[:min(n, len(source))]

    def test_limit_on_endless_source(self):
        """Test that limit bounds an infinite upstream"""
        result = Range.from_(lambda: 0.5).limit(1000).materialize()
        assert len(result) == 1000
        assert set(result) == {0.5}

    def test_nested_limits_take_smallest(self):
        """Test that the tighter of two limits wins"""
        assert Range(range(10)).limit(7).limit(3).to_list() == [0, 1, 2]
        assert Range(range(10)).limit(3).limit(7).to_list() == [0, 1, 2]

    def test_negative_limit_fails_at_call_site(self):
        """Test that a negative count is rejected before any iteration"""
        with pytest.raises(ValueError, match=">= 0"):
            Range(range(3)).limit(-1)

    @pytest.mark.parametrize("bad", [1.5, "3", None, True])
    def test_non_integer_limit_rejected(self, bad):
        """Test that limit() only accepts ints"""
        with pytest.raises(TypeError):
            Range(range(3)).limit(bad)

    def test_negative_skip_rejected(self):
        with pytest.raises(ValueError):
            Range(range(3)).skip(-2)

    def test_batch_size_must_be_positive(self):
        with pytest.raises(ValueError):
            Range(range(3)).batch(0)

    def test_non_callable_seed_rejected(self):
        """Test that from_ fails immediately on a non-callable"""
        with pytest.raises(TypeError, match="callable"):
            Range.from_(0.5)

    def test_non_callable_factory_rejected(self):
        with pytest.raises(TypeError):
            Range.from_factory([1, 2, 3])

    def test_non_callable_transform_rejected(self):
        with pytest.raises(TypeError):
            Range(range(3)).map(10)
