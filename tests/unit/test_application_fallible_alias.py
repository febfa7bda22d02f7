"""Unit tests for result-shaped aliases.

Tests cover:
- Predicates, accessors and predicate combinators
- map / map_err
- unwrap, unwrap_<err>, unwrap_or, unwrap_or_else
- Conversion to and from Success / Failure
"""

import pytest

from enumizer import Failure, GenerationError, Success, UnwrapPanic, alias_result
from enumizer.core.enums import ErrorCode

Response = alias_result("Response", "Ok", "Err")
Fetch = alias_result("Fetch", "Loaded", "Broken")


@pytest.mark.unit
class TestResultSurface:
    """Test the generated method surface."""

    def test_predicates(self):
        """Test is_<ok> and is_<err>."""
        assert Response.Ok(1).is_ok()
        assert not Response.Ok(1).is_err()
        assert Response.Err("e").is_err()

    def test_accessors(self):
        """Test as_<v> for both variants."""
        assert Fetch.Loaded(1).as_loaded() == 1
        assert Fetch.Loaded(1).as_broken() is None
        assert Fetch.Broken("e").as_broken() == "e"
        assert Fetch.Broken("e").as_loaded() is None

    def test_predicate_combinators(self):
        """Test is_<ok>_and and is_<err>_and."""
        assert Fetch.Loaded(3).is_loaded_and(lambda n: n == 3)
        assert not Fetch.Broken(3).is_loaded_and(lambda n: True)
        assert Fetch.Broken("timeout").is_broken_and(lambda e: "time" in e)

    def test_map_and_map_err(self):
        """Test each transform touches only its own side."""
        assert Fetch.Loaded(2).map(lambda n: n * 10) == Fetch.Loaded(20)
        assert Fetch.Broken("e").map(lambda n: n * 10) == Fetch.Broken("e")
        assert Fetch.Broken("e").map_err(str.upper) == Fetch.Broken("E")
        assert Fetch.Loaded(2).map_err(str.upper) == Fetch.Loaded(2)


@pytest.mark.unit
class TestResultExtraction:
    """Test extractors and fallbacks."""

    def test_unwrap(self):
        """Test unwrap on the success variant."""
        assert Response.Ok(5).unwrap() == 5

    def test_unwrap_on_failure_panics(self):
        """Test unwrap on the failure variant is fatal."""
        with pytest.raises(UnwrapPanic, match="expected `Ok`"):
            Response.Err("e").unwrap()

    def test_unwrap_err(self):
        """Test the failure-side extractor."""
        assert Fetch.Broken("e").unwrap_broken() == "e"
        with pytest.raises(UnwrapPanic) as exc_info:
            Fetch.Loaded(1).unwrap_broken()

        assert exc_info.value.method == "unwrap_broken"
        assert exc_info.value.actual == "Loaded"

    def test_unwrap_or(self):
        """Test the default replaces the failure payload."""
        assert Response.Ok(5).unwrap_or(0) == 5
        assert Response.Err("e").unwrap_or(0) == 0

    def test_unwrap_or_else_receives_error(self):
        """Test the fallback is computed from the failure payload."""
        assert Response.Err("abc").unwrap_or_else(len) == 3
        assert Response.Ok(1).unwrap_or_else(len) == 1


@pytest.mark.unit
class TestResultConversions:
    """Test conversion to and from the canonical result."""

    def test_from_result(self):
        """Test Success and Failure map to the corresponding variant."""
        assert Fetch.from_result(Success(value=1)) == Fetch.Loaded(1)
        assert Fetch.from_result(Failure(error="e")) == Fetch.Broken("e")

    def test_from_result_rejects_other_values(self):
        """Test non-result values are a type error."""
        with pytest.raises(TypeError, match="Fetch.from_result"):
            Fetch.from_result(1)

    def test_to_result(self):
        """Test each variant maps back to its canonical counterpart."""
        assert Fetch.Loaded(1).to_result() == Success(value=1)
        assert Fetch.Broken("e").to_result() == Failure(error="e")

    @pytest.mark.parametrize(
        "canonical", [Success(value=None), Success(value=0), Failure(error=None)]
    )
    def test_canonical_round_trip(self, canonical):
        """Test canonical -> alias -> canonical is the identity."""
        assert Fetch.from_result(canonical).to_result() == canonical

    def test_alias_round_trip_keeps_payload_identity(self):
        """Test alias -> canonical -> alias carries the same payload object."""
        payload = ["shared"]

        restored = Fetch.from_result(Fetch.Broken(payload).to_result())

        assert restored.as_broken() is payload


@pytest.mark.unit
class TestResultMutableAccess:
    """Test as_<v>_mut on both payload variants."""

    def test_success_payload_writes_through(self):
        """Test as_<ok>_mut updates the success payload in place."""
        value = Fetch.Loaded(1)

        value.as_loaded_mut().set(2)

        assert value.as_loaded() == 2

    def test_failure_payload_writes_through(self):
        """Test as_<err>_mut updates the failure payload in place."""
        value = Fetch.Broken("timeout")

        value.as_broken_mut().update(str.upper)

        assert value.unwrap_broken() == "TIMEOUT"

    def test_other_variant_yields_none(self):
        """Test each mutable accessor is None for the other variant."""
        assert Fetch.Broken("e").as_loaded_mut() is None
        assert Fetch.Loaded(1).as_broken_mut() is None


@pytest.mark.unit
class TestResultMapIdentity:
    """Test identity transforms leave values unchanged."""

    @pytest.mark.parametrize("value", [Fetch.Loaded(1), Fetch.Broken("e")])
    @pytest.mark.parametrize("transform", ["map", "map_err"])
    def test_identity(self, value, transform):
        """Test map/map_err with the identity function keep variant and payload."""
        mapped = getattr(value, transform)(lambda payload: payload)

        assert mapped == value
        assert type(mapped) is type(value)


@pytest.mark.unit
class TestResultNameCollisions:
    """Test variant names that would replace fixed members."""

    @pytest.mark.parametrize("err_variant", ["Or", "Or_else"])
    def test_failure_variant_replacing_fallback(self, err_variant):
        """Test unwrap_<err> cannot become unwrap_or / unwrap_or_else."""
        with pytest.raises(GenerationError) as exc_info:
            alias_result("Resp", "Ok", err_variant)

        assert exc_info.value.code == ErrorCode.NAME_COLLISION
