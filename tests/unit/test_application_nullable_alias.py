"""Unit tests for option-shaped aliases.

Tests cover:
- Construction, predicates and accessors
- Mutable payload access
- Transforms, extraction and fallbacks
- Conversion to and from ``T | None``
- Layout parity with the canonical shape and the interned empty variant
"""

import sys

import pytest

from enumizer import GenerationError, Success, UnwrapPanic, alias_option
from enumizer.core.enums import ErrorCode

Lookup = alias_option("Lookup", "Missing", "Found")
Sampler = alias_option("Sampler", "Leader", "Receiver")


@pytest.mark.unit
class TestConstruction:
    """Test variant construction."""

    def test_variants_are_attached_to_the_type(self):
        """Test variants are reachable as attributes of the alias."""
        assert Lookup.Found.__qualname__ == "Lookup.Found"
        assert Lookup.Missing.__name__ == "Missing"
        assert issubclass(Lookup.Found, Lookup)
        assert issubclass(Lookup.Missing, Lookup)

    def test_base_cannot_be_instantiated(self):
        """Test only variants produce values."""
        with pytest.raises(TypeError, match="Lookup.Missing or Lookup.Found"):
            Lookup()

    def test_empty_variant_is_interned(self):
        """Test every empty value is the same object."""
        assert Lookup.Missing() is Lookup.Missing()

    def test_empty_variant_is_per_alias(self):
        """Test two aliases do not share an empty instance."""
        assert Lookup.Missing() is not Sampler.Leader()

    @pytest.mark.parametrize("payload", [7, object()], ids=["small-int", "object"])
    def test_layout_matches_canonical_shape(self, payload):
        """Test a populated value costs the same as the one-slot canonical box."""
        assert sys.getsizeof(Lookup.Found(payload)) == sys.getsizeof(
            Success(value=payload)
        )

    def test_empty_variant_costs_no_per_value_storage(self):
        """Test empty values share one payload-free instance."""
        shared = Lookup.Missing()
        produced = [
            Lookup.Missing(),
            Lookup.from_optional(None),
            Lookup.Missing().map(lambda n: n),
        ]

        assert all(value is shared for value in produced)
        assert sys.getsizeof(shared) < sys.getsizeof(Lookup.Found(None))

    def test_values_have_no_instance_dict(self):
        """Test values are slotted."""
        assert not hasattr(Lookup.Found(1), "__dict__")

    def test_structural_match(self):
        """Test variants destructure with class patterns."""
        match Lookup.Found(7):
            case Lookup.Missing():
                found = None
            case Lookup.Found(value):
                found = value

        assert found == 7


@pytest.mark.unit
class TestPredicatesAndAccessors:
    """Test is_*, as_* and as_*_mut."""

    def test_predicates(self):
        """Test exactly one predicate holds."""
        assert Sampler.Receiver(42).is_receiver() is True
        assert Sampler.Receiver(42).is_leader() is False
        assert Sampler.Leader().is_leader() is True
        assert Sampler.Leader().is_receiver() is False

    def test_accessor(self):
        """Test as_<v> yields the payload or None."""
        assert Sampler.Receiver(42).as_receiver() == 42
        assert Sampler.Leader().as_receiver() is None

    def test_empty_variant_has_no_accessor(self):
        """Test only payload variants get accessors."""
        assert not hasattr(Sampler, "as_leader")

    def test_mutable_accessor_writes_through(self):
        """Test as_<v>_mut mutates the payload in place."""
        value = Lookup.Found(1)

        ref = value.as_found_mut()
        ref.set(5)

        assert value.as_found() == 5
        assert ref.update(lambda n: n * 2) == 10
        assert value.as_found() == 10
        assert ref == 10

    def test_mutable_accessor_on_other_variant(self):
        """Test as_<v>_mut yields None for the other variant."""
        assert Lookup.Missing().as_found_mut() is None

    def test_predicate_combinators(self):
        """Test is_<some>_and and is_<none>_or."""
        assert Lookup.Found(4).is_found_and(lambda n: n > 3) is True
        assert Lookup.Found(2).is_found_and(lambda n: n > 3) is False
        assert Lookup.Missing().is_found_and(lambda n: True) is False
        assert Lookup.Missing().is_missing_or(lambda n: False) is True
        assert Lookup.Found(2).is_missing_or(lambda n: n == 2) is True


@pytest.mark.unit
class TestTransformsAndExtraction:
    """Test map and the unwrap family."""

    def test_map(self):
        """Test map applies to the populated variant only."""
        assert Lookup.Found(2).map(lambda n: n + 1) == Lookup.Found(3)
        assert Lookup.Missing().map(lambda n: n + 1) is Lookup.Missing()

    @pytest.mark.parametrize("value", [Lookup.Found(1), Lookup.Missing()])
    def test_map_identity(self, value):
        """Test map with the identity function keeps variant and payload."""
        mapped = value.map(lambda payload: payload)

        assert mapped == value
        assert type(mapped) is type(value)

    def test_unwrap(self):
        """Test unwrap returns the payload."""
        assert Lookup.Found("x").unwrap() == "x"

    def test_unwrap_on_empty_panics(self):
        """Test unwrap on the empty variant is fatal and names both variants."""
        with pytest.raises(UnwrapPanic) as exc_info:
            Lookup.Missing().unwrap()

        assert str(exc_info.value) == (
            "called `unwrap()` on a `Missing` value, expected `Found`"
        )
        assert exc_info.value.actual == "Missing"
        assert exc_info.value.expected == "Found"

    def test_unwrap_panic_is_not_an_exception(self):
        """Test except Exception does not swallow the panic."""
        assert not issubclass(UnwrapPanic, Exception)

    def test_unwrap_or(self):
        """Test the default is returned for the empty variant."""
        assert Lookup.Found(1).unwrap_or(0) == 1
        assert Lookup.Missing().unwrap_or(0) == 0

    def test_unwrap_or_else_is_lazy(self):
        """Test the producer only runs for the empty variant."""
        calls = []

        def producer():
            calls.append(1)
            return 9

        assert Lookup.Found(1).unwrap_or_else(producer) == 1
        assert calls == []
        assert Lookup.Missing().unwrap_or_else(producer) == 9
        assert calls == [1]


@pytest.mark.unit
class TestConversions:
    """Test conversion to and from ``T | None``."""

    def test_from_optional(self):
        """Test None maps to the empty variant."""
        assert Lookup.from_optional(None) is Lookup.Missing()
        assert Lookup.from_optional(3) == Lookup.Found(3)

    def test_falsy_payload_is_still_present(self):
        """Test 0 and empty strings are populated values."""
        assert Lookup.from_optional(0).is_found()
        assert Lookup.from_optional("").is_found()

    def test_to_optional(self):
        """Test the populated variant yields its payload."""
        assert Lookup.Found(3).to_optional() == 3
        assert Lookup.Missing().to_optional() is None

    @pytest.mark.parametrize("value", [None, 0, "text", [1, 2]])
    def test_canonical_round_trip(self, value):
        """Test canonical -> alias -> canonical is the identity."""
        assert Lookup.from_optional(value).to_optional() == value


@pytest.mark.unit
class TestOptionRejections:
    """Test specification errors surfaced by alias_option."""

    def test_duplicate_variants(self):
        """Test identical variant names are rejected."""
        with pytest.raises(GenerationError) as exc_info:
            alias_option("Twin", "Same", "Same")

        assert exc_info.value.code == ErrorCode.DUPLICATE_VARIANT
