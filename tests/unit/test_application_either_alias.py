"""Unit tests for either-shaped aliases.

Tests cover:
- Symmetric transforms and extractors
- Absence of fallback extraction and short-circuit members
- Conversion to and from Left / Right
"""

import pytest

from enumizer import Left, Right, UnwrapPanic, alias_either

Route = alias_either("Route", "Local", "Remote")


@pytest.mark.unit
class TestEitherSurface:
    """Test the generated method surface."""

    def test_predicates_and_accessors(self):
        """Test both sides expose is_* and as_*."""
        assert Route.Local("disk").is_local()
        assert Route.Remote("s3").is_remote()
        assert Route.Local("disk").as_local() == "disk"
        assert Route.Local("disk").as_remote() is None

    def test_side_transforms(self):
        """Test map_<v> only touches its own side."""
        assert Route.Local(1).map_local(lambda n: n + 1) == Route.Local(2)
        assert Route.Remote(1).map_local(lambda n: n + 1) == Route.Remote(1)
        assert Route.Remote("a").map_remote(str.upper) == Route.Remote("A")

    def test_side_extractors(self):
        """Test unwrap_<v> returns the payload of its own side."""
        assert Route.Local(1).unwrap_local() == 1
        assert Route.Remote(2).unwrap_remote() == 2

    def test_side_extractor_on_other_side_panics(self):
        """Test unwrap_<v> on the other side is fatal."""
        with pytest.raises(UnwrapPanic) as exc_info:
            Route.Remote(2).unwrap_local()

        assert str(exc_info.value) == (
            "called `unwrap_local()` on a `Remote` value, expected `Local`"
        )

    @pytest.mark.parametrize(
        "name", ["unwrap", "unwrap_or", "unwrap_or_else", "map", "branch", "propagate"]
    )
    def test_no_privileged_side(self, name):
        """Test members that favour one side are not generated."""
        assert not hasattr(Route, name)


@pytest.mark.unit
class TestEitherConversions:
    """Test conversion to and from the canonical either."""

    def test_from_either(self):
        """Test Left and Right map to the corresponding variant."""
        assert Route.from_either(Left(value=1)) == Route.Local(1)
        assert Route.from_either(Right(value=2)) == Route.Remote(2)

    def test_from_either_rejects_other_values(self):
        """Test non-either values are a type error."""
        with pytest.raises(TypeError, match="expects Left or Right"):
            Route.from_either("left")

    def test_to_either(self):
        """Test each variant maps back to its canonical counterpart."""
        assert Route.Local(1).to_either() == Left(value=1)
        assert Route.Remote(None).to_either() == Right(value=None)

    @pytest.mark.parametrize("canonical", [Left(value=None), Right(value=[1])])
    def test_canonical_round_trip(self, canonical):
        """Test canonical -> alias -> canonical is the identity."""
        assert Route.from_either(canonical).to_either() == canonical


@pytest.mark.unit
class TestEitherMutableAccess:
    """Test as_<v>_mut on both sides."""

    def test_left_payload_writes_through(self):
        """Test as_<left>_mut updates the left payload in place."""
        value = Route.Local("disk")

        value.as_local_mut().set("ssd")

        assert value.unwrap_local() == "ssd"

    def test_right_payload_writes_through(self):
        """Test as_<right>_mut updates the right payload in place."""
        value = Route.Remote(["s3"])

        value.as_remote_mut().update(lambda items: items + ["gcs"])

        assert value.as_remote() == ["s3", "gcs"]

    def test_other_side_yields_none(self):
        """Test each mutable accessor is None for the other side."""
        assert Route.Remote(1).as_local_mut() is None
        assert Route.Local(1).as_remote_mut() is None


@pytest.mark.unit
class TestEitherMapIdentity:
    """Test identity transforms leave values unchanged."""

    @pytest.mark.parametrize("value", [Route.Local(1), Route.Remote("r")])
    @pytest.mark.parametrize("transform", ["map_local", "map_remote"])
    def test_identity(self, value, transform):
        """Test map_<v> with the identity function keeps variant and payload."""
        mapped = getattr(value, transform)(lambda payload: payload)

        assert mapped == value
        assert type(mapped) is type(value)
