"""Family emitters and the feature composer."""

from enumizer.application.emitters.base import EmittedAlias, FamilyEmitter
from enumizer.application.emitters.either import EitherEmitter
from enumizer.application.emitters.fallible import FallibleEmitter
from enumizer.application.emitters.features import FeatureComposer
from enumizer.application.emitters.nullable import NullableEmitter

__all__ = [
    "EmittedAlias",
    "FamilyEmitter",
    "NullableEmitter",
    "FallibleEmitter",
    "EitherEmitter",
    "FeatureComposer",
]
