"""Input schemas."""

from enumizer.schemas.spec_schemas import RawSpecification, SpecificationDocument

__all__ = ["RawSpecification", "SpecificationDocument"]
