"""Core package: enums, errors, canonical shapes, configuration, container."""
