"""Application layer: normalization, emission and the generation pipeline."""
