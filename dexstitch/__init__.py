"""DexStitch layout — arrange garment pattern pieces on a fabric roll.

Subpackages:
  pattern   Pattern piece dataclasses, parsing and validation.
  layout    Nesting engine (ranking, orientation, candidates, collision).
  web       FastAPI surface over the layout engine.
"""
