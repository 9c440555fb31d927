"""Core evaluation engines.

Responsibilities:
  - Provide protection, progression and participation evaluators and their result types.
  - Must not perform I/O; external signals arrive through injected ports.
"""
