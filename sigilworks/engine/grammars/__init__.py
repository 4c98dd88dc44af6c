"""Paradigm grammars. Importing this package registers one grammar per paradigm."""

from sigilworks.engine.grammars import chaos, cybernetic, hermetic, shamanic

__all__ = ["chaos", "cybernetic", "hermetic", "shamanic"]
