"""Data model for a documented member function."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FunctionInfo:
    """A public function and its resolved description."""

    name: str
    description: str
