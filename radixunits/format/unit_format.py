from typing import Dict, Optional

import pint

from ..units import UnitLike, as_unit


class SimpleUnitFormat:
    """
    Renders unit symbols.

    A unit with a registered label is rendered as that label, any other unit
    with pint's format ``spec`` (abbreviated symbols by default).
    """

    _instance: Optional['SimpleUnitFormat'] = None

    def __init__(self, labels: Optional[Dict[UnitLike, str]] = None, spec: str = '~'):
        self.spec = spec
        self._labels: Dict[pint.Unit, str] = {}
        for unit, text in (labels or {}).items():
            self.label(unit, text)

    @classmethod
    def get_instance(cls) -> 'SimpleUnitFormat':
        """Shared instance used by default format options."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def label(self, unit: UnitLike, text: str) -> 'SimpleUnitFormat':
        """Render ``unit`` as ``text`` from now on."""
        if not text:
            raise ValueError("Unit label must not be empty")
        self._labels[as_unit(unit)] = text
        return self

    def format(self, unit: UnitLike) -> str:
        unit = as_unit(unit)
        if unit in self._labels:
            return self._labels[unit]
        return format(unit, self.spec)

    __call__ = format
