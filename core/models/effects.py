from __future__ import annotations

from pydantic import BaseModel, Field

from core.enums.effect_type import EffectType
from core.enums.resource import Resource


class BuildingEffect(BaseModel):
    """A non-scoring ability attached to a building.

    - effect_type: which ability this is
    - capacity: how many resources the building can hold (0 if it holds none)
    - description: rules text shown to players
    """

    effect_type: EffectType
    capacity: int = Field(default=0, ge=0)
    description: str = ""

    model_config = {"frozen": True}

    def can_swap(self, stored: Resource | None, incoming: Resource) -> bool:
        """Factory rule: the named resource can be swapped when it equals the stored one."""
        return self.effect_type == EffectType.FACTORY and stored is not None and stored == incoming
