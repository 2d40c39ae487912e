from __future__ import annotations

from pydantic import BaseModel, Field

from core.enums.resource import Resource


class CellMetadata(BaseModel):
    """Per-cell state for buildings with stateful behaviour.

    - stored_resource: a resource held on a Cottage under the Statue of the
      Bondmaker; it satisfies building patterns as if it lay on the square
    - reserved_resource: the resource set aside on a Factory or a Bank
    - stored_resources: the Warehouse's stack (up to three)
    - saved_score: a score frozen at construction time (Shrine of the Elder Tree)
    - watch_buildings: buildings waiting on Opaleye's Watch

    Extra keys are kept so the surrounding game layer can attach its own data.
    """

    stored_resource: Resource | None = None
    reserved_resource: Resource | None = None
    stored_resources: list[Resource] = Field(default_factory=list)
    saved_score: int | None = None
    watch_buildings: list[str] = Field(default_factory=list)

    model_config = {
        "extra": "allow",
    }
