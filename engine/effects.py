"""Board operations behind the building effects that hold resources.

Factory and Bank keep one resource each, the Warehouse keeps a stack of up
to three, and under the Statue of the Bondmaker every Cottage can keep one.
Every function validates before it writes, so a rejected call leaves the
board as it was.
"""

from __future__ import annotations

from core.enums.building_id import BuildingId
from core.enums.effect_type import EffectType
from core.enums.resource import Resource
from core.errors import InvalidStorage, StorageFull
from core.models.building import BuildingDefinition
from core.models.cell_metadata import CellMetadata
from core.models.registry import BuildingRegistry
from core.models.town_board import TownBoard

SINGLE_SLOT_EFFECTS = (EffectType.FACTORY, EffectType.BANK)


def _definition_at(board: TownBoard, registry: BuildingRegistry, row: int, col: int) -> BuildingDefinition | None:
    return registry.get(board.cell(row, col))


def _effect_present(board: TownBoard, registry: BuildingRegistry, effect_type: EffectType) -> bool:
    for row in board.grid:
        for cell in row:
            definition = registry.get(cell)
            if definition is not None and definition.effect is not None:
                if definition.effect.effect_type == effect_type:
                    return True
    return False


def has_statue_of_bondmaker(board: TownBoard, registry: BuildingRegistry) -> bool:
    return _effect_present(board, registry, EffectType.STATUE_BONDMAKER)


def has_obelisk(board: TownBoard, registry: BuildingRegistry) -> bool:
    return _effect_present(board, registry, EffectType.OBELISK)


def free_placement_allowed(board: TownBoard, registry: BuildingRegistry, building_name: str) -> bool:
    """Whether a building may go on any empty square instead of one of its pattern squares."""
    return building_name.upper() == BuildingId.SHED.value or has_obelisk(board, registry)


def store_resource(
    board: TownBoard, registry: BuildingRegistry, row: int, col: int, resource: Resource | str
) -> None:
    """Put one resource on a Factory, a Bank, or a Cottage guarded by the Statue of the Bondmaker.

    Raises:
        InvalidStorage: If the cell cannot hold a single resource
        StorageFull: If a Cottage already holds one
    """
    resource = Resource(resource)
    if resource == Resource.NONE:
        msg = "Cannot store an empty resource"
        raise InvalidStorage(msg)

    definition = _definition_at(board, registry, row, col)
    if definition is None:
        msg = f"Nothing at {row}, {col} can hold a resource"
        raise InvalidStorage(msg)

    data = board.get_metadata(row, col) or CellMetadata()
    if definition.effect is not None and definition.effect.effect_type in SINGLE_SLOT_EFFECTS:
        board.set_metadata(row, col, data.model_copy(update={"reserved_resource": resource}))
        return

    if definition.is_cottage_class and has_statue_of_bondmaker(board, registry):
        if data.stored_resource is not None:
            msg = f"Cottage at {row}, {col} is full"
            raise StorageFull(msg)
        board.set_metadata(row, col, data.model_copy(update={"stored_resource": resource}))
        return

    msg = f"{definition.name} cannot hold a resource"
    raise InvalidStorage(msg)


def can_factory_swap(board: TownBoard, registry: BuildingRegistry, resource: Resource | str) -> bool:
    """True if any Factory in the town stores the named resource."""
    resource = Resource(resource)
    for pos, data in board.metadata.items():
        definition = registry.get(board.grid[pos.row][pos.col])
        if definition is None or definition.effect is None:
            continue
        if definition.effect.can_swap(data.reserved_resource, resource):
            return True
    return False


def forbidden_resources(board: TownBoard, registry: BuildingRegistry) -> list[Resource]:
    """Resources locked away in Banks; the master builder may not name them."""
    banned = []
    for pos, data in board.metadata.items():
        definition = registry.get(board.grid[pos.row][pos.col])
        if definition is None or definition.effect is None:
            continue
        if definition.effect.effect_type == EffectType.BANK and data.reserved_resource is not None:
            if data.reserved_resource not in banned:
                banned.append(data.reserved_resource)
    return banned


def _warehouse_capacity(board: TownBoard, registry: BuildingRegistry, row: int, col: int) -> int:
    definition = _definition_at(board, registry, row, col)
    if definition is None or definition.effect is None or definition.effect.effect_type != EffectType.WAREHOUSE:
        msg = f"No Warehouse at {row}, {col}"
        raise InvalidStorage(msg)
    return definition.effect.capacity


def warehouse_contents(board: TownBoard, row: int, col: int) -> list[Resource]:
    data = board.get_metadata(row, col)
    return list(data.stored_resources) if data is not None else []


def store_in_warehouse(
    board: TownBoard, registry: BuildingRegistry, row: int, col: int, resource: Resource | str
) -> None:
    capacity = _warehouse_capacity(board, registry, row, col)
    resource = Resource(resource)
    contents = warehouse_contents(board, row, col)
    if len(contents) >= capacity:
        msg = f"Warehouse at {row}, {col} already holds {capacity} resources"
        raise StorageFull(msg)

    data = board.get_metadata(row, col) or CellMetadata()
    board.set_metadata(row, col, data.model_copy(update={"stored_resources": contents + [resource]}))


def swap_in_warehouse(
    board: TownBoard, registry: BuildingRegistry, row: int, col: int, index: int, resource: Resource | str
) -> Resource:
    """Put ``resource`` in slot ``index`` and hand back what was there."""
    _warehouse_capacity(board, registry, row, col)
    resource = Resource(resource)
    contents = warehouse_contents(board, row, col)
    if not 0 <= index < len(contents):
        msg = f"Warehouse at {row}, {col} has no slot {index}"
        raise InvalidStorage(msg)

    popped = contents[index]
    contents[index] = resource
    data = board.get_metadata(row, col) or CellMetadata()
    board.set_metadata(row, col, data.model_copy(update={"stored_resources": contents}))
    return popped


def prepare_opaleye_watch(board: TownBoard, row: int, col: int, building_names: list[str]) -> None:
    """Record the three distinct buildings waiting on Opaleye's Watch."""
    identifiers = [name.upper() for name in building_names]
    if len(identifiers) != 3 or len(set(identifiers)) != 3:
        msg = "Opaleye's Watch needs exactly 3 different buildings"
        raise InvalidStorage(msg)
    data = board.get_metadata(row, col) or CellMetadata()
    board.set_metadata(row, col, data.model_copy(update={"watch_buildings": identifiers}))


def take_from_opaleye_watch(board: TownBoard, row: int, col: int, building_name: str) -> None:
    data = board.get_metadata(row, col)
    identifier = building_name.upper()
    if data is None or identifier not in data.watch_buildings:
        msg = f"{building_name} is not waiting on Opaleye's Watch"
        raise InvalidStorage(msg)
    remaining = [name for name in data.watch_buildings if name != identifier]
    board.set_metadata(row, col, data.model_copy(update={"watch_buildings": remaining}))
