from __future__ import annotations

from enum import Enum


class EffectType(str, Enum):
    """Non-scoring abilities a building grants while it stands in the town."""

    FACTORY = "FACTORY"
    BANK = "BANK"
    WAREHOUSE = "WAREHOUSE"
    TRADING_POST = "TRADING_POST"
    STATUE_BONDMAKER = "STATUE_BONDMAKER"
    ARCHITECTS_GUILD = "ARCHITECTS_GUILD"
    GROVE_UNIVERSITY = "GROVE_UNIVERSITY"
    OPALEYE_WATCH = "OPALEYE_WATCH"
    FORT_IRONWEED = "FORT_IRONWEED"
    OBELISK = "OBELISK"
