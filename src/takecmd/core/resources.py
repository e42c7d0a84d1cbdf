"""Resource generation: the supplies, fuel and cash on hand."""

import logging
from dataclasses import dataclass
from typing import Tuple

from takecmd.core.config import Settings
from takecmd.core.sampler import Sampler

logger = logging.getLogger(__name__)

# Number of distinct item kinds on hand
ITEM_COUNT_RANGE = (5, 20)

# Units of each item kind
ITEM_QUANTITY_RANGE = (2, 10)

# Fuel (gallons) and money (USD) on hand, with decimal places kept
GAS_GALLONS_RANGE = (8.0, 40.0)
GAS_DECIMALS = 1
CASH_USD_RANGE = (15.0, 500.0)
CASH_DECIMALS = 2


@dataclass(frozen=True)
class ResourceSet:
    """Inventory available to the user.

    Attributes:
        items: "<quantity> <item>" lines, item names pairwise distinct.
        gas_gallons: Fuel on hand, one decimal place.
        cash_usd: Cash on hand, two decimal places.
    """
    items: Tuple[str, ...]
    gas_gallons: float
    cash_usd: float


def generate_resources(settings: Settings, sampler: Sampler) -> ResourceSet:
    """Generate a resource set from the configured item pool.

    The sampled item count is clamped to the pool size so a small pool
    yields every item rather than failing.

    Args:
        settings: Exercise settings.
        sampler: Randomness source.

    Returns:
        A new ResourceSet.
    """
    pool = settings.resources.items
    count = sampler.uniform_int(*ITEM_COUNT_RANGE)
    if count > len(pool):
        logger.warning(
            f"Requested {count} resource items but only {len(pool)} configured; "
            f"using {len(pool)}"
        )
        count = len(pool)

    items = tuple(
        f"{sampler.uniform_int(*ITEM_QUANTITY_RANGE)} {name}"
        for name in sampler.pick_set(pool, count)
    )

    return ResourceSet(
        items=items,
        gas_gallons=sampler.uniform_float(*GAS_GALLONS_RANGE, GAS_DECIMALS),
        cash_usd=sampler.uniform_float(*CASH_USD_RANGE, CASH_DECIMALS),
    )
