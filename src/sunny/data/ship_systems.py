"""
Ship Systems Data Module

This module holds the static content of the Thousand Sunny's non-navigational
systems: the Soldier Dock channels, Usopp's Pop Green garden and the restricted
areas of the ship.

Functions:
    get_dock(): Look up a Soldier Dock channel (1-6)
    get_pop_green(): Look up a Pop Green (1-14)
    get_restricted_area(): Look up a restricted area by name
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Configure logger
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShipSystem:
    """
    A single entry of one of the ship's lookup tables.

    Attributes:
        title: Heading printed before the description
        description: Flavor text describing the entry
        launch_message: Text printed when the entry is launched (docks only)
    """

    title: str
    description: str
    launch_message: Optional[str] = None


SOLDIER_DOCK: Dict[int, ShipSystem] = {
    1: ShipSystem(
        title="Channel 1 - Shiro Mokuba:",
        description="Waver owned by Nami, in the shape of a white horse. "
                    "Orginally salvaged from a shipwreck in Jaya.",
        launch_message="Launching Shiro Mokuba from Channel 1...\n"
                       "Nami's waver speeds across the water!"
    ),
    2: ShipSystem(
        title="Channel 2 - Mini Merry:",
        description="Small 4-person boat resembling the Going Merry. "
                    "Built by Franky at Nami's request, for the exlusive use of shopping.",
        launch_message="Launching the Mini Merry from Channel 2...\n"
                       "The mini shopping boat sets sail!"
    ),
    3: ShipSystem(
        title="Channel 3 - Shark Submerge:",
        description="3-person submersible shaped like a shark.",
        launch_message="Launching Shark Submerge from Channel 3...\n"
                       "Baby Meg dives beneath the waves!"
    ),
    4: ShipSystem(
        title="Channel 4 - Kurosai IV:",
        description="Giant black motorcycle with 3-wheels and the head of a Rhinoceros. "
                    "Built by Franky for unknown reasons.",
        launch_message="Launching Kurosai IV from Channel 4...\n"
                       "The giant motorised rhinoceros roars to life!"
    ),
    5: ShipSystem(
        title="Channel 5 - Brachio Tank V:",
        description="Giant tank shaped like a Brachiosaurus. Built by Franky for obvious reasons.",
        launch_message="Launching Brachio Tank V from Channel 5...\n"
                       "The dinosaur tank rumbles forward with devastating power!"
    ),
    6: ShipSystem(
        title="Channel 6 - Inflatable Pool:",
        description="Large inflatable pool for relaxation purposes.",
        launch_message="Launching Inflatable Pool from Channel 6...\n"
                       "Suns out, buns out... but make sue Sanji is locked in!!"
    ),
}

POP_GREENS: Dict[int, ShipSystem] = {
    1: ShipSystem("#1 - Sprinkler:",
                  "A plant that sprays water, useful for putting out fires or creating distractions."),
    2: ShipSystem("#2 - Platanus Shuriken:",
                  "Sharp seed projectiles that can be thrown like shuriken for ranged attacks."),
    3: ShipSystem("#3 - Exploding Pinecones:",
                  "Explosive pinecones that detonate on impact, causing significant damage."),
    4: ShipSystem("#4 - Rafflesia:",
                  "A giant flower that releases a horrible stench to repel enemies."),
    5: ShipSystem("#5 - Trampolia:",
                  "A bouncy mushroom-like plant that can launch people or objects into the air."),
    6: ShipSystem("#6 - Humandrake:",
                  "A carnivorous plant that can grab and restrain enemies with its vines."),
    7: ShipSystem("#7 - Sleep Grass:",
                  "Releases sleep-inducing spores that knock out anyone who inhales them."),
    8: ShipSystem("#8 - Firework Flowers:",
                  "Flowers that burst into brilliant displays, useful for signals or distractions."),
    9: ShipSystem("#9 - Bamboo Javelin:",
                  "Fast-growing bamboo that shoots out like a spear for piercing attacks."),
    10: ShipSystem("#10 - Skull Bomb Grass:",
                   "A skull-shaped plant bomb with explosive capabilities."),
    11: ShipSystem("#11 - Devil:",
                   "A devilish plant with powerful offensive capabilities."),
    12: ShipSystem("#12 - Impact Wolf:",
                   "Creates a wolf-shaped impact dial effect for devastating close-range attacks."),
    13: ShipSystem("#13 - Boaty Banana Fan Grass:",
                   "A banana-shaped plant that can be used as a boat or flotation device."),
    14: ShipSystem("#14 - Sargasso:",
                   "Seaweed-like grass that can entangle and trap enemies."),
}

RESTRICTED_AREAS: Dict[str, ShipSystem] = {
    "mikan": ShipSystem(
        title="Nami's Mikan Grove",
        description="UNAUTHORISED ACCESS WARNING!! CONTACTING NAMI!!"
    ),
    "fluer": ShipSystem(
        title="Robin's Flower Bed",
        description="UNAUTHORISED ACCESS WARNING!! CONTACTING ROBIN!!"
    ),
}


def _lookup(table: Dict, key, label: str) -> ShipSystem:
    try:
        return table[key]
    except KeyError:
        raise KeyError(f"Invalid {label}: {key}. Must be one of {list(table.keys())}") from None


def get_dock(channel: int) -> ShipSystem:
    """
    Look up a Soldier Dock channel.

    Args:
        channel: Dock channel number (1-6)

    Returns:
        ShipSystem describing the vehicle stored in the channel

    Raises:
        KeyError: If the channel does not exist
    """
    return _lookup(SOLDIER_DOCK, channel, "dock channel")


def get_pop_green(number: int) -> ShipSystem:
    """
    Look up one of Usopp's Pop Greens.

    Args:
        number: Pop Green number (1-14)

    Returns:
        ShipSystem describing the Pop Green

    Raises:
        KeyError: If the number does not exist
    """
    return _lookup(POP_GREENS, number, "Pop Green")


def get_restricted_area(name: str) -> ShipSystem:
    """Look up a restricted area by its command name ('mikan' or 'fluer')."""
    area = _lookup(RESTRICTED_AREAS, name, "restricted area")
    logger.warning(f"Unauthorised access attempt on {area.title}")
    return area
