"""Known-good custom tiers and neighbour lookup.

KNOWN_TIERS is an empirically collected list of tiers the provider offers,
ordered by (vcpu, memory_mb). It is a hint list for "next tier up/down"
suggestions, not the definition of validity (see constraints.is_valid).

Lookups return None when the query lies beyond either end of the table.
"""

from bisect import bisect_left, bisect_right

from tiercalc.models.tier import Tier

KNOWN_TIERS: tuple[Tier, ...] = (
    Tier(1, 3840),
    Tier(2, 7680),
    Tier(2, 13312),
    Tier(4, 15360),
    Tier(4, 26624),
    Tier(6, 23040),
    Tier(6, 39936),
    Tier(8, 30720),
    Tier(8, 53248),
    Tier(10, 38400),
    Tier(10, 66560),
    Tier(12, 46080),
    Tier(12, 79872),
    Tier(16, 61440),
    Tier(16, 106496),
    Tier(24, 92160),
    Tier(24, 159744),
    Tier(32, 122880),
    Tier(32, 212992),
    Tier(48, 184320),
    Tier(48, 319488),
    Tier(64, 245760),
    Tier(64, 425984),
    Tier(80, 307200),
    Tier(80, 532480),
    Tier(96, 368640),
    Tier(96, 638976),
)


def find_next_above(vcpu: int, memory_mb: int) -> Tier | None:
    """First known tier strictly greater than (vcpu, memory_mb)."""
    index = bisect_right(KNOWN_TIERS, Tier(vcpu, memory_mb))
    if index == len(KNOWN_TIERS):
        return None
    return KNOWN_TIERS[index]


def find_next_below(vcpu: int, memory_mb: int) -> Tier | None:
    """Last known tier strictly less than (vcpu, memory_mb)."""
    index = bisect_left(KNOWN_TIERS, Tier(vcpu, memory_mb))
    if index == 0:
        return None
    return KNOWN_TIERS[index - 1]
