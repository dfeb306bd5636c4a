"""Engineering priority ordering for collections of cable specifications."""

from typing import Dict, Iterable, List, Optional

from ..models import CableCategory, CableSpec


def group_cables_by_category(
    cables: Optional[Iterable[Optional[CableSpec]]]
) -> Dict[str, List[CableSpec]]:
    """
    Split cables into power, control and other groups.

    None entries are dropped; input order is kept within each group.

    Args:
        cables: Cable specifications to group

    Returns:
        Dictionary with 'power', 'control' and 'other' lists
    """
    groups: Dict[str, List[CableSpec]] = {
        "power": [],
        "control": [],
        "other": [],
    }

    for cable in cables or ():
        if cable is None:
            continue
        if cable.category == CableCategory.POWER:
            groups["power"].append(cable)
        elif cable.category == CableCategory.CONTROL:
            groups["control"].append(cable)
        else:
            groups["other"].append(cable)

    return groups


def sort_cables(cables: Optional[Iterable[Optional[CableSpec]]]) -> List[CableSpec]:
    """
    Sort cables for display: power first, then control, then the rest.

    Power cables are ordered by phase section, neutral section and
    protective core count; control cables by control section, control
    core count and twisted pair count. All keys descend. Other cables
    keep their input order. The sort is stable, so cables with equal
    keys stay in input order.

    Args:
        cables: Cable specifications; None input or None entries are ignored

    Returns:
        New sorted list
    """
    groups = group_cables_by_category(cables)

    power = sorted(
        groups["power"],
        key=lambda c: (-c.phase_core_section, -c.neutral_core_section, -c.protect_core_count),
    )
    control = sorted(
        groups["control"],
        key=lambda c: (-c.control_core_section, -c.control_core_count, -c.twisted_pair_count),
    )

    return power + control + groups["other"]
