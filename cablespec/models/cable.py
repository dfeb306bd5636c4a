"""Cable specification data model."""

import math
from dataclasses import asdict, dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional

from ..errors import InvalidBundleCountError, InvalidSectionError


class CableCategory(Enum):
    """Cable category classification."""
    POWER = "POWER"                  # Power distribution (YJV, VV, ...)
    CONTROL = "CONTROL"              # Signalling/control (KVV, KYJV, ...)
    UNCLASSIFIED = "UNCLASSIFIED"    # No keyword matched


# Human-readable cable type labels
POWER_CABLE = "Power Cable"
CONTROL_CABLE = "Control Cable"
VARIABLE_FREQUENCY_CABLE = "Variable Frequency Cable"
TWISTED_PAIR_CABLE = "Twisted Pair Cable"
UNCLASSIFIED_CABLE = "Unclassified"

CATEGORY_LABELS = {
    CableCategory.POWER: POWER_CABLE,
    CableCategory.CONTROL: CONTROL_CABLE,
    CableCategory.UNCLASSIFIED: UNCLASSIFIED_CABLE,
}

# Conductors in one twisted pair
CORES_PER_PAIR = 2

_COUNT_FIELDS = (
    "phase_core_count",
    "neutral_core_count",
    "protect_core_count",
    "vf_shield_core_count",
    "twisted_pair_count",
    "cores_per_pair",
    "control_core_count",
)

_SECTION_FIELDS = (
    "phase_core_section",
    "neutral_core_section",
    "protect_core_section",
    "vf_shield_core_section",
    "control_core_section",
)


def format_section(value: float) -> str:
    """
    Format a section in plain decimal notation without a trailing '.0'.

    70.0 -> '70', 2.5 -> '2.5', 120.12345 -> '120.12345', 1234567.0 -> '1234567'.
    The shortest repr digits are kept, so the text parses back to the same float.
    """
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class CableSpec:
    """Structured cable specification, e.g. YJV 3x120+1x70.

    Sections are in mm². Counts and sections default to zero when a
    conductor role is absent.
    """

    model: Optional[str] = ""             # Verbatim model designator, e.g. "YJV22"; None if absent
    category: CableCategory = CableCategory.UNCLASSIFIED
    bundle_count: int = 1                 # 2(3x25+1x16) -> 2

    phase_core_count: int = 0
    phase_core_section: float = 0.0
    neutral_core_count: int = 0
    neutral_core_section: float = 0.0
    protect_core_count: int = 0
    protect_core_section: float = 0.0

    is_variable_frequency: bool = False   # 3xS1+3xS2
    vf_shield_core_count: int = 0
    vf_shield_core_section: float = 0.0

    is_twisted_pair: bool = False         # 6x2x2.5
    twisted_pair_count: int = 0
    cores_per_pair: int = 0

    control_core_count: int = 0
    control_core_section: float = 0.0

    cable_type: str = UNCLASSIFIED_CABLE

    def __post_init__(self) -> None:
        if self.bundle_count < 1:
            raise InvalidBundleCountError(self.bundle_count)
        for name in _COUNT_FIELDS:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        for name in _SECTION_FIELDS:
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise InvalidSectionError(str(value))

    @property
    def is_power(self) -> bool:
        """Check if cable is classified as a power cable."""
        return self.category == CableCategory.POWER

    @property
    def is_control(self) -> bool:
        """Check if cable is classified as a control cable."""
        return self.category == CableCategory.CONTROL

    @property
    def has_neutral(self) -> bool:
        return self.neutral_core_count > 0

    @property
    def has_protect(self) -> bool:
        return self.protect_core_count > 0

    @property
    def pair_core_section(self) -> float:
        """Single-conductor section of a twisted pair cable.

        Parsed twisted pairs carry it as the control section, the
        factory helper as the phase section.
        """
        return self.control_core_section or self.phase_core_section

    @property
    def total_core_count(self) -> int:
        """Total number of conductors, all bundles included."""
        if self.is_twisted_pair:
            per_bundle = self.twisted_pair_count * self.cores_per_pair
        else:
            per_bundle = (
                self.phase_core_count
                + self.neutral_core_count
                + self.protect_core_count
                + self.vf_shield_core_count
                + self.control_core_count
            )
        return per_bundle * self.bundle_count

    def with_bundle_count(self, bundle_count: int) -> "CableSpec":
        """Return a copy carrying a different bundle count."""
        return replace(self, bundle_count=bundle_count)

    def describe(self) -> str:
        """
        Build the canonical textual form of this specification.

        Examples:
            4×70+1×35, 2(3×35+3×6), 1×6×2×1.5

        The result is meant for display and audit; it is not guaranteed
        to equal the string the record was parsed from.
        """
        if self.is_twisted_pair and self.twisted_pair_count > 0 and self.cores_per_pair > 0:
            return "{}×{}×{}×{}".format(
                self.bundle_count,
                self.twisted_pair_count,
                self.cores_per_pair,
                format_section(self.pair_core_section),
            )

        desc = f"{self.phase_core_count}×{format_section(self.phase_core_section)}"
        if self.neutral_core_count > 0:
            desc += f"+{self.neutral_core_count}×{format_section(self.neutral_core_section)}"
        if self.protect_core_count > 0:
            desc += f"+{self.protect_core_count}×{format_section(self.protect_core_section)}"
        if self.is_variable_frequency and self.vf_shield_core_count > 0:
            desc += f"+{self.vf_shield_core_count}×{format_section(self.vf_shield_core_section)}"

        if self.bundle_count > 1:
            return f"{self.bundle_count}({desc})"
        return desc

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary view, category flattened to its value."""
        data = asdict(self)
        data["category"] = self.category.value
        data["description"] = self.describe()
        return data

    @classmethod
    def power(
        cls,
        model: str,
        phase_count: int,
        phase_section: float,
        neutral_count: int = 0,
        neutral_section: float = 0.0,
        protect_count: int = 0,
        protect_section: float = 0.0,
    ) -> "CableSpec":
        """
        Build an ordinary power cable, e.g. 4×70+1×35.

        Args:
            model: Cable model designator
            phase_count: Number of phase cores
            phase_section: Phase core section in mm²
            neutral_count: Number of neutral cores (0 if none)
            neutral_section: Neutral core section in mm²
            protect_count: Number of protective (PE) cores (0 if none)
            protect_section: Protective core section in mm²

        Returns:
            CableSpec labelled as a power cable
        """
        return cls(
            model=model,
            phase_core_count=phase_count,
            phase_core_section=phase_section,
            neutral_core_count=neutral_count,
            neutral_core_section=neutral_section,
            protect_core_count=protect_count,
            protect_core_section=protect_section,
            cable_type=POWER_CABLE,
        )

    @classmethod
    def variable_frequency(
        cls,
        model: str,
        phase_count: int,
        phase_section: float,
        shield_count: int,
        shield_section: float,
        bundle_count: int = 1,
    ) -> "CableSpec":
        """
        Build a variable-frequency cable, e.g. 3×35+3×6 or 2(3×35+3×6).

        Args:
            model: Cable model designator
            phase_count: Number of phase cores
            phase_section: Phase core section in mm²
            shield_count: Number of shield cores
            shield_section: Shield core section in mm²
            bundle_count: Number of bundled core groups

        Returns:
            CableSpec flagged as variable frequency
        """
        return cls(
            model=model,
            bundle_count=bundle_count,
            phase_core_count=phase_count,
            phase_core_section=phase_section,
            is_variable_frequency=True,
            vf_shield_core_count=shield_count,
            vf_shield_core_section=shield_section,
            cable_type=VARIABLE_FREQUENCY_CABLE,
        )

    @classmethod
    def twisted_pair(
        cls,
        model: str,
        pair_count: int,
        cores_per_pair: int,
        single_core_section: float,
        is_variable_frequency: bool = False,
    ) -> "CableSpec":
        """
        Build a twisted pair cable, e.g. 6×2×2.5.

        Args:
            model: Cable model designator
            pair_count: Number of twisted pairs
            cores_per_pair: Conductors per pair
            single_core_section: Section of one conductor in mm²
            is_variable_frequency: Whether the pairs serve a VFD

        Returns:
            CableSpec flagged as twisted pair
        """
        return cls(
            model=model,
            phase_core_section=single_core_section,
            is_twisted_pair=True,
            twisted_pair_count=pair_count,
            cores_per_pair=cores_per_pair,
            is_variable_frequency=is_variable_frequency,
            cable_type=TWISTED_PAIR_CABLE,
        )
