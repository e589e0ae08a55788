"""
Runway state group decoding.

A runway state group (e.g. 8849//91) reports runway contamination:

    88    runway designator (88 = all runways)
    4     type of deposit
    9     extent of contamination
    //    depth of deposit
    91    braking action or friction coefficient

A cleared runway is reported as nnCLRDbb.
"""

import logging

from ..lookup import LookupTables
from ..lookup.runway_state import (
    ALL_RUNWAYS_CODE, LEFT_OR_SINGLE_RANGE, RIGHT_RANGE,
    DEPTH_CM_RANGE, DEPTH_CM_BASE, DEPTH_CM_STEP,
)
from ..utils import is_between

logger = logging.getLogger(__name__)


class RunwayStateGroupDecoder:
    """
    Decoder for the runway state group mini-grammar.

    Sub-codes missing from the code tables are rendered as "not recognised"
    phrases; decoding a matched group never raises.
    """

    CLEARED = "CLRD"

    def __init__(self, tables: LookupTables):
        self.tables = tables

    def decode(self, token: str) -> str:
        """
        Decode a runway state group.

        Args:
            token: Raw group, e.g. "8849//91" or "24CLRD95"

        Returns:
            Runway state description (multi-line unless the runway is cleared)
        """
        runway = self.runway_designator(token[0:2])
        braking = self.braking_action(token[6:8])

        if token[2:6] == self.CLEARED:
            return f"Runway state descriptor: Runway {runway} cleared, {braking}"

        deposit_code = token[2]
        extent_code = token[3]
        depth_code = token[4:6]
        braking_code = token[6:8]

        return (
            "Runway state descriptor:\n"
            f"\tRunway(s) concerned: {runway}\n"
            f"\t{deposit_code}: {self.deposit(deposit_code)}\n"
            f"\t{extent_code}: {self.extent(extent_code)}\n"
            f"\t{depth_code}: {self.depth(depth_code)}\n"
            f"\t{braking_code}: {braking}"
        )

    def runway_designator(self, code: str) -> str:
        number = int(code)
        if number == ALL_RUNWAYS_CODE:
            return "All runways"
        if is_between(number, *LEFT_OR_SINGLE_RANGE):
            return f"{code} or {code}L"
        if is_between(number, *RIGHT_RANGE):
            return f"{code}R"
        logger.debug(f"Unrecognised runway designator {code} in runway state group")
        return f"runway designator {code} not recognised"

    def deposit(self, code: str) -> str:
        return self.tables.runway_deposits.get(code, "Type of deposit not recognised")

    def extent(self, code: str) -> str:
        return self.tables.contamination_extents.get(code, "Extent of contamination not recognised")

    def depth(self, code: str) -> str:
        """Depth of deposit: millimeters, 5 cm steps, or a fixed phrase."""
        if code.isdigit():
            number = int(code)
            if is_between(number, 1, 90):
                return f"{code} mm"
            if is_between(number, *DEPTH_CM_RANGE):
                return f"{DEPTH_CM_BASE + (number - DEPTH_CM_RANGE[0]) * DEPTH_CM_STEP} cm"
        return self.tables.deposit_depths.get(code, "Depth of deposit not recognised")

    def braking_action(self, code: str) -> str:
        """Braking friction coefficient (00-90) or braking action phrase."""
        if code.isdigit() and is_between(int(code), 0, 90):
            return f"Braking friction coefficient: {code}"
        phrase = self.tables.braking_actions.get(code)
        if phrase is None:
            return "Braking action not recognised"
        return f"Braking {phrase}"
