"""
Fixed code tables of the runway state group (RSG).

An RSG such as 8849//91 is made of a runway designator (88), a deposit
type (4), a contamination extent (9), a deposit depth (//) and a braking
action or friction coefficient (91).
"""

from typing import Dict

RUNWAY_DEPOSITS: Dict[str, str] = {
    '0': "Clear and dry",
    '1': "Damp",
    '2': "Wet or water patches",
    '3': "Thin frost cover",
    '4': "Dry snow",
    '5': "Wet snow",
    '6': "Slush",
    '7': "Ice",
    '8': "Compacted or rolled snow",
    '9': "Frozen ruts or ridges",
    '/': "Type of deposit not reported",
}

CONTAMINATION_EXTENTS: Dict[str, str] = {
    '1': "Less than 10%",
    '2': "11% to 25%",
    '5': "26% to 50%",
    '9': "51% to 100%",
    '/': "Not reported",
}

# 01-90 are depths in millimeters and 92-97 depths in 5 cm steps,
# both computed by the decoder.
DEPOSIT_DEPTHS: Dict[str, str] = {
    '00': "Less than 1mm",
    '91': "Not used/Incorrect value",
    '98': "40cm or more",
    '99': "Non-operational due to snow, slush, ice or rwy clearance, but depth not reported",
    '//': "Depth of deposit operationally not significant or measurable.",
}

# 00-90 are friction coefficients, rendered literally by the decoder.
BRAKING_ACTIONS: Dict[str, str] = {
    '91': "action poor",
    '92': "action medium/poor",
    '93': "action medium",
    '94': "action medium/good",
    '95': "action good",
    '99': "information unreliable",
    '//': "action not reported",
}

ALL_RUNWAYS_CODE = 88
LEFT_OR_SINGLE_RANGE = (0, 36)
RIGHT_RANGE = (50, 86)

DEPTH_CM_RANGE = (92, 97)
DEPTH_CM_BASE = 10
DEPTH_CM_STEP = 5
