"""
Credit Segment Classification for the Loan Decision Engine.

The last four digits of a personal code place the applicant in a credit
segment. Each segment maps to a configured credit modifier; the debt
segment maps to 0, meaning no loan can be offered.

    0000-2499  debt
    2500-4999  segment 1
    5000-7499  segment 2
    7500-9999  segment 3
"""

from .models import CreditSegment
from .settings import DecisionSettings, decision_settings

SEGMENT_1_START = 2500
SEGMENT_2_START = 5000
SEGMENT_3_START = 7500
MAX_SEGMENT_VALUE = 9999


def classify_segment(segment_value: int) -> CreditSegment:
    """
    Map the last four digits of a personal code to a credit segment.

    Args:
        segment_value: Integer value of the last four digits (0-9999)

    Returns:
        The applicant's CreditSegment

    Raises:
        ValueError: If segment_value is outside 0-9999
    """
    if not 0 <= segment_value <= MAX_SEGMENT_VALUE:
        raise ValueError(f"Segment value out of range: {segment_value}")

    if segment_value < SEGMENT_1_START:
        return CreditSegment.DEBT
    elif segment_value < SEGMENT_2_START:
        return CreditSegment.SEGMENT_1
    elif segment_value < SEGMENT_3_START:
        return CreditSegment.SEGMENT_2
    return CreditSegment.SEGMENT_3


def credit_modifier(
    segment: CreditSegment,
    settings: DecisionSettings = decision_settings,
) -> int:
    """
    Get the credit modifier for a segment.

    Args:
        segment: Applicant credit segment
        settings: Decision settings (uses defaults if not provided)

    Returns:
        Credit modifier (0 = no loan possible)
    """
    modifiers = {
        CreditSegment.DEBT: 0,
        CreditSegment.SEGMENT_1: settings.segment_1_credit_modifier,
        CreditSegment.SEGMENT_2: settings.segment_2_credit_modifier,
        CreditSegment.SEGMENT_3: settings.segment_3_credit_modifier,
    }
    return modifiers[segment]
