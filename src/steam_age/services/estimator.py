"""Creation-time estimation by linear interpolation.

Steam hands out identifiers roughly in account-creation order, so the
creation time of an unknown identifier can be read off the line through two
known (identifier, created_at) points.

The error margin is a heuristic: the estimated offset from the lower
reference point, ``abs(slope * (target - lower.identifier))``. It grows with
the distance from the reference point and is not a statistical confidence
interval. Targets outside the reference span are extrapolated without
clamping and get a correspondingly larger margin.
"""

from steam_age.entities import CreationRecord, Estimate
from steam_age.exceptions import InsufficientDataError


def local_slope(lower: CreationRecord, upper: CreationRecord) -> float:
    """Seconds of creation time per unit of identifier between two records.

    Raises:
        InsufficientDataError: If both records share an identifier
    """
    if lower.identifier == upper.identifier:
        raise InsufficientDataError(
            f"Reference points share identifier {lower.identifier}; slope is undefined"
        )
    return (upper.created_at - lower.created_at) / (upper.identifier - lower.identifier)


def estimate(target_id: int, lower: CreationRecord, upper: CreationRecord) -> Estimate:
    """Estimate the creation time of ``target_id`` from two reference records.

    Args:
        target_id: The identifier to estimate
        lower: Reference record with the smaller identifier
        upper: Reference record with the larger identifier

    Returns:
        Estimate with both values truncated toward zero

    Raises:
        InsufficientDataError: If the references share an identifier
    """
    slope = local_slope(lower, upper)
    offset = slope * (target_id - lower.identifier)
    return Estimate(
        created_at=lower.created_at + int(offset),
        error_margin=int(abs(offset)),
    )
