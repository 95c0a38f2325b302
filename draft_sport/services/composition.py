"""Assign a team's picks to the slots of its composition."""

from typing import Iterable, List, Tuple

from draft_sport.errors import CompositionError
from draft_sport.models.composition import (
    CategoryRequirement,
    Composition,
    FilledComposition,
    FilledRequirement,
    PositionRequirement
)
from draft_sport.models.pick import Pick


def fill_composition(picks: Iterable[Pick], composition: Composition) -> FilledComposition:
    """Partition ``picks`` into the requirements of ``composition``.

    Picks are offered oldest first. Position requirements are filled first,
    in composition order, from active picks only; category requirements are
    then filled, in order, from benched picks only. A pick lands in at most
    one requirement and picks nobody claims are left out.
    """
    remaining = sorted(picks, key=lambda p: p.created)
    filled_requirements: List[FilledRequirement] = []

    for position_requirement in composition.position_requirements:
        filled, remaining = _fill_position(position_requirement, remaining)
        filled_requirements.append(filled)

    for category_requirement in composition.category_requirements:
        filled, remaining = _fill_category(category_requirement, remaining)
        filled_requirements.append(filled)

    return FilledComposition(filled_requirements=filled_requirements)


def _fill_position(
    requirement: PositionRequirement,
    candidates: List[Pick]
) -> Tuple[FilledRequirement, List[Pick]]:
    accepted: List[Pick] = []
    remaining: List[Pick] = []

    for pick in candidates:
        # Benched picks only ever fill category requirements
        if pick.benched:
            remaining.append(pick)
            continue

        if len(accepted) < requirement.count and pick.player.position_name == requirement.position_name:
            accepted.append(pick)
            continue

        remaining.append(pick)

    return FilledRequirement(requirement=requirement, picks=accepted), remaining


def _fill_category(
    requirement: CategoryRequirement,
    candidates: List[Pick]
) -> Tuple[FilledRequirement, List[Pick]]:
    accepted: List[Pick] = []
    remaining: List[Pick] = []

    for pick in candidates:
        if not pick.benched:
            remaining.append(pick)
            continue

        if _in_category(pick, requirement) and len(accepted) < requirement.count:
            accepted.append(pick)
            continue

        remaining.append(pick)

    return FilledRequirement(requirement=requirement, picks=accepted), remaining


def _in_category(pick: Pick, requirement: CategoryRequirement) -> bool:
    position = pick.player.position
    if position is None:
        raise CompositionError(
            pick.public_id,
            f"player {pick.player.public_id} has no position to match against "
            f"category {requirement.category.name}"
        )
    return position.is_in_category(requirement.category)
