import structlog

from pawpulse.core.constants import (
    ACTIVITY_FACTOR_MAX,
    ACTIVITY_SPEED_BANDS,
    AGE_FACTOR,
    BREED_BMR,
    SEX_FACTOR,
)

logger = structlog.get_logger(__name__)


def _plain(value):
    # Enum members hash by name, the tables are keyed by value
    return getattr(value, "value", value)


def activity_factor(speed: float) -> float:
    """Step function of speed: <2 -> 1.2, [2, 4) -> 1.5, >=4 -> 1.8."""
    for upper, factor in ACTIVITY_SPEED_BANDS:
        if speed < upper:
            return factor
    return ACTIVITY_FACTOR_MAX


def calculate_calories_burnt(species, weight_kg, age_group, sex, speed) -> float:
    """Estimate calories burnt for a dog.

    bmr[species] * weight^0.75 * age factor * sex factor * activity factor.
    Missing or unknown inputs are logged and yield 0.0 instead of raising.
    """
    species, age_group, sex = _plain(species), _plain(age_group), _plain(sex)

    if not species or not weight_kg or not age_group or not sex or speed is None:
        logger.warning(
            "calories.missing_inputs",
            species=species,
            weight=weight_kg,
            age=age_group,
            sex=sex,
            speed=speed,
        )
        return 0.0

    if (
        species not in BREED_BMR
        or age_group not in AGE_FACTOR
        or sex not in SEX_FACTOR
        or weight_kg < 0
    ):
        logger.warning(
            "calories.invalid_inputs",
            species=species,
            weight=weight_kg,
            age=age_group,
            sex=sex,
        )
        return 0.0

    bmr_calories = BREED_BMR[species] * float(weight_kg) ** 0.75
    factor = activity_factor(speed)
    calories = bmr_calories * AGE_FACTOR[age_group] * SEX_FACTOR[sex] * factor

    logger.debug(
        "calories.computed",
        bmr_calories=bmr_calories,
        species_bmr=BREED_BMR[species],
        age_factor=AGE_FACTOR[age_group],
        sex_factor=SEX_FACTOR[sex],
        activity_factor=factor,
        calories=calories,
    )
    return calories
