"""Static catalog of pre-trip inspection photo shots and manual checks."""

from typing import Dict, Iterable, List, Optional, Sequence

from .value_objects.requirement_specs import CheckCategory, CheckSpec, ShotCategory, ShotSpec


TRACTOR_SHOTS = (
    ShotSpec(
        id="front",
        label="Front View",
        description="Full front: lights, windshield, mirrors, bumper",
        category=ShotCategory.TRACTOR,
        required_always=True,
        tips=(
            "All lights visible (headlights, turn signals, clearance)",
            "Full windshield in frame",
            "Both mirrors visible",
            "License plate visible",
        ),
    ),
    ShotSpec(
        id="left_side",
        label="Left Side",
        description="Driver side: body, fuel tank, door, steps",
        category=ShotCategory.TRACTOR,
        required_always=True,
        tips=("Full side of truck", "Fuel tank and cap visible", "Door, steps, grab handles"),
    ),
    ShotSpec(
        id="right_side",
        label="Right Side",
        description="Passenger side: body, DEF tank, door, steps",
        category=ShotCategory.TRACTOR,
        required_always=True,
        tips=("Full side of truck", "DEF tank and cap visible", "Air tanks visible"),
    ),
    ShotSpec(
        id="rear_drive_axle",
        label="Rear & Drive Axle",
        description="Back of tractor: dual tires, frame, mud flaps",
        category=ShotCategory.TRACTOR,
        required_always=True,
        tips=("Both dual tires visible", "Frame and mud flaps", "Suspension visible"),
    ),
    ShotSpec(
        id="engine",
        label="Engine Compartment",
        description="Under hood: belts, hoses, fluids, battery",
        category=ShotCategory.TRACTOR,
        required_always=True,
        tips=("Hood fully open", "Belts and hoses visible", "Check for leaks"),
    ),
    ShotSpec(
        id="driver_wheels_brakes",
        label="Driver Wheels & Brakes",
        description="Driver side: steer tire, brake drum, chamber",
        category=ShotCategory.TRACTOR,
        required_always=True,
        tips=("Steer tire tread and sidewall", "Lug nuts visible", "Brake drum and chamber"),
    ),
    ShotSpec(
        id="passenger_wheels_brakes",
        label="Passenger Wheels & Brakes",
        description="Passenger side: steer tire, brake drum, chamber",
        category=ShotCategory.TRACTOR,
        required_always=True,
        tips=("Steer tire tread and sidewall", "Lug nuts visible", "Brake drum and chamber"),
    ),
    ShotSpec(
        id="interior",
        label="Interior/Cab",
        description="Inside cab: seat belt, fire extinguisher, safety equipment",
        category=ShotCategory.TRACTOR,
        required_always=True,
        tips=("Seat belt visible", "Fire extinguisher mounted and visible"),
    ),
    ShotSpec(
        id="dashboard",
        label="Dashboard Gauges",
        description="Dashboard with engine running showing all gauges",
        category=ShotCategory.TRACTOR,
        required_always=True,
        tips=("Engine must be running", "All gauges visible", "Air pressure gauges showing"),
    ),
)

COUPLING_SHOTS = (
    ShotSpec(
        id="air_lines",
        label="Air Lines & Electrical",
        description="Glad hands, air lines, electrical cord connection",
        category=ShotCategory.COUPLING,
        required_with_trailer=True,
        tips=("Glad hands fully connected", "Air lines not kinked/cut", "Lines not dragging"),
    ),
)

TRAILER_SHOTS = (
    ShotSpec(
        id="trailer_front",
        label="Trailer Front",
        description="Photo of the front of the trailer",
        category=ShotCategory.TRAILER,
        required_with_trailer=True,
    ),
    ShotSpec(
        id="trailer_back",
        label="Trailer Back",
        description="Photo of the rear of the trailer",
        category=ShotCategory.TRAILER,
        required_with_trailer=True,
    ),
    ShotSpec(
        id="trailer_left",
        label="Trailer Left Side",
        description="Photo of the left side of the trailer",
        category=ShotCategory.TRAILER,
        required_with_trailer=True,
    ),
    ShotSpec(
        id="trailer_right",
        label="Trailer Right Side",
        description="Photo of the right side of the trailer",
        category=ShotCategory.TRAILER,
        required_with_trailer=True,
    ),
)


def _check(check_id: str, label: str, description: str, category: CheckCategory,
           critical: bool = True) -> CheckSpec:
    return CheckSpec(
        id=check_id,
        label=label,
        description=description,
        category=category,
        critical=critical,
        trailer_only=category is CheckCategory.TRAILER,
    )


MANUAL_CHECKS = (
    _check("headlights_work", "Headlights Working", "High and low beams functional", CheckCategory.LIGHTS),
    _check("turn_signals_work", "Turn Signals Working", "Left and right turn signals functional", CheckCategory.LIGHTS),
    _check("brake_lights_work", "Brake Lights Working", "Brake lights activate when pedal pressed", CheckCategory.LIGHTS),
    _check("hazards_work", "4-Way Hazards Working", "Hazard lights flash correctly", CheckCategory.LIGHTS),
    _check("clearance_lights_work", "Clearance Lights Working", "All marker/clearance lights functional",
           CheckCategory.LIGHTS, critical=False),
    _check("air_brake_test", "Air Brake Test Passed",
           "Governor cut-out, low air warning, spring brake pop-out", CheckCategory.BRAKES),
    _check("parking_brake_holds", "Parking Brake Holds", "Parking brake holds against gentle acceleration",
           CheckCategory.BRAKES),
    _check("service_brake_ok", "Service Brake Stops Straight", "Vehicle stops without pulling left or right",
           CheckCategory.BRAKES),
    _check("slack_adjusters_ok", "Slack Adjusters OK", "Less than 1 inch play when pulled by hand",
           CheckCategory.BRAKES, critical=False),
    _check("steering_play_ok", "Steering Wheel Play OK", "Less than 10 degrees free play", CheckCategory.STEERING),
    _check("lug_nuts_tight", "Lug Nuts Tight", "All lug nuts checked and tight", CheckCategory.STEERING),
    _check("steer_tires_ok", "Steer Tires OK",
           "Adequate tread depth, proper inflation, no cuts or sidewall damage", CheckCategory.STEERING),
    _check("drive_tires_ok", "Drive Tires OK",
           "Adequate tread depth, proper inflation, no mismatched sizes, no damage", CheckCategory.STEERING),
    _check("horn_works", "Horn Works", "Both city and air horns functional", CheckCategory.SAFETY),
    _check("wipers_work", "Wipers & Washers Work", "Windshield wipers and washers functional",
           CheckCategory.SAFETY, critical=False),
    _check("heater_defroster_work", "Heater/Defroster Works", "Heat and defrost operational",
           CheckCategory.SAFETY, critical=False),
    _check("mirrors_adjusted", "Mirrors Adjusted", "All mirrors properly adjusted for driver",
           CheckCategory.SAFETY, critical=False),
    _check("trailer_lights_work", "Trailer Lights Working",
           "All trailer tail, brake, turn, and marker lights functional", CheckCategory.TRAILER),
    _check("trailer_brakes_ok", "Trailer Brakes Functional",
           "Trailer brakes engage and release properly via tractor controls", CheckCategory.TRAILER),
    _check("trailer_tires_ok", "Trailer Tires OK", "Adequate tread depth, proper inflation, no sidewall damage",
           CheckCategory.TRAILER),
    _check("trailer_coupling_secure", "Coupling / Fifth Wheel Secure",
           "Fifth wheel locked, kingpin engaged, jaws closed, release handle in", CheckCategory.TRAILER),
    _check("trailer_gladhands_ok", "Glad Hands & Air Lines Secure",
           "Air lines connected properly, no leaks, electrical cord plugged in", CheckCategory.TRAILER),
    _check("trailer_landing_gear_up", "Landing Gear Fully Raised", "Landing gear cranked up and handle secured",
           CheckCategory.TRAILER),
    _check("trailer_doors_secured", "Trailer Doors Secured", "Rear doors closed and latched, seals intact",
           CheckCategory.TRAILER),
    _check("trailer_reflective_tape", "DOT Reflective Tape Intact",
           "Reflective conspicuity tape on sides and rear in good condition", CheckCategory.TRAILER, critical=False),
)


class RequirementCatalog:
    """Lookup and filtering over the declared shots and checks.

    Requirement sets are derived on every call from the trailer mode; nothing
    is cached, so a trailer toggle is reflected immediately.
    """

    def __init__(
        self,
        shots: Optional[Sequence[ShotSpec]] = None,
        checks: Optional[Sequence[CheckSpec]] = None
    ):
        self._shots = tuple(shots if shots is not None else TRACTOR_SHOTS + COUPLING_SHOTS + TRAILER_SHOTS)
        self._checks = tuple(checks if checks is not None else MANUAL_CHECKS)
        self._shots_by_id: Dict[str, ShotSpec] = {shot.id: shot for shot in self._shots}
        self._checks_by_id: Dict[str, CheckSpec] = {check.id: check for check in self._checks}
        if len(self._shots_by_id) != len(self._shots):
            raise ValueError("Duplicate shot ids found in catalog")
        if len(self._checks_by_id) != len(self._checks):
            raise ValueError("Duplicate check ids found in catalog")

    @property
    def shots(self) -> List[ShotSpec]:
        return list(self._shots)

    @property
    def checks(self) -> List[CheckSpec]:
        return list(self._checks)

    def get_shot(self, shot_id: str) -> Optional[ShotSpec]:
        return self._shots_by_id.get(shot_id)

    def get_check(self, check_id: str) -> Optional[CheckSpec]:
        return self._checks_by_id.get(check_id)

    def has_shot(self, shot_id: str) -> bool:
        return shot_id in self._shots_by_id

    def has_check(self, check_id: str) -> bool:
        return check_id in self._checks_by_id

    def visible_shots(self, trailer_mode: bool) -> List[ShotSpec]:
        """Get the shots shown to the driver for the given trailer mode."""
        return [
            shot for shot in self._shots
            if shot.category is ShotCategory.TRACTOR or trailer_mode
        ]

    def required_shots(self, trailer_mode: bool) -> List[ShotSpec]:
        """Get required shots in declaration order."""
        return [shot for shot in self._shots if shot.is_required(trailer_mode)]

    def applicable_checks(self, trailer_mode: bool) -> List[CheckSpec]:
        """Get the checks shown to the driver for the given trailer mode."""
        return [check for check in self._checks if check.is_applicable(trailer_mode)]

    def critical_checks(self, trailer_mode: bool) -> List[CheckSpec]:
        """Get checks that gate submission, in declaration order."""
        return [check for check in self._checks if check.gates_submission(trailer_mode)]

    def checks_by_category(self, trailer_mode: bool) -> Dict[CheckCategory, List[CheckSpec]]:
        """Group applicable checks by category, preserving order."""
        grouped: Dict[CheckCategory, List[CheckSpec]] = {}
        for check in self.applicable_checks(trailer_mode):
            grouped.setdefault(check.category, []).append(check)
        return grouped

    def shot_order(self, shot_ids: Iterable[str]) -> List[str]:
        """Sort shot ids by declaration order; unknown ids keep their order at the end."""
        ids = list(shot_ids)
        positions = {shot.id: index for index, shot in enumerate(self._shots)}
        known = sorted((shot_id for shot_id in ids if shot_id in positions), key=positions.__getitem__)
        unknown = [shot_id for shot_id in ids if shot_id not in positions]
        return known + unknown


DEFAULT_CATALOG = RequirementCatalog()
