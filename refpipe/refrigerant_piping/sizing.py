"""
SIZING REFRIGERANT LINES MADE FROM COPPER TUBING.

For a given refrigerant, line type, system capacity, equivalent line length and
vertical rise, each copper tube of the catalog is evaluated (refrigerant mass
flow rate, flow velocity, Reynolds number, friction factor, pressure drop and
equivalent temperature loss). The smallest copper tube that satisfies both the
velocity criterion and the temperature loss criterion of the line type is
selected.

Refrigerant properties are constant approximations (see
`refpipe.fluids.refrigerant`); the evaporating, condensing and liquid
temperatures of the sizing input are carried along, but are not used in the
calculations.
"""
from collections.abc import Iterable
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from refpipe import Quantity
from refpipe.logging import ModuleLogger
from refpipe.line_type import LineType
from refpipe.fluids import (
    UnsupportedRefrigerant,
    InvalidRefrigeratingEffect,
    lookup_refrigerant,
    select_density,
    select_viscosity,
    select_refrigerating_effect
)
from refpipe.fluid_flow import (
    friction_factor,
    cross_sectional_area,
    reynolds_number,
    darcy_pressure_drop
)
from .copper_tubing import CopperTube, list_copper_tubes
from .criteria import DesignCriteria, DEFAULT_CRITERIA


Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.WARNING)


@dataclass(frozen=True)
class SizingInput:
    """Dataclass that holds the design data of a refrigerant line.

    Parameters
    ----------
    refrigerant:
        Refrigerant designation, e.g. 'R134a'.
    line_type:
        Liquid, suction, or discharge line. A string is converted with
        `LineType.parse`.
    Q_dot:
        Cooling capacity of the system.
    L_eq:
        Equivalent length of the line, i.e. the straight length plus the
        equivalent lengths of its fittings and accessories.
    elevation:
        Vertical rise of the line. A positive value means that the line
        contains a vertical riser.
    T_evp, T_cnd, T_liq: optional
        Evaporating, condensing and liquid temperature. Not used by the
        calculations.
    """
    refrigerant: str
    line_type: LineType | str
    Q_dot: Quantity
    L_eq: Quantity
    elevation: Quantity = Q_(0.0, 'ft')
    T_evp: Quantity | None = None
    T_cnd: Quantity | None = None
    T_liq: Quantity | None = None

    def __post_init__(self):
        object.__setattr__(self, 'line_type', LineType.parse(self.line_type))

    @property
    def has_riser(self) -> bool:
        return self.elevation.magnitude > 0.0


@dataclass(frozen=True)
class TubeEvaluation:
    """Calculation results of a refrigerant line for one copper tube.

    Parameters
    ----------
    copper_tube:
        The evaluated copper tube.
    m_dot:
        Refrigerant mass flow rate.
    u:
        Mean flow velocity.
    Re:
        Reynolds number.
    f:
        Darcy friction factor.
    dP:
        Frictional pressure drop along the equivalent length of the line.
    dT:
        Saturation temperature loss equivalent with the pressure drop.
    warnings:
        Design warnings about the flow velocity.
    """
    copper_tube: CopperTube
    m_dot: Quantity
    u: Quantity
    Re: float
    f: float
    dP: Quantity
    dT: Quantity
    warnings: tuple[str, ...] = ()

    @property
    def u_si(self) -> Quantity:
        return self.u.to('m / s')

    def __str__(self):
        fields = [
            f"{self.copper_tube.DN} (ID {self.copper_tube.D_int.to('inch'):~P.3f})",
            f"flow velocity = {self.u.to('ft / min'):~P.1f} ({self.u_si:~P.2f})",
            f"pressure drop = {self.dP.to('psi'):~P.3f} "
            f"({self.dT.to('delta_degF'):~P.3f})",
            f"Re = {self.Re:.0f}"
        ]
        s = ' | '.join(fields)
        for warning in self.warnings:
            s += f"\nWarning: {warning}"
        return s


@dataclass(frozen=True)
class SizingResult:
    """The evaluations of all copper tubes in catalog order, and the index of
    the selected copper tube (`None` if no copper tube satisfies the design
    criteria).
    """
    sizing_input: SizingInput
    evaluations: tuple[TubeEvaluation, ...]
    selected_index: int | None = None

    @property
    def selected(self) -> TubeEvaluation | None:
        if self.selected_index is None:
            return None
        return self.evaluations[self.selected_index]

    def is_selected(self, index: int) -> bool:
        return self.selected_index is not None and index == self.selected_index


class SizingStatus(Enum):
    OK = 'ok'
    UNSUPPORTED_REFRIGERANT = 'unsupported refrigerant'
    INVALID_REFRIGERATING_EFFECT = 'invalid refrigerating effect'


@dataclass(frozen=True)
class SizingOutcome:
    """Either a sizing result (status OK), or the reason why no sizing result
    could be determined.
    """
    status: SizingStatus
    result: SizingResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is SizingStatus.OK


class RefrigerantLine(ABC):
    """Refrigerant line of given design data made from a given copper tube."""

    def __init__(
        self,
        sizing_input: SizingInput,
        copper_tube: CopperTube,
        criteria: DesignCriteria = DEFAULT_CRITERIA
    ) -> None:
        """
        Parameters
        ----------
        sizing_input:
            Design data of the refrigerant line.
        copper_tube:
            Instance of dataclass `CopperTube` containing the dimensions of the
            circular cross-section (nominal diameter, outside diameter, inside
            diameter).
        criteria:
            Design limits of flow velocity and temperature loss.

        Raises
        ------
        UnsupportedRefrigerant
            If the refrigerant is not in the property table.
        InvalidRefrigeratingEffect
            If the refrigerating effect of the refrigerant is not positive.
        """
        self.sizing_input = sizing_input
        self.copper_tube = copper_tube
        self.criteria = criteria
        rfg = sizing_input.refrigerant
        self.rho = select_density(rfg, sizing_input.line_type)
        self.mu = select_viscosity(rfg, sizing_input.line_type)
        self.m_dot = self._get_m_dot(sizing_input.Q_dot)

        self.u: Quantity = Q_(float('nan'), 'ft / min')
        self.Re: float = float('nan')
        self.f: float = float('nan')
        self.dP: Quantity = Q_(float('nan'), 'psi')
        self.dT: Quantity = Q_(float('nan'), 'delta_degF')

    def _get_m_dot(self, Q_dot: Quantity) -> Quantity:
        """Returns the refrigerant mass flow rate based on the system's cooling
        capacity `Q_dot`.
        """
        q_eff = select_refrigerating_effect(self.sizing_input.refrigerant)
        if not q_eff.magnitude > 0.0:
            raise InvalidRefrigeratingEffect(self.sizing_input.refrigerant, q_eff)
        m_dot = Q_dot / q_eff
        return m_dot.to('lb / s')

    @property
    def L_eq(self) -> Quantity:
        """Equivalent length of the line, not smaller than the minimum length
        of the design criteria.
        """
        L_eq = self.sizing_input.L_eq
        L_eq_min = self.criteria.L_eq_min
        if L_eq < L_eq_min:
            return L_eq_min
        return L_eq

    def flow_velocity(self) -> Quantity:
        """Returns the mean flow velocity of the refrigerant in the tube. The
        velocity is zero if the tube has no cross-section.
        """
        A = cross_sectional_area(self.copper_tube.D_int)
        if A.magnitude > 0.0:
            V_dot = self.m_dot / self.rho
            self.u = (V_dot / A).to('ft / min')
        else:
            self.u = Q_(0.0, 'ft / min')
        return self.u

    def pressure_drop(self) -> tuple[Quantity, Quantity]:
        """Returns the frictional pressure drop along the equivalent length of
        the line and the associated loss of saturation temperature. Method
        `flow_velocity()` must have been called before.
        """
        D = self.copper_tube.D_int
        self.Re = reynolds_number(self.rho, self.u, D, self.mu)
        self.f = friction_factor(self.Re, self.criteria.Re_crit)
        if self.f > 0.0:
            dP = darcy_pressure_drop(self.f, self.L_eq, D, self.rho, self.u)
        else:
            dP = Q_(0.0, 'Pa')
        self.dP = dP.to('psi')
        self.dT = (self.dP * self._dT_per_dP).to('delta_degF')
        return self.dP, self.dT

    @property
    @abstractmethod
    def _dT_per_dP(self) -> Quantity:
        ...

    @property
    @abstractmethod
    def dT_max(self) -> Quantity:
        """Maximum allowable equivalent temperature loss of the line."""
        ...

    @abstractmethod
    def check_flow_velocity(self) -> list[str]:
        """Returns the warnings about the flow velocity in the line."""
        ...

    @abstractmethod
    def velocity_ok(self) -> bool:
        """Returns `True` if the flow velocity satisfies the velocity criterion
        of the line type.
        """
        ...

    def temperature_loss_ok(self) -> bool:
        return self.dT <= self.dT_max

    def is_acceptable(self) -> bool:
        """Returns `True` if both the flow velocity and the temperature loss
        criterion are satisfied.
        """
        return self.temperature_loss_ok() and self.velocity_ok()

    def evaluate(self) -> TubeEvaluation:
        """Calculates the flow velocity, the pressure drop and the equivalent
        temperature loss, checks the flow velocity, and returns the results.
        """
        self.flow_velocity()
        self.pressure_drop()
        warnings = self.check_flow_velocity()
        evaluation = TubeEvaluation(
            copper_tube=self.copper_tube,
            m_dot=self.m_dot,
            u=self.u,
            Re=self.Re,
            f=self.f,
            dP=self.dP,
            dT=self.dT,
            warnings=tuple(warnings)
        )
        logger.debug("%s", evaluation)
        return evaluation


class VaporLine(RefrigerantLine):
    """Suction or discharge line. In a vertical riser the vapor velocity must
    stay between a lower limit (oil return) and an upper limit (noise, pressure
    drop). In a horizontal run only the lower limit applies.
    """

    @property
    def dT_max(self) -> Quantity:
        return self.criteria.dT_max_vapor

    def check_flow_velocity(self) -> list[str]:
        u = self.u.to('m / s')
        c = self.criteria
        warnings = []
        if self.sizing_input.has_riser:
            if u < c.u_riser_min:
                warnings.append(
                    f"Velocity in vertical riser below {c.u_riser_min:~P.1f}: "
                    f"possible oil return problem."
                )
            elif u > c.u_riser_max:
                warnings.append(
                    f"Velocity in vertical riser above {c.u_riser_max:~P.1f}: "
                    f"possible noise and high pressure drop."
                )
        elif u < c.u_horizontal_min:
            warnings.append(
                f"Velocity in horizontal run below {c.u_horizontal_min:~P.1f}: "
                f"insufficient oil return."
            )
        return warnings

    def velocity_ok(self) -> bool:
        u = self.u.to('m / s')
        c = self.criteria
        if self.sizing_input.has_riser:
            return c.u_riser_min <= u <= c.u_riser_max
        return u >= c.u_horizontal_min


class SuctionLine(VaporLine):

    @property
    def _dT_per_dP(self) -> Quantity:
        return self.criteria.dT_per_dP_suction


class DischargeLine(VaporLine):
    # Same velocity limits as a suction line, also in horizontal runs.

    @property
    def _dT_per_dP(self) -> Quantity:
        return self.criteria.dT_per_dP_other


class LiquidLine(RefrigerantLine):
    """Liquid line. Only an upper velocity limit applies; oil and liquid
    refrigerant mix readily, so oil return is not a concern.
    """

    @property
    def _dT_per_dP(self) -> Quantity:
        return self.criteria.dT_per_dP_other

    @property
    def dT_max(self) -> Quantity:
        return self.criteria.dT_max_liquid

    def check_flow_velocity(self) -> list[str]:
        u_max = self.criteria.u_liquid_max
        if self.u > u_max:
            return [
                f"Liquid line velocity above {u_max:~P.0f}: increased pressure "
                f"drop and risk of flash gas."
            ]
        return []

    def velocity_ok(self) -> bool:
        return self.u <= self.criteria.u_liquid_max


_RFG_LINES: dict[LineType, type[RefrigerantLine]] = {
    LineType.LIQUID: LiquidLine,
    LineType.SUCTION: SuctionLine,
    LineType.DISCHARGE: DischargeLine,
}


def evaluate_tube(
    sizing_input: SizingInput,
    copper_tube: CopperTube,
    criteria: DesignCriteria = DEFAULT_CRITERIA
) -> TubeEvaluation:
    """Returns the calculation results of the refrigerant line described by
    `sizing_input` for a single copper tube.
    """
    rfg_line = _RFG_LINES[sizing_input.line_type](sizing_input, copper_tube, criteria)
    return rfg_line.evaluate()


class RefrigerantLineSizer(ABC):
    """
    Abstract base class for sizing suction lines, discharge lines, and liquid
    lines.
    """
    _LINE_TYPE: LineType = None
    _RFG_LINE: type[RefrigerantLine] = None

    def __init__(
        self,
        copper_tubes: Iterable[CopperTube] | None = None,
        criteria: DesignCriteria | None = None
    ) -> None:
        """
        Parameters
        ----------
        copper_tubes: optional
            Copper tubes to select from. By default, all copper tubes of the
            catalog.
        criteria: optional
            Design limits. By default, `DEFAULT_CRITERIA`.
        """
        if copper_tubes is None:
            copper_tubes = list_copper_tubes()
        # Sort copper tubes from small to large internal diameter.
        self.copper_tubes = tuple(sorted(
            copper_tubes,
            key=lambda copper_tube: copper_tube.D_int.to('inch').m
        ))
        self.criteria = criteria or DEFAULT_CRITERIA

    def size(self, sizing_input: SizingInput) -> SizingResult:
        """Evaluates every copper tube from small to large internal diameter and
        selects the first one that satisfies both the flow velocity criterion
        and the temperature loss criterion of the line type. This is the
        smallest suitable copper tube; no "best fit" among the suitable copper
        tubes is searched for.

        Returns
        -------
        `SizingResult` with the evaluations of all copper tubes. If no copper
        tube is suitable, the result has no selected copper tube.

        Raises
        ------
        UnsupportedRefrigerant
            If the refrigerant is not in the property table.
        InvalidRefrigeratingEffect
            If the refrigerating effect of the refrigerant is not positive.
        """
        if sizing_input.line_type is not self._LINE_TYPE:
            raise ValueError(
                f"{type(self).__name__} cannot size a "
                f"{sizing_input.line_type.value} line."
            )
        lookup_refrigerant(sizing_input.refrigerant)
        rfg_lines = [
            self._RFG_LINE(sizing_input, copper_tube, self.criteria)
            for copper_tube in self.copper_tubes
        ]
        evaluations = tuple(rfg_line.evaluate() for rfg_line in rfg_lines)
        selected_index = None
        for i, rfg_line in enumerate(rfg_lines):
            if rfg_line.is_acceptable():
                selected_index = i
                break
        if selected_index is None:
            logger.info(
                f"No copper tube satisfies the design criteria of the "
                f"{sizing_input.line_type.value} line."
            )
        else:
            logger.info(
                f"Selected copper tube for the {sizing_input.line_type.value} "
                f"line: {evaluations[selected_index].copper_tube.DN}"
            )
        return SizingResult(
            sizing_input=sizing_input,
            evaluations=evaluations,
            selected_index=selected_index
        )


class SuctionLineSizer(RefrigerantLineSizer):
    """Selects a copper tube with suitable diameter for a suction line."""
    _LINE_TYPE = LineType.SUCTION
    _RFG_LINE = SuctionLine


class DischargeLineSizer(RefrigerantLineSizer):
    """Selects a copper tube with suitable diameter for a discharge line."""
    _LINE_TYPE = LineType.DISCHARGE
    _RFG_LINE = DischargeLine


class LiquidLineSizer(RefrigerantLineSizer):
    """Selects a copper tube with suitable diameter for a liquid line."""
    _LINE_TYPE = LineType.LIQUID
    _RFG_LINE = LiquidLine


_SIZERS: dict[LineType, type[RefrigerantLineSizer]] = {
    LineType.LIQUID: LiquidLineSizer,
    LineType.SUCTION: SuctionLineSizer,
    LineType.DISCHARGE: DischargeLineSizer,
}


def size_line(
    sizing_input: SizingInput,
    copper_tubes: Iterable[CopperTube] | None = None,
    criteria: DesignCriteria | None = None
) -> SizingResult:
    """Sizes the refrigerant line described by `sizing_input` with the sizer
    that belongs to its line type. See `RefrigerantLineSizer.size()`.
    """
    sizer = _SIZERS[sizing_input.line_type](copper_tubes, criteria)
    return sizer.size(sizing_input)


def try_size_line(
    sizing_input: SizingInput,
    copper_tubes: Iterable[CopperTube] | None = None,
    criteria: DesignCriteria | None = None
) -> SizingOutcome:
    """Same as `size_line()`, but instead of raising `UnsupportedRefrigerant`
    or `InvalidRefrigeratingEffect` a `SizingOutcome` is returned with a status
    that tells which of both errors occurred.
    """
    try:
        result = size_line(sizing_input, copper_tubes, criteria)
    except UnsupportedRefrigerant as err:
        logger.info(str(err))
        return SizingOutcome(SizingStatus.UNSUPPORTED_REFRIGERANT, error=str(err))
    except InvalidRefrigeratingEffect as err:
        logger.info(str(err))
        return SizingOutcome(SizingStatus.INVALID_REFRIGERATING_EFFECT, error=str(err))
    return SizingOutcome(SizingStatus.OK, result=result)
