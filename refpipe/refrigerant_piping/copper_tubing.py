from collections.abc import Iterable
from dataclasses import dataclass
import pandas as pd
from refpipe import Quantity


Q_ = Quantity


@dataclass(frozen=True)
class CopperTube:
    """Dataclass with specifications of copper tube referred to a nominal
    diameter.

    Parameters
    ----------
    DN:
        Nominal tube diameter. Different wall thicknesses of the same nominal
        diameter share the same `DN`.
    D_ext:
        Outside tube diameter.
    D_int:
        Inside tube diameter.
    t_raw:
        Tube wall thickness in millimeters, as found in the source table.
    """
    DN: str
    D_ext: Quantity
    D_int: Quantity
    t_raw: float

    @property
    def t(self) -> Quantity:
        return Q_(self.t_raw, 'mm')


# nominal diameter (inch), outside diameter (mm), wall thickness (mm)
RAW_COPPER_TUBES = [
    ('1/4', 6.35, 0.8),
    ('3/8', 9.52, 0.8),
    ('1/2', 12.7, 0.8),
    ('5/8', 15.87, 0.8),
    ('5/8', 15.87, 1.0),
    ('3/4', 19.06, 1.0),
    ('7/8', 22.22, 1.0),
    ('7/8', 22.22, 1.14),
    ('1', 25.4, 1.0),
    ('1 1/8', 28.57, 1.0),
    ('1 1/8', 28.57, 1.25),
    ('1 3/8', 34.92, 1.25),
    ('1 3/8', 34.92, 1.4),
    ('1 5/8', 41.27, 1.25),
    ('1 5/8', 41.27, 1.5),
    ('2 1/8', 53.97, 1.25),
    ('2 1/8', 53.97, 1.8),
    ('2 5/8', 66.67, 1.65),
    ('2 5/8', 66.67, 2.03),
    ('3 1/8', 79.37, 1.65),
    ('3 5/8', 92.08, 2.11),
    ('4 1/8', 104.78, 2.5)
]


def _create_record(DN: str, D_ext_mm: float, t_mm: float) -> CopperTube:
    D_ext = D_ext_mm / 25.4
    t = t_mm / 25.4
    D_int = D_ext - 2 * t
    if D_int <= 0.0:
        raise ValueError(
            f"Copper tube {DN} with outside diameter {D_ext_mm} mm and wall "
            f"thickness {t_mm} mm has no positive inside diameter."
        )
    return CopperTube(
        DN=DN,
        D_ext=Q_(D_ext, 'inch'),
        D_int=Q_(D_int, 'inch'),
        t_raw=t_mm
    )


def build_copper_tubing(rows: Iterable[tuple[str, float, float]]) -> tuple[CopperTube, ...]:
    """Converts rows of (nominal diameter, outside diameter in mm, wall
    thickness in mm) into copper tubes sorted from small to large inside
    diameter. Rows with the same nominal diameter but a different wall
    thickness remain separate entries.

    Raises
    ------
    ValueError
        If a row results in an inside diameter that is not positive.
    """
    copper_tubes = [_create_record(*row) for row in rows]
    copper_tubes.sort(key=lambda copper_tube: copper_tube.D_int.to('inch').m)
    return tuple(copper_tubes)


class CopperTubing:
    """Read-only catalog of the copper tubes that are available for sizing
    refrigerant lines.
    """
    tubes: tuple[CopperTube, ...] = build_copper_tubing(RAW_COPPER_TUBES)

    @classmethod
    def get_record(cls, DN: str) -> CopperTube | None:
        """Returns the first copper tube (i.e. with the smallest inside
        diameter) with nominal diameter `DN`, or `None` if `DN` is not in the
        catalog.
        """
        for copper_tube in cls.tubes:
            if copper_tube.DN == DN:
                return copper_tube
        return None

    @classmethod
    def get_records(cls, *dns: str) -> tuple[CopperTube, ...]:
        """Get all copper tubes (all wall thicknesses) with the given nominal
        diameters, in catalog order. When called without parameters, all
        copper tubes in the catalog are returned.
        """
        if not dns:
            return cls.tubes
        return tuple(
            copper_tube for copper_tube in cls.tubes
            if copper_tube.DN in dns
        )

    @classmethod
    def to_frame(cls) -> pd.DataFrame:
        """Returns the catalog as a Pandas DataFrame."""
        df = pd.DataFrame({
            'DN': [ct.DN for ct in cls.tubes],
            'D_ext [in]': [ct.D_ext.to('inch').m for ct in cls.tubes],
            'D_int [in]': [ct.D_int.to('inch').m for ct in cls.tubes],
            't [mm]': [ct.t_raw for ct in cls.tubes]
        })
        return df


def list_copper_tubes() -> tuple[CopperTube, ...]:
    """Returns all copper tubes of the catalog, sorted from small to large
    inside diameter.
    """
    return CopperTubing.tubes
