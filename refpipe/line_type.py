import unicodedata
from enum import Enum


class LineType(Enum):
    """Category of a refrigerant line. The suction and discharge lines carry
    refrigerant vapor, the liquid line carries liquid refrigerant.
    """
    LIQUID = 'liquid'
    SUCTION = 'suction'
    DISCHARGE = 'discharge'

    @property
    def is_vapor_line(self) -> bool:
        return self is not LineType.LIQUID

    @classmethod
    def parse(cls, name: 'str | LineType') -> 'LineType':
        """Returns the line type that corresponds with `name`. Besides the
        English names, the line codes of the Spanish-language sizing sheets
        ('liquido', 'succion', 'descarga') are also recognized. Letter case and
        accents are ignored.

        Raises
        ------
        ValueError
            If `name` doesn't refer to a known line type.
        """
        if isinstance(name, LineType):
            return name
        key = unicodedata.normalize('NFKD', str(name).strip().lower())
        key = ''.join(c for c in key if not unicodedata.combining(c))
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown line type: {name!r}") from None


_ALIASES = {
    'liquid': LineType.LIQUID,
    'liquido': LineType.LIQUID,
    'suction': LineType.SUCTION,
    'succion': LineType.SUCTION,
    'discharge': LineType.DISCHARGE,
    'descarga': LineType.DISCHARGE,
}
