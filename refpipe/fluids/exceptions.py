class RefrigerantDataError(Exception):
    """Base class for errors raised by the refrigerant property table."""
    pass


class UnsupportedRefrigerant(RefrigerantDataError):
    """Raised when a refrigerant code is not present in the property table."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Unsupported refrigerant: {code!r}")


class InvalidRefrigeratingEffect(RefrigerantDataError):
    """Raised when the refrigerating effect of a refrigerant is not positive,
    so that the refrigerant mass flow rate cannot be derived from the system
    capacity.
    """

    def __init__(self, code: str, q_eff) -> None:
        self.code = code
        self.q_eff = q_eff
        super().__init__(
            f"Invalid refrigerating effect for refrigerant {code!r}: "
            f"{q_eff} (must be greater than zero)"
        )
