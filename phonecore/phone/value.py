"""Phone number value object: a calling code plus a national number."""
from __future__ import annotations

from phonecore.phone.formatter import format_phone, is_valid_phone, trim_phone

_DEFAULT_CALLING_CODE = 1


class PhoneNumberValue:
    """Calling code and national number as entered in a form.

    The national number is stored trimmed and may keep its punctuation
    (``"(720) 352-0676"``).  Nothing is validated on construction; use
    :attr:`is_valid` when the number must be checked.

    Equality compares the stored fields, so ``"(720) 352-0676"`` and
    ``"7203520676"`` are different values even though they dial the same
    number.
    """

    __slots__ = ("calling_code", "_national_number")

    def __init__(
        self,
        calling_code: int | None = None,
        national_number: str | None = None,
    ) -> None:
        self.calling_code: int = _DEFAULT_CALLING_CODE if calling_code is None else calling_code
        self.national_number = national_number

    @classmethod
    def from_value(cls, other: PhoneNumberValue) -> PhoneNumberValue:
        return cls(other.calling_code, other.national_number)

    def copy(self) -> PhoneNumberValue:
        return self.from_value(self)

    @property
    def national_number(self) -> str:
        return self._national_number

    @national_number.setter
    def national_number(self, value: str | None) -> None:
        self._national_number = (value or "").strip()

    @property
    def is_empty(self) -> bool:
        return not self._national_number

    @property
    def e164(self) -> str:
        """Best-effort E.164 form, e.g. ``"+17203520676"``.

        Only as good as the fields: an empty national number gives just the
        calling code.
        """
        number = f"+{self.calling_code}"
        if self._national_number:
            number += self._national_number
        return trim_phone(number)

    @property
    def formatted(self) -> str:
        """Display form, e.g. ``"+1 (720) 352-0676"``."""
        return format_phone(self.e164)

    @property
    def is_valid(self) -> bool:
        return is_valid_phone(self.e164)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.calling_code == other.calling_code
            and self._national_number == other._national_number
        )

    def __hash__(self) -> int:
        return hash((self._national_number, self.calling_code))

    def __repr__(self) -> str:
        return f"CallingCode: {self.calling_code}, NationalNumber: {self._national_number}"
