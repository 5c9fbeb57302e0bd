from dataclasses import dataclass
from typing import Optional

from sympy import isprime

DEFAULT_PRIME = 208351617316091241234326746312124448251235562226470491514186331217050270460481

FIELDS = {
    "default": DEFAULT_PRIME,
    "mersenne61": 2**61 - 1,
    "mersenne127": 2**127 - 1,
    "secp256k1": 2**256 - 2**32 - 977,
}


@dataclass(frozen=True)
class FieldSetup:
    prime: int = DEFAULT_PRIME
    """The prime modulus of the field. Must exceed every share value."""
    name: Optional[str] = None
    """Name of the field when it is one of the supported fields."""

    @classmethod
    def named(cls, name: str) -> "FieldSetup":
        supported_fields = cls.supported_fields()
        if name not in supported_fields:
            raise ValueError("{} is not one of the specified fields. "
                             "Please choose one of the following fields: {}".format(name, supported_fields))
        return cls(FIELDS[name], name)

    @classmethod
    def from_string(cls, text: str) -> "FieldSetup":
        """Parse a prime given in decimal or 0x-prefixed hex."""
        try:
            prime = int(text.strip(), 0)
        except ValueError:
            raise ValueError(f"Invalid prime modulus: {text!r}") from None
        if prime < 2:
            raise ValueError(f"Prime modulus must be at least 2, got {prime}")
        return cls(prime)

    @staticmethod
    def supported_fields():
        return list(FIELDS)

    @property
    def bits(self) -> int:
        return self.prime.bit_length()

    def check_prime(self) -> None:
        """Raise ValueError if the modulus is composite. Not used by the core."""
        if not isprime(self.prime):
            raise ValueError(f"Modulus {self.prime} is not prime")

    def __str__(self):
        label = self.name or "custom"
        return f"{label} field ({self.bits}-bit prime)"
