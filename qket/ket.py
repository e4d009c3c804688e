# qket/ket.py
import numbers
import numpy as np
from dataclasses import dataclass, replace
from typing import Union

Amplitude = Union[complex, float, int, np.number]

COMPLEX_ZERO = np.complex128(0.0 + 0.0j)
COMPLEX_ONE = np.complex128(1.0 + 0.0j)

# inf/nan propagate silently through ket arithmetic
_IEEE_QUIET = dict(invalid="ignore", over="ignore")

@dataclass(frozen=True)
class ComplexKet:
    """Unnormalized two-level state a|0> + b|1> with complex128 amplitudes."""
    first: Amplitude   # coefficient of |0>
    second: Amplitude  # coefficient of |1>

    # let numpy scalars on the left hand `k * ket` back to __rmul__
    __array_ufunc__ = None

    def __post_init__(self):
        object.__setattr__(self, "first", np.complex128(self.first))
        object.__setattr__(self, "second", np.complex128(self.second))

    @staticmethod
    def basis(k: int) -> "ComplexKet":
        if k == 0:
            return KET_ZERO
        if k == 1:
            return KET_ONE
        raise ValueError(f"basis index must be 0 or 1, got {k}")

    @staticmethod
    def from_numpy(arr) -> "ComplexKet":
        a = np.asarray(arr, dtype=np.complex128)
        if a.shape != (2,):
            raise ValueError(f"expected shape (2,), got {a.shape}")
        return ComplexKet(a[0], a[1])

    def as_numpy(self) -> np.ndarray:
        return np.array([self.first, self.second], dtype=np.complex128)

    def copy(self) -> "ComplexKet":
        return replace(self)

    def scale(self, k: Amplitude) -> "ComplexKet":
        """Multiply both amplitudes by the complex scalar k."""
        k = np.complex128(k)
        with np.errstate(**_IEEE_QUIET):
            return ComplexKet(k * self.first, k * self.second)

    # exact IEEE comparison per component: NaN != NaN, 0.0 == -0.0
    def __eq__(self, other):
        if not isinstance(other, ComplexKet):
            return NotImplemented
        return bool(self.first == other.first and self.second == other.second)

    def __hash__(self):
        return hash((self.first, self.second))

    def __add__(self, other):
        if not isinstance(other, ComplexKet):
            return NotImplemented
        with np.errstate(**_IEEE_QUIET):
            return ComplexKet(self.first + other.first, self.second + other.second)

    def __mul__(self, k):
        if not isinstance(k, numbers.Number):
            return NotImplemented
        return self.scale(k)

    __rmul__ = __mul__

    def __repr__(self):
        return f"ComplexKet(first={complex(self.first)!r}, second={complex(self.second)!r})"

KET_ZERO = ComplexKet(COMPLEX_ONE, COMPLEX_ZERO)
KET_ONE = ComplexKet(COMPLEX_ZERO, COMPLEX_ONE)
