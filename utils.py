def add(values: list[int], size: int) -> int:
    result = 0
    for v in values:
        result = (result + v) % size
    return result

def sub(a: int, b: int, size: int) -> int:
    return (a % size - b % size + size) % size

def multiply(values: list[int], size: int) -> int:
    result = 1
    for v in values:
        result = (result * v) % size
    return result

def modinv(a: int, m: int) -> int:
    """Modular inverse using Extended Euclidean Algorithm."""
    if m < 1:
        raise ValueError(f"Modulus must be positive, got {m}")
    if m == 1:
        return 0
    m0 = m
    x0, x1 = 0, 1
    low = a % m
    if low == 0:
        raise NoInverseError(a, m0)
    while low > 1:
        if m == 0:
            # gcd(a, m) == low
            raise NoInverseError(a, m0)
        q = low // m
        low, m = m, low % m
        x0, x1 = x1 - q * x0, x0
    if x1 < 0:
        x1 += m0
    return x1


class ReconstructionError(Exception):
    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class InvalidDigitError(ReconstructionError):
    def __init__(self, char: str, base: int, value: str):
        self.char = char
        self.base = base
        self.value = value
        super().__init__(f"Invalid digit '{char}' for base {base} in value {value}")


class MissingShareError(ReconstructionError):
    def __init__(self, message):
        super().__init__(f"Missing share. {message}")


class NoInverseError(ReconstructionError):
    def __init__(self, a: int, m: int):
        self.a = a
        self.m = m
        super().__init__(f"No modular inverse exists for {a} mod {m}. "
                         "Duplicate x-coordinates or a non-prime modulus?")


class ShareFormatError(ReconstructionError):
    def __init__(self, message):
        super().__init__(f"Malformed share document. {message}")
