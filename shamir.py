from utils import add, sub, multiply, modinv, MissingShareError


def lagrange_interpolate(x, x_s, y_s, p):
    """Lagrange interpolation at point x. x_s and y_s are lists of k x,y pairs."""
    terms = []
    k = len(x_s)
    for i in range(k):
        xi, yi = x_s[i], y_s[i]
        num = multiply([sub(x, x_s[j], p) for j in range(k) if j != i], p)
        # each factor is already reduced into [0, p)
        den = multiply([sub(xi, x_s[j], p) for j in range(k) if j != i], p)
        li = (num * modinv(den, p)) % p
        terms.append((yi * li) % p)
    return add(terms, p)


def reconstruct_secret(shares, p, k=None):
    """Recover secret (polynomial at x=0) from the first k shares.

    ``k`` defaults to the number of shares supplied. Raises
    MissingShareError when fewer than k shares are given and
    NoInverseError when two shares have the same x.
    """
    if k is None:
        k = len(shares)
    if k < 1:
        raise ValueError(f"Threshold must be at least 1, got {k}")
    if len(shares) < k:
        raise MissingShareError(f"Need {k} shares, got {len(shares)}")
    x_s, y_s = zip(*shares[:k])
    return lagrange_interpolate(0, x_s, y_s, p)
