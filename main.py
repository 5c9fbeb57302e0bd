import sys
import logging
import argparse
from dataclasses import dataclass
from typing import Optional

from Crypto.Util.number import long_to_bytes

from encoding import int_to_base
from params import FieldSetup
from shamir import reconstruct_secret
from shares import load_shares
from utils import ReconstructionError

logger = logging.getLogger(__name__)

DEFAULT_FILES = ["input1.json", "input2.json"]

# === Helper Functions ===
@dataclass
class Result:
    filename: str
    secret: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

def parse_selection(text):
    try:
        ids = [int(part) for part in text.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid share list: {text!r}") from None
    if not ids or any(i < 1 for i in ids):
        raise argparse.ArgumentTypeError(f"share identifiers must be positive integers: {text!r}")
    return ids

def parse_base(text):
    base = int(text)
    if not 2 <= base <= 36:
        raise argparse.ArgumentTypeError("base must be between 2 and 36")
    return base

def render_text(secret):
    raw = long_to_bytes(secret)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return repr(raw)

def process_file(filename, setup: FieldSetup, select=None) -> Result:
    """Reconstruct the secret of one share file; failures are captured, not raised."""
    try:
        k, shares = load_shares(filename, select)
        logger.debug("%s: k=%d, x=%s", filename, k, [s.x for s in shares])
        secret = reconstruct_secret(shares, setup.prime, k)
    except (ReconstructionError, OSError, ValueError) as e:
        logger.debug("%s failed", filename, exc_info=True)
        return Result(filename, error=getattr(e, "message", None) or str(e))
    return Result(filename, secret=secret)

# === Main ===
def main(argv=None):
    parser = argparse.ArgumentParser(description="Reconstruct Shamir secrets from JSON share files")
    parser.add_argument("files", nargs="*", default=DEFAULT_FILES, help="Share files to process (default: input1.json input2.json)")
    field = parser.add_mutually_exclusive_group()
    field.add_argument("-p", "--prime", help="Prime modulus, decimal or 0x-prefixed hex")
    field.add_argument("-f", "--field", choices=FieldSetup.supported_fields(), help="Use a named field instead of --prime")
    parser.add_argument("--check-prime", action="store_true", help="Verify the modulus is prime before reconstructing")
    parser.add_argument("-s", "--shares", type=parse_selection, help="Comma separated share identifiers to use, e.g. 1,3,5")
    parser.add_argument("-b", "--output-base", type=parse_base, default=10, help="Base to print the secret in (default: 10)")
    parser.add_argument("--text", action="store_true", help="Also print the secret decoded as big-endian bytes")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.prime is not None:
            setup = FieldSetup.from_string(args.prime)
        elif args.field is not None:
            setup = FieldSetup.named(args.field)
        else:
            setup = FieldSetup(name="default")
        if args.check_prime:
            setup.check_prime()
    except ValueError as e:
        parser.error(str(e))
    logger.debug("using %s", setup)

    failed = 0
    for filename in args.files:
        print(f"\nProcessing file: {filename}")
        result = process_file(filename, setup, args.shares)
        if not result.ok:
            failed += 1
            print(f"Error processing {filename}: {result.error}", file=sys.stderr)
            continue
        print(f"Reconstructed secret c = {int_to_base(result.secret, args.output_base)}")
        if args.text:
            print(f"As text: {render_text(result.secret)}")
    return 1 if failed else 0

if __name__ == "__main__":
    sys.exit(main())
