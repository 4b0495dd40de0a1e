import argparse
import json
import sys
from pathlib import Path

import structlog

from config.env import env
from config.settings.logging import configure_logging
from src.core.exceptions import OperationError
from src.dids.operations.parser import parse_operation
from src.dids.proof_crypto_engine.canonical.jcs import dumps_bytes, sha256_hex
from src.dids.proof_crypto_engine.canonical.json_values import loads_strict
from src.dids.proof_crypto_engine.commitments import compute_reveal_value, derive_commitment
from src.dids.proof_crypto_engine.jwk import generate_es256k_key_pair

logger = structlog.get_logger(__name__)


def _report_invalid(opts, code: str, detail: dict) -> int:
    if opts.json:
        print(json.dumps({"valid": False, "code": code, "detail": detail}))
    else:
        print(f"Invalid ✗  {code}", file=sys.stderr)
    return 1


def _validate(opts) -> int:
    try:
        buffer = Path(opts.file).read_bytes()
    except OSError as e:
        return _report_invalid(opts, "FILE_NOT_READABLE", {"file": opts.file, "reason": e.strerror or str(e)})
    try:
        operation = parse_operation(buffer)
    except OperationError as e:
        return _report_invalid(opts, e.code.value, e.extra)

    digest = sha256_hex(dumps_bytes(loads_strict(buffer)))
    if opts.json:
        print(
            json.dumps(
                {
                    "valid": True,
                    "type": operation.type.value,
                    "did_suffix": operation.did_unique_suffix,
                    "canonical_sha256": digest,
                }
            )
        )
    else:
        print(f"Valid ✓  {operation.type.value} {operation.did_unique_suffix}  JCS SHA-256: {digest}")
    return 0


def _keygen(opts) -> int:
    public_jwk, private_jwk = generate_es256k_key_pair()
    out = {
        "public_key": public_jwk,
        "private_key": private_jwk,
        "reveal_value": compute_reveal_value(public_jwk),
        "commitment": derive_commitment(public_jwk),
    }
    print(json.dumps(out, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="did-operations", description="DID operation tooling")
    parser.add_argument(
        "--log-level",
        default=env("LOG_LEVEL", default="WARNING"),
        help="Logging level (LOG_LEVEL).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Validate an operation request file")
    validate.add_argument("file")
    validate.add_argument("--json", action="store_true", help="Print JSON report.")
    validate.set_defaults(handler=_validate)

    keygen = sub.add_parser("keygen", help="Generate an ES256K key pair with its reveal value and commitment")
    keygen.set_defaults(handler=_keygen)
    return parser


def main(argv: list[str] | None = None) -> int:
    opts = build_parser().parse_args(argv)
    configure_logging(opts.log_level)
    logger.debug("command_started", command=opts.command)
    return opts.handler(opts)


if __name__ == "__main__":
    sys.exit(main())
