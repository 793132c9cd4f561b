from __future__ import annotations
import argparse, json, sys

from loguru import logger

from .buffer import ByteBuffer
from .models.info import VarintRecord


def _parse_hex(text: str) -> bytes:
    cleaned = "".join(text.split())
    if cleaned[:2].lower() == "0x":
        cleaned = cleaned[2:]
    return bytes.fromhex(cleaned)


def cmd_encode(args):
    buf = ByteBuffer()
    for v in args.values:
        n = buf.write_uint64_var(v)
        logger.debug("encoded {} in {} bytes", v, n)
    print(buf.bytes().hex())
    return 0


def cmd_decode(args):
    buf = ByteBuffer.from_bytes(_parse_hex(args.data))
    logger.debug("decoding {} bytes", buf.size())
    out = []
    while buf.pos() < buf.size():
        if args.max_values is not None and len(out) >= args.max_values:
            break
        start = buf.pos()
        value = buf.read_uint64_var()
        rec = VarintRecord(offset=start, length=buf.pos() - start, value=value)
        out.append(rec.model_dump(mode="json"))
    print(json.dumps(out, indent=2))
    return 0


def cmd_info(args):
    buf = ByteBuffer.from_bytes(_parse_hex(args.data))
    if args.seek is not None:
        buf.seek_from_start(args.seek)
    print(json.dumps(buf.info().model_dump(mode="json"), indent=2))
    return 0


def build_parser():
    p = argparse.ArgumentParser(prog="mbytes", description="byte buffer and varint utilities")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("encode", help="print the varint encoding of VALUE... as hex")
    sp.add_argument("values", nargs="+", type=int, metavar="VALUE")
    sp.set_defaults(func=cmd_encode)

    sp = sub.add_parser("decode", help="decode hex-encoded varints to JSON records")
    sp.add_argument("data", metavar="HEX")
    sp.add_argument("--max-values", type=int, default=None, help="Stop after decoding N values")
    sp.set_defaults(func=cmd_decode)

    sp = sub.add_parser("info", help="print buffer state for hex-encoded bytes as JSON")
    sp.add_argument("data", metavar="HEX")
    sp.add_argument("--seek", type=int, default=None, help="Seek to this offset before reporting")
    sp.set_defaults(func=cmd_info)

    return p


def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if ns.verbose else "WARNING")
    logger.enable("mbytes")

    try:
        return ns.func(ns)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
