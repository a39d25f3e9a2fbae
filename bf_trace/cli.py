#!/usr/bin/env python3
"""
Run a Brainfuck program and optionally print its step-by-step trace.

Limits come from, in increasing priority: BF_EXECUTION_LIMIT / BF_MEMORY_LIMIT
(a local .env file is honoured), a --config YAML/JSON file, and the
--execution-limit / --memory-limit flags.
"""

import argparse
import json
import sys

from dotenv import load_dotenv

from .analysis import summarize
from .config import EngineConfig, load_config
from .debugger import print_trace
from .engine import Engine
from .snapshot import HaltState

EXIT_CODES = {
    HaltState.HALTED_NORMALLY: 0,
    HaltState.HALTED_ON_ERROR: 1,
    HaltState.HALTED_ON_LIMIT: 3,
}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bf-trace", description="Run a Brainfuck program and record its execution trace")
    ap.add_argument("program", help="Path to the program file, or '-' to read it from stdin")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--input", default=None, help="Input given as text (latin-1)")
    src.add_argument("--input-file", default=None, help="Path to a file whose raw bytes are the input")
    ap.add_argument("--execution-limit", type=int, default=None, help="Stop after this many instructions (0 = unbounded)")
    ap.add_argument("--memory-limit", type=int, default=None, help="Maximum number of tape cells (0 = unbounded)")
    ap.add_argument("--config", default="", help="YAML or JSON file with execution_limit / memory_limit")
    ap.add_argument("--resolver", choices=["scan", "table"], default="scan", help="Bracket resolution strategy")
    ap.add_argument("--trace", action="store_true", help="Print the step-by-step trace before the output")
    ap.add_argument("--window", type=int, default=10, help="Number of memory cells shown per step in the trace")
    ap.add_argument("--max-steps", type=int, default=None, help="Only print this many steps of the trace")
    ap.add_argument("--summary", action="store_true", help="Print a JSON run summary to stderr")
    return ap


def _read_program(ap: argparse.ArgumentParser, path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    try:
        with open(path, "r") as f:
            return f.read()
    except OSError as e:
        ap.error(f"can't read program {path}: {e}")


def _read_input(ap: argparse.ArgumentParser, args) -> bytes:
    if args.input is not None:
        return args.input.encode("latin-1", errors="replace")
    if args.input_file:
        try:
            with open(args.input_file, "rb") as f:
                return f.read()
        except OSError as e:
            ap.error(f"can't read input {args.input_file}: {e}")
    return b""


def resolve_config(ap: argparse.ArgumentParser, args) -> EngineConfig:
    try:
        config = EngineConfig.from_env()
        if args.config:
            config = load_config(args.config, base=config)
        return config.merged(execution_limit=args.execution_limit, memory_limit=args.memory_limit)
    except (OSError, ValueError) as e:
        ap.error(str(e))


def main(argv=None) -> int:
    load_dotenv()
    ap = build_parser()
    args = ap.parse_args(argv)

    config = resolve_config(ap, args)
    program = _read_program(ap, args.program)
    input_bytes = _read_input(ap, args)

    result = Engine(program, input_bytes, config=config, resolver=args.resolver).run()

    if args.trace:
        print_trace(result, program, input_bytes, window=args.window, max_steps=args.max_steps)
        print()
    sys.stdout.flush()
    sys.stdout.buffer.write(result.output)
    sys.stdout.buffer.flush()

    if args.summary:
        print(json.dumps(summarize(result), indent=2), file=sys.stderr)
    if result.is_error:
        print(f"error: {result.last.message}", file=sys.stderr)

    return EXIT_CODES[result.halt_state]


if __name__ == "__main__":
    sys.exit(main())
