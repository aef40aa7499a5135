"""CLI entrypoint for classifying text against the configured categories."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from semcat.categories import CategoryRegistry
from semcat.classifier import Classifier
from semcat.config import SemcatConfig, load_effective_config
from semcat.errors import SemcatError
from semcat.logging_utils import configure_logging
from semcat.reporting import render_categories, render_json, render_text

logger = logging.getLogger(__name__)

DEMO_TEXT = "The interface is very elegant. Visually satisfying and modern. A real delight for the user."


def load_yaml_dict(path: str | None) -> dict | None:
    if not path:
        return None
    data = yaml.safe_load(Path(path).read_text())
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ValueError(f"YAML at {path} must decode to a mapping")
    return data


def load_config(args: argparse.Namespace) -> SemcatConfig:
    runtime = load_yaml_dict(args.runtime_override) or {}
    if args.provider:
        runtime = {**runtime, "embedding": {**(runtime.get("embedding") or {}), "provider": args.provider}}
    return load_effective_config(
        repo_path=args.repo_path,
        org_defaults=load_yaml_dict(args.org_config),
        system_defaults=load_yaml_dict(args.system_config),
        runtime_override=runtime,
    )


def load_env_file(path: str | None) -> None:
    if path is None:
        default = Path(".env")
        if default.is_file():
            load_dotenv(default, override=False)
        return
    env_path = Path(path)
    if not env_path.is_file():
        raise ValueError(f"env file not found: {path}")
    load_dotenv(env_path, override=False)


def add_common_config_flags(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--repo-path", default=".", help="Directory holding an optional .semcat.yaml")
    cmd.add_argument("--org-config", help="Optional org defaults YAML")
    cmd.add_argument("--system-config", help="Optional system defaults YAML")
    cmd.add_argument("--runtime-override", help="Optional runtime override YAML")
    cmd.add_argument(
        "--provider",
        choices=["openai-compatible", "local-hash"],
        help="Override embedding.provider from config",
    )
    cmd.add_argument("--format", choices=["text", "json"], default="text", help="Output format")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Classify text against described categories using embeddings")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")

    sub = parser.add_subparsers(dest="command", required=True)

    classify = sub.add_parser("classify", help="Rank the configured categories for a text")
    classify.add_argument("text", nargs="?", help="Text to classify (defaults to --input-file or stdin)")
    classify.add_argument("--input-file", help="Read the text to classify from this file")
    classify.add_argument("--demo", action="store_true", help="Classify the built-in sample sentence")
    classify.add_argument("--top", type=int, default=0, help="Only print the N best categories (0 = all)")
    classify.add_argument("--env-file", help="Load credentials from this dotenv file (default: ./.env if present)")
    add_common_config_flags(classify)

    categories = sub.add_parser("categories", help="List the configured categories")
    add_common_config_flags(categories)

    return parser


def _read_input_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.input_file:
        return Path(args.input_file).read_text()
    if args.demo:
        return DEMO_TEXT
    if not sys.stdin.isatty():
        return sys.stdin.read()
    raise ValueError("No text given; pass TEXT, --input-file, --demo or pipe text on stdin")


def _run_classify(args: argparse.Namespace) -> int:
    load_env_file(args.env_file)
    config = load_config(args)
    text = _read_input_text(args)
    if not text.strip():
        raise ValueError("Input text is empty")

    classifier = Classifier.from_config(config)
    result = classifier.classify(text)

    if args.format == "json":
        print(render_json(result, top=args.top))
    else:
        print(render_text(result, top=args.top))
    return 0


def _run_categories(args: argparse.Namespace) -> int:
    config = load_config(args)
    registry = CategoryRegistry.from_mapping(config.categories)
    print(render_categories(registry, args.format))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        if args.command == "classify":
            return _run_classify(args)
        if args.command == "categories":
            return _run_categories(args)
    except SemcatError as exc:
        logger.error("Error during classification: %s", exc)
        return 1
    except (ValidationError, ValueError, OSError) as exc:
        logger.error("Invalid input or configuration: %s", exc)
        return 2

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
