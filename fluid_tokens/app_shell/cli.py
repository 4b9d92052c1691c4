import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from fluid_tokens.adapters.json_store import JsonFileKeyValueStore, create_json_store
from fluid_tokens.components.preferences import (
    LoadConfigInput,
    ResetConfigInput,
    SaveConfigInput,
    run_load_config,
    run_reset_config,
    run_save_config,
)
from fluid_tokens.components.tokens import (
    GenerateTokensInput,
    PreviewTokensInput,
    families_from_rules,
    resolve_preview_width,
    run_generate,
    run_preview,
)
from fluid_tokens.domain.entities import RootFontSize, TokenConfig
from fluid_tokens.domain.errors import FluidScaleError
from fluid_tokens.ports.storage import StorageError
from fluid_tokens.rules.loader import load_rules
from fluid_tokens.rules.models import REQUIRED_FAMILIES, Rules

logger = logging.getLogger("cli")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CONFIG = 2


def read_config_file(path: Path) -> TokenConfig:
    """Read a TokenConfig from a JSON or YAML file (camelCase or snake_case keys)."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at: {path}")
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid config file {path}: {e}") from e
    try:
        return TokenConfig.model_validate(data or {})
    except ValidationError as e:
        raise ValueError(f"Config validation failed:\n{e}") from e


def resolve_config(
    args: argparse.Namespace,
    rules: Rules,
    store: JsonFileKeyValueStore,
) -> TokenConfig:
    """--config file, else the last-used configuration, else the rules defaults."""
    if args.config:
        config = read_config_file(Path(args.config))
    else:
        config = run_load_config(LoadConfigInput(), store=store, keys=rules.storage).config
        if config is None:
            config = rules.defaults

    if args.root_font_size is not None:
        config = config.model_copy(update={"root_font_size": RootFontSize(args.root_font_size)})
    return config


def handle_generate(args: argparse.Namespace, rules: Rules, store: JsonFileKeyValueStore) -> int:
    config = resolve_config(args, rules, store)
    families = families_from_rules(rules)
    if args.family:
        families = {args.family: families[args.family]}

    output = run_generate(
        GenerateTokensInput(config=config, families=families, unit=rules.output.unit)
    )

    if args.merged:
        print(output.merged_css)
    else:
        print("\n\n".join(scale.css for scale in output.scales.values()))

    if args.save:
        run_save_config(SaveConfigInput(config=config), store=store, keys=rules.storage)
        logger.info("Configuration saved to %s", store.path)
    return EXIT_OK


def handle_preview(args: argparse.Namespace, rules: Rules, store: JsonFileKeyValueStore) -> int:
    config = resolve_config(args, rules, store)
    width = resolve_preview_width(rules, viewport=args.viewport, width=args.width)
    families = families_from_rules(rules)
    if args.family:
        families = {args.family: families[args.family]}

    output = run_preview(PreviewTokensInput(config=config, families=families, width=width))

    print(f"Preview at {width:g}px (root font-size {int(config.root_font_size)}px)")
    for family, items in output.items.items():
        print(f"\n{family}")
        for item in items:
            print(
                f"  {item.name:<10} {item.pixels_text:>9}px"
                f"   min {item.min_text}{rules.output.unit}"
                f"   max {item.max_text}{rules.output.unit}"
            )
    return EXIT_OK


def handle_reset(args: argparse.Namespace, rules: Rules, store: JsonFileKeyValueStore) -> int:
    result = run_reset_config(
        ResetConfigInput(), store=store, defaults=rules.defaults, keys=rules.storage
    )
    print(f"Configuration reset ({result.cleared} stored key(s) cleared).")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fluid-tokens",
        description="Fluid typography, spacing and gap tokens as CSS clamp()",
    )
    parser.add_argument("--rules", help="Path to rules.yaml (default: packaged rules)")
    parser.add_argument("--data-dir", help="Directory holding preferences.json")
    subparsers = parser.add_subparsers(dest="command", required=True)

    config_args = argparse.ArgumentParser(add_help=False)
    config_args.add_argument("--config", help="JSON or YAML configuration file")
    config_args.add_argument(
        "--family", choices=REQUIRED_FAMILIES, help="Only this token family"
    )
    config_args.add_argument(
        "--root-font-size",
        type=int,
        choices=[p.value for p in RootFontSize],
        help="Root font-size preset in px",
    )

    # generate
    generate_parser = subparsers.add_parser(
        "generate", parents=[config_args], help="Print generated CSS"
    )
    generate_parser.add_argument(
        "--merged", action="store_true", help="Print one merged :root block"
    )
    generate_parser.add_argument(
        "--save", action="store_true", help="Store as the last-used configuration"
    )

    # preview
    preview_parser = subparsers.add_parser(
        "preview", parents=[config_args], help="Print actual sizes at a viewport width"
    )
    preview_group = preview_parser.add_mutually_exclusive_group()
    preview_group.add_argument("--viewport", help="Named viewport (mobile, tablet, desktop)")
    preview_group.add_argument("--width", type=float, help="Explicit width in px")

    # reset
    subparsers.add_parser("reset", help="Clear the stored configuration")

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)

    try:
        rules = load_rules(Path(args.rules) if args.rules else None)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        return EXIT_ERROR

    store = create_json_store(args.data_dir)
    handlers = {
        "generate": handle_generate,
        "preview": handle_preview,
        "reset": handle_reset,
    }

    try:
        return handlers[args.command](args, rules, store)
    except FluidScaleError as e:
        logger.error("Invalid configuration: %s", e.message)
        return EXIT_CONFIG
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        return EXIT_ERROR
    except StorageError as e:
        logger.error("Storage failure: %s", e)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
