#!/usr/bin/env python3
"""
Template generation CLI

Usage:
    templategen --style corporate --hue 200 --scheme triadic --seed 0.42
    templategen --style creative --style-defaults --qa --out template.json
    templategen --random --seed 7
    templategen --suggestion-file answer.json
    templategen --list-presets
"""

from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from templategen.cli.args import build_parser, preset_listing
from templategen.core import configure_logging, dump_json, get_logger, load_config, load_env
from templategen.design.assembler import generate_template, randomize_options, style_defaults
from templategen.design.qa_gates import qa_result_to_dict, run_all
from templategen.design.sdk import StyleOptions
from templategen.design.suggestions import merge_suggestion, parse_suggestion

log = get_logger("generate_template")


def build_options(args, cfg) -> StyleOptions:
    if args.random:
        return randomize_options(args.seed)

    values = cfg.defaults.model_dump()
    style = args.style or values["style"]
    if args.style_defaults:
        values.update(style_defaults(style))
    explicit = {
        "style": args.style,
        "base_hue": args.hue,
        "color_scheme": args.scheme,
        "typography": args.typography,
        "layout": args.layout,
        "seed": args.seed,
    }
    values.update({k: v for k, v in explicit.items() if v is not None})
    return StyleOptions(**values)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    load_env()
    try:
        cfg = load_config(args.config)
    except (ValidationError, ValueError, OSError) as e:
        log.error(f"Could not load config: {e}")
        return 1
    configure_logging(cfg)

    if args.list_presets:
        print(dump_json(preset_listing()))
        return 0

    options = build_options(args, cfg)

    if args.suggestion_file:
        path = Path(args.suggestion_file)
        if not path.exists():
            parser.error(f"suggestion file not found: {path}")
        suggestion = parse_suggestion(path.read_text(encoding="utf-8"))
        options = merge_suggestion(options, suggestion)
        for note in suggestion.design_notes:
            log.info(f"Design note: {note}")

    template = generate_template(options, cfg)
    output = {"options": options.to_dict(), "template": template.to_dict()}
    if args.qa:
        output["qa"] = qa_result_to_dict(run_all(template))

    text = dump_json(output)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text + "\n", encoding="utf-8")
        log.info(f"Template written to {out_path}")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
