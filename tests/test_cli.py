# tests/test_cli.py
import json

from templategen.cli.args import build_parser, preset_listing
from templategen.generate_template import main


def test_parser_defaults_are_unset():
    args = build_parser().parse_args([])
    assert args.style is None and args.hue is None and args.seed is None
    assert not args.random and not args.qa


def test_list_presets(capsys):
    assert main(["--list-presets"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data == preset_listing()
    assert "portfolio" in data["layouts"]


def test_generate_to_file(tmp_path):
    out = tmp_path / "out" / "template.json"
    code = main([
        "--style", "corporate", "--hue", "200", "--scheme", "triadic",
        "--layout", "modern-split", "--seed", "0.42", "--qa", "--out", str(out),
    ])
    assert code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["options"]["baseHue"] == 200
    assert data["template"]["layout"]["name"] == "modern-split"
    assert len(data["template"]["colors"]) == 5
    assert data["qa"]["ok"] is True


def test_style_defaults_flag(capsys):
    assert main(["--style", "creative", "--style-defaults", "--scheme", "analogous"]) == 0
    options = json.loads(capsys.readouterr().out)["options"]
    assert options["typography"] == "Creative Modern"
    assert options["layout"] == "asymmetric"
    assert options["colorScheme"] == "analogous"


def test_random_is_seeded(capsys):
    main(["--random", "--seed", "11"])
    first = capsys.readouterr().out
    main(["--random", "--seed", "11"])
    assert capsys.readouterr().out == first


def test_suggestion_file_is_merged(tmp_path, capsys):
    path = tmp_path / "answer.txt"
    path.write_text('```json\n{"style": "abstract", "layout": "magazine", "designNotes": []}\n```', encoding="utf-8")
    assert main(["--suggestion-file", str(path)]) == 0
    options = json.loads(capsys.readouterr().out)["options"]
    assert options["style"] == "abstract"
    assert options["layout"] == "magazine"


def test_invalid_config_exits_nonzero(config_file):
    assert main(["--config", config_file("layout:\n  variation_factor: 2\n")]) == 1
