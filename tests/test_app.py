from pathlib import Path

from speech_analysis.app import build_parser, main


def _write_project(tmp_path: Path, speech_file: Path) -> Path:
    (tmp_path / "bing.csv").write_text(
        "term,label\nfreedom,positive\nhappy,positive\nbankrupt,negative\n", encoding="utf-8"
    )
    (tmp_path / "afinn.csv").write_text("term,score\nhappy,3\nbankrupt,-3\n", encoding="utf-8")

    config = tmp_path / "speech.yaml"
    config.write_text(
        "\n".join(
            [
                f"input: {speech_file.name}",
                "filters:",
                "  general_stopwords: false",
                "  custom_stopwords: [applause]",
                "correlation:",
                "  terms: [freedom]",
                "  threshold: 0.3",
                "sentiment:",
                "  lexicons:",
                "    bing: bing.csv",
                "    afinn: afinn.csv",
                "",
            ]
        ),
        encoding="utf-8",
    )
    return config


def test_parser_lists_all_commands():
    parser = build_parser()

    for command in ("template", "analyze", "plot", "write-output"):
        assert parser.parse_args([command]).action == command


def test_template_refuses_overwrite(tmp_path, capsys):
    dest = tmp_path / "speech.yaml"

    assert main(["template", str(dest)]) == 0
    assert "input: speech.txt" in dest.read_text(encoding="utf-8")

    assert main(["template", str(dest)]) == 2
    assert "--force" in capsys.readouterr().err

    assert main(["template", str(dest), "--force"]) == 0


def test_analyze_prints_tables(tmp_path, speech_file, capsys):
    config = _write_project(tmp_path, speech_file)

    assert main(["analyze", "--config", str(config), "--top", "3"]) == 0

    out = capsys.readouterr().out
    assert "Top 3 terms:" in out
    assert "freedom" in out
    assert "Associations for 'freedom'" in out
    assert "Sentiment (bing, binary): positive 4, negative 1, net 3" in out
    assert "Sentiment (afinn, signed)" in out


def test_analyze_rejects_bad_threshold(tmp_path, speech_file):
    config = _write_project(tmp_path, speech_file)

    assert main(["analyze", "-c", str(config), "--threshold", "2"]) == 2


def test_missing_config_is_reported(tmp_path, capsys):
    assert main(["analyze", "--config", str(tmp_path / "nope.yaml")]) == 2
    assert "template" in capsys.readouterr().err


def test_write_output_refuses_existing_file(tmp_path, speech_file, monkeypatch):
    config = _write_project(tmp_path, speech_file)
    (tmp_path / "report.ods").write_bytes(b"")
    monkeypatch.setattr("speech_analysis.actions.write_output.is_interactive_tty", lambda: False)

    assert main(["write-output", "--config", str(config)]) == 2
