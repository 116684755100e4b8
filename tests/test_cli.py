import os

from splashgen import cli


def test_no_config_prints_usage(monkeypatch, capsys):
    monkeypatch.delenv("SPLASH_CONFIG", raising=False)
    assert cli.main([]) is None
    out = capsys.readouterr().out
    assert "Please provide a config file" in out
    assert "usage: splashgen" in out


def test_bad_config_reports_error(tmp_path, capsys):
    assert cli.main(["-c", str(tmp_path / "missing.yaml"), "-p", str(tmp_path)]) is None
    assert "[ERROR] Config file not found" in capsys.readouterr().out


def test_runs_generation(flutter_project, make_png, capsys):
    make_png("a.png")
    (flutter_project / "splash.yaml").write_text('color: "#112233"\nimage: a.png\n', encoding="utf-8")

    cli.main(["--config", "splash.yaml", "--project-dir", str(flutter_project), "--platform", "ios"])

    out = capsys.readouterr().out
    assert "[DONE] Splash screen generation complete!" in out
    assert os.path.isfile(flutter_project / "ios" / "Runner" / "Base.lproj" / "LaunchScreen.storyboard")
    assert not os.path.exists(flutter_project / "android" / "app" / "src" / "main" / "res")


def test_config_from_environment(flutter_project, make_png, monkeypatch, capsys):
    make_png("a.png")
    cfg = flutter_project / "splash.yaml"
    cfg.write_text("image: a.png\n", encoding="utf-8")
    monkeypatch.setenv("SPLASH_CONFIG", str(cfg))
    monkeypatch.setenv("SPLASH_PROJECT_DIR", str(flutter_project))

    cli.main([])

    assert "[DONE] Splash screen generation complete!" in capsys.readouterr().out
    assert os.path.isfile(flutter_project / "android" / "app" / "src" / "main" / "res" / "drawable" / "splash_image.png")
