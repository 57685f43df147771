from mass_conservation_dae.cli import main


def test_default_run_matches_qss_with_feedback(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Size of the original ODE system: 22 right-side terms." in out
    assert "Size of DAE system 18: 15 right-side terms." in out
    assert "Size of DAE system 19" not in out


def test_flags_select_mass_action_without_feedback(capsys):
    assert main(["--no-michaelis-menten", "--no-feedback"]) == 0
    out = capsys.readouterr().out
    assert "Size of the original ODE system: 48 right-side terms." in out
    assert "Size of DAE system 175:" in out
    assert "pp-ERK-Raf*]/dt" not in out


def test_strict_mode_fails_before_writing(capsys):
    assert main(["--no-michaelis-menten", "--no-feedback", "--strict"]) == 1
    assert capsys.readouterr().out == ""


def test_latex_output(capsys):
    assert main(["--latex"]) == 0
    out = capsys.readouterr().out
    assert out.count("\\begin{align}") == 2
