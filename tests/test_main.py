from careflow.main import format_icer, main
from careflow.economics import DOMINANT


def test_baseline_only_run(capsys):
    main(['--population', '20000', '--weeks', '4'])
    out = capsys.readouterr().out
    assert "Baseline" in out
    assert "No AI interventions selected" in out
    assert "ICER" not in out


def test_ai_run_reports_icer(capsys):
    main(['--disease', 'malaria', '--health-system', 'weak_rural_system',
          '--population', '20000', '--weeks', '4', '--triage', '--self-care', '--rural'])
    out = capsys.readouterr().out
    assert "triage, self_care" in out
    assert "ICER:" in out


def test_format_icer():
    assert format_icer(DOMINANT).startswith("Dominant")
    assert format_icer(float('inf')).startswith("Undefined")
    assert format_icer(1234.5) == "$1,234.50 per DALY averted"
