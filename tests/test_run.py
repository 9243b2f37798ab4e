import run


def test_main_prints_timings_and_size(capsys):
    exit_code = run.main(["--products", "120", "--categories", "6", "--seed", "1", "--preview", "3"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Process Time (naive)" in out
    assert "Process Time (indexed)" in out
    assert "Output size: 120 entries" in out
    assert "Standard:" in out
    assert "Product_2" in out


def test_main_skip_naive(capsys):
    exit_code = run.main(["--products", "10", "--categories", "0", "--skip-naive", "--preview", "0"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Process Time (naive)" not in out
    assert "Output size: 10 entries" in out


def test_main_rejects_bad_arguments(capsys):
    assert run.main(["--products", "many"]) == 1
    assert "ERROR" in capsys.readouterr().out

    assert run.main(["--discount", "lots"]) == 1
    assert run.main(["--repeats", "0"]) == 1
    assert run.main(["--products"]) == 1


def test_main_help(capsys):
    assert run.main(["--help"]) == 0
    assert "Usage" in capsys.readouterr().out


def test_main_reuses_benchmark_report(monkeypatch, capsys):
    calls = []
    original = run.run_benchmark

    def counting_benchmark(**kwargs):
        calls.append(kwargs)
        return original(**kwargs)

    monkeypatch.setattr(run, "run_benchmark", counting_benchmark)

    assert run.main(["--products", "30", "--categories", "3", "--seed", "2", "--preview", "2"]) == 0

    out = capsys.readouterr().out
    assert len(calls) == 1
    assert "Output size: 30 entries" in out
    assert "Product_1" in out


def test_main_warns_on_bad_environment(monkeypatch, capsys):
    monkeypatch.setattr(
        run.ReportConfig, "ENV_ERRORS", ["REPORT_PREMIUM_THRESHOLD='fifty' is not a decimal; using 50"]
    )

    assert run.main(["--products", "3", "--preview", "0"]) == 0

    out = capsys.readouterr().out
    assert "WARNING: REPORT_PREMIUM_THRESHOLD='fifty'" in out
    assert "Output size: 3 entries" in out
