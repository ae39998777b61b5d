from deskstat import cpu


def _stat(path, *values):
    path.write_text("cpu  " + " ".join(str(v) for v in values) + " 0 0 0\n"
                    "cpu0 1 2 3 4 5 6 7 0 0 0\n")


def test_first_sample_has_no_usage(tmp_path):
    path = tmp_path / "stat"
    _stat(path, 100, 0, 100, 800, 0, 0, 0)
    assert cpu.CpuUsage(str(path))(None) is None


def test_usage_between_two_samples(tmp_path):
    path = tmp_path / "stat"
    usage = cpu.CpuUsage(str(path))
    _stat(path, 100, 0, 100, 800, 0, 0, 0)
    usage(None)
    _stat(path, 200, 0, 200, 1000, 0, 0, 0)
    assert usage(None) == "50"


def test_fully_idle_interval_is_zero(tmp_path):
    path = tmp_path / "stat"
    usage = cpu.CpuUsage(str(path))
    _stat(path, 10, 0, 10, 100, 0, 0, 0)
    usage(None)
    _stat(path, 10, 0, 10, 300, 0, 0, 0)
    assert usage(None) == "0"


def test_iowait_is_not_busy(tmp_path):
    path = tmp_path / "stat"
    usage = cpu.CpuUsage(str(path))
    _stat(path, 10, 0, 10, 100, 5, 0, 0)
    usage(None)
    _stat(path, 10, 0, 10, 100, 500, 0, 0)
    assert usage(None) == "0"


def test_unchanged_sample_is_unknown(tmp_path):
    path = tmp_path / "stat"
    usage = cpu.CpuUsage(str(path))
    _stat(path, 10, 0, 10, 100, 0, 0, 0)
    usage(None)
    assert usage(None) is None


def test_usage_is_a_percentage(tmp_path):
    path = tmp_path / "stat"
    usage = cpu.CpuUsage(str(path))
    _stat(path, 7, 3, 11, 50, 2, 1, 1)
    usage(None)
    _stat(path, 90, 13, 40, 77, 9, 4, 8)
    result = int(usage(None))
    assert 0 <= result <= 100


def test_missing_stat_is_unknown(tmp_path, monkeypatch):
    monkeypatch.setattr(cpu, "STAT", str(tmp_path / "absent"))
    assert cpu.cpu_perc(None) is None


def test_truncated_stat_is_unknown(tmp_path):
    path = tmp_path / "stat"
    path.write_text("cpu 1 2 3\n")
    assert cpu.CpuUsage(str(path))(None) is None


def test_cpu_freq_in_hertz_units(tmp_path, monkeypatch):
    path = tmp_path / "freq"
    path.write_text("1800000\n")
    monkeypatch.setattr(cpu, "CPU_FREQ", str(path))
    assert cpu.cpu_freq(None) == "1.8 G"


def test_cpu_freq_missing_is_unknown(tmp_path, monkeypatch):
    monkeypatch.setattr(cpu, "CPU_FREQ", str(tmp_path / "absent"))
    assert cpu.cpu_freq(None) is None