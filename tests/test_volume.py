from deskstat.volume import vol_perc


def test_missing_mixer(tmp_path, capsys):
    card = tmp_path / "mixer"
    assert vol_perc(str(card)) is None
    assert "open" in capsys.readouterr().err


def test_regular_file_is_not_a_mixer(tmp_path, capsys):
    card = tmp_path / "mixer"
    card.write_bytes(b"\0" * 16)
    assert vol_perc(str(card)) is None
    assert "SOUND_MIXER_READ_DEVMASK" in capsys.readouterr().err


def test_directory_is_not_a_mixer(tmp_path, capsys):
    assert vol_perc(str(tmp_path)) is None
    assert "slstatus" not in capsys.readouterr().err.lower()