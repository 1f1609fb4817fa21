import pytest

from bhswz.cli import dump, main, pack

KEY = 659849070

FILES = {
    "LevelDesc_Arena.xml": b'<LevelDesc AssetDir="Arena" LevelName="Arena">\n</LevelDesc>',
    "CutsceneType_Intro.xml": b'<CutsceneType CutsceneName="Intro">\n</CutsceneType>',
    "GameTypes.xml": b"<GameTypes>\n</GameTypes>",
    "ItemTypes.csv": b"ItemTypes\nA,B\n",
}


@pytest.fixture
def source_dir(tmp_path):
    directory = tmp_path / "in"
    directory.mkdir()
    for name, content in FILES.items():
        (directory / name).write_bytes(content)
    (directory / "subdir").mkdir()
    return directory


def test_pack_then_dump_round_trip(tmp_path, source_dir):
    archive = tmp_path / "Game.swz"
    inserted = pack(source_dir, archive, KEY, 3)
    assert sorted(p.name for p in inserted) == sorted(FILES)

    out_dir = tmp_path / "out"
    written = dump(archive, out_dir, KEY)
    assert sorted(p.name for p in written) == sorted(FILES)
    for name, content in FILES.items():
        assert (out_dir / name).read_bytes() == content


def test_dump_skips_unnamed_entries(tmp_path, capsys):
    directory = tmp_path / "in"
    directory.mkdir()
    (directory / "a").write_bytes(b"nothing recognisable")
    (directory / "b").write_bytes(b"<Known>")
    archive = tmp_path / "x.swz"
    pack(directory, archive, KEY)
    written = dump(archive, tmp_path / "out", KEY)
    assert [p.name for p in written] == ["Known.xml"]
    assert "failed to figure out file name" in capsys.readouterr().out


def test_main_commands(tmp_path, source_dir):
    archive = tmp_path / "Game.swz"
    assert main(["pack", str(source_dir), str(archive), str(KEY), "--seed", "9"]) == 0
    assert archive.read_bytes()[4:8] == b"\x00\x00\x00\x09"
    out_dir = tmp_path / "out"
    assert main(["dump", str(archive), str(out_dir), hex(KEY)]) == 0
    assert (out_dir / "ItemTypes.csv").read_bytes() == FILES["ItemTypes.csv"]


def test_main_reports_wrong_key(tmp_path, source_dir, capsys):
    archive = tmp_path / "Game.swz"
    pack(source_dir, archive, KEY)
    assert main(["dump", str(archive), str(tmp_path / "out"), str(KEY + 1)]) == 1
    assert "key checksum mismatch" in capsys.readouterr().err


def test_main_rejects_bad_key_argument(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["dump", str(tmp_path / "a.swz"), str(tmp_path), "-5"])
    assert info.value.code == 2