import pytest
from PIL import Image

from globegif import cli


class TestMain:
    def test_renders_gif(self, geojson_file, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("GLOBEGIF_STEP", "45")
        monkeypatch.setenv("GLOBEGIF_SIZE", "32")
        assert cli.main([str(geojson_file)]) == 0
        with Image.open(tmp_path / "earth.gif") as gif:
            assert gif.size == (32, 32)

    def test_output_flag(self, geojson_file, tmp_path):
        out = tmp_path / "spin.gif"
        rc = cli.main([str(geojson_file), "-o", str(out), "--step", "120", "--size", "24"])
        assert rc == 0
        assert out.exists()

    def test_missing_input_is_fatal(self, tmp_path, monkeypatch, caplog):
        monkeypatch.chdir(tmp_path)
        assert cli.main([str(tmp_path / "nowhere.geojson")]) == 1
        assert not (tmp_path / "earth.gif").exists()
        assert "input failed" in caplog.text

    def test_empty_collection_is_fatal(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        src = tmp_path / "empty.geojson"
        src.write_text('{"type": "FeatureCollection", "features": []}', encoding="utf-8")
        assert cli.main([str(src)]) == 1
        assert not (tmp_path / "earth.gif").exists()

    def test_bad_proj_data_is_fatal(self, geojson_file, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        rc = cli.main([str(geojson_file), "--proj-data", str(tmp_path / "no-proj")])
        assert rc == 1
        assert not (tmp_path / "earth.gif").exists()

    def test_bad_env_setting_is_fatal(self, geojson_file, monkeypatch):
        monkeypatch.setenv("GLOBEGIF_SIZE", "huge")
        assert cli.main([str(geojson_file)]) == 1

    def test_missing_argument(self):
        with pytest.raises(SystemExit) as exc:
            cli.main([])
        assert exc.value.code == 2
