# tests/test_config.py
from pathlib import Path

import pytest

from obs_overlay.config import (
    DEFAULT_OVERLAY_HTML,
    OVERLAY_NAME,
    OVERLAY_WIDTH,
    OverlaySettings,
    load_env,
    overlay_url,
)


def test_defaults_from_empty_env():
    s = OverlaySettings.from_env({})
    assert (s.host, s.port, s.password) == ("localhost", 4455, None)
    assert s.overlay_name == OVERLAY_NAME == "Lofi DJ Overlay"
    assert s.overlay_width == OVERLAY_WIDTH == 480
    assert s.overlay_html == DEFAULT_OVERLAY_HTML


def test_values_from_env(tmp_path):
    s = OverlaySettings.from_env({
        "OBS_WEBSOCKET_HOST": "192.168.0.10",
        "OBS_WEBSOCKET_PORT": "4460",
        "OBS_WEBSOCKET_PASSWORD": "pw",
        "OVERLAY_HTML_PATH": str(tmp_path / "dj.html"),
    })
    assert (s.host, s.port, s.password) == ("192.168.0.10", 4460, "pw")
    assert s.overlay_html == tmp_path / "dj.html"


def test_bad_port():
    with pytest.raises(ValueError, match="OBS_WEBSOCKET_PORT"):
        OverlaySettings.from_env({"OBS_WEBSOCKET_PORT": "45x5"})


def test_overlay_url_is_absolute_file_uri(tmp_path):
    url = overlay_url(tmp_path / "a b" / "index.html")
    assert url.startswith("file:///")
    assert url.endswith("/a%20b/index.html")


def test_packaged_overlay_html_exists():
    assert DEFAULT_OVERLAY_HTML.is_file()


def test_load_env_does_not_override(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("OBS_WEBSOCKET_PORT=5000\nOBS_WEBSOCKET_PASSWORD=fromfile\n", encoding="utf-8")
    monkeypatch.setenv("OBS_WEBSOCKET_PORT", "4455")

    assert load_env(env_file) is True
    s = OverlaySettings.from_env()
    assert s.port == 4455
    assert s.password == "fromfile"


def test_load_env_missing_file(tmp_path):
    assert load_env(Path(tmp_path / "nope.env")) is False
