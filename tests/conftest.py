# tests/conftest.py
import logging
from pathlib import Path
from typing import Any, Optional

import pytest

from obs_overlay.config import OverlaySettings
from obs_overlay.obs.obs_client import SceneItem


class FakeOBSClient:
    """OBSClient 대역. 요청을 기록하고 미리 정한 씬/아이템을 돌려줌."""

    def __init__(self, scene: str = "Main", items: Optional[list] = None, base_height: int = 1080):
        self.scene = scene
        self.items = list(items or [])
        self.base_height = base_height
        self.calls: list[tuple[str, tuple]] = []
        self.connected = False
        self.disconnected = False
        self.fail_on: Optional[str] = None
        self._next_id = 41

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if self.fail_on == name:
            raise RuntimeError(f"{name} boom")

    async def connect(self) -> None:
        self.connected = True

    async def disconnect(self) -> None:
        self.disconnected = True

    async def get_current_program_scene(self) -> str:
        self._record("get_current_program_scene")
        return self.scene

    async def get_scene_items(self, scene_name: str) -> list:
        self._record("get_scene_items", scene_name)
        return list(self.items)

    async def get_video_settings(self) -> dict:
        self._record("get_video_settings")
        return {"baseWidth": 1920, "baseHeight": self.base_height}

    async def create_input(self, scene_name, input_name, input_kind, input_settings, enabled=True) -> int:
        self._record("create_input", scene_name, input_name, input_kind, input_settings)
        self._next_id += 1
        return self._next_id

    async def set_scene_item_transform(self, scene_name, scene_item_id, transform) -> None:
        self._record("set_scene_item_transform", scene_name, scene_item_id, transform)

    async def set_scene_item_enabled(self, scene_name, scene_item_id, enabled) -> None:
        self._record("set_scene_item_enabled", scene_name, scene_item_id, enabled)

    async def press_input_properties_button(self, input_name, property_name) -> None:
        self._record("press_input_properties_button", input_name, property_name)

    async def remove_input(self, input_name) -> None:
        self._record("remove_input", input_name)

    def mutating_calls(self) -> list:
        reads = {"get_current_program_scene", "get_scene_items", "get_video_settings"}
        return [c for c in self.calls if c[0] not in reads]


@pytest.fixture
def settings(tmp_path: Path) -> OverlaySettings:
    html = tmp_path / "index.html"
    html.write_text("<html></html>", encoding="utf-8")
    return OverlaySettings(overlay_html=html)


@pytest.fixture
def overlay_item() -> SceneItem:
    return SceneItem(source_name="Lofi DJ Overlay", scene_item_id=7)


@pytest.fixture
def fake_client():
    return FakeOBSClient()


@pytest.fixture(autouse=True)
def _no_env_side_effects(monkeypatch):
    # 로컬 .env / 쉘 설정이 테스트에 섞이지 않도록.
    # setenv 먼저: load_dotenv가 테스트 중 채운 값도 끝나면 원복됨
    for k in (
        "OBS_WEBSOCKET_HOST",
        "OBS_WEBSOCKET_PORT",
        "OBS_WEBSOCKET_PASSWORD",
        "OVERLAY_HTML_PATH",
        "LOG_DIR",
    ):
        monkeypatch.setenv(k, "")
        monkeypatch.delenv(k)


@pytest.fixture
def restore_root_logging():
    """setup_logging이 바꾼 루트 로거 핸들러/레벨을 테스트 후 원복."""
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)
