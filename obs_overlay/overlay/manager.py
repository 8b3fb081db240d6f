"""
DJ 오버레이(브라우저 소스) 관리: create / show / hide / refresh / remove.

현재 프로그램 씬에서 이름으로 오버레이를 찾은 뒤, 액션마다 OBS 요청 1~2건만 보냄.
create는 CreateInput → SetSceneItemTransform 두 번 나눠 보내므로,
중간에 끊기면 위치 미지정 상태로 남을 수 있음.
"""

from __future__ import annotations

import logging
from typing import Optional

from obs_overlay.config import OverlaySettings
from obs_overlay.obs.obs_client import OBSClient, SceneItem

logger = logging.getLogger(__name__)

ACTIONS = ("create", "show", "hide", "refresh", "remove")

BROWSER_SOURCE_KIND = "browser_source"
# 브라우저 소스 속성 버튼: "현재 페이지의 캐시 새로 고침"
REFRESH_PROPERTY = "refreshnocache"

# 좌상단 (0,0), 바운딩 박스 없음, 원본 크기
LEFT_COLUMN_TRANSFORM = {
    "positionX": 0,
    "positionY": 0,
    "boundsType": "OBS_BOUNDS_NONE",
    "scaleX": 1.0,
    "scaleY": 1.0,
}


class OverlayNotFoundError(LookupError):
    """현재 씬에 오버레이가 없음"""


class OverlayManager:
    """씬의 오버레이 아이템 하나를 관리. 상태는 실행마다 OBS에서 새로 조회."""

    def __init__(self, client: OBSClient, settings: Optional[OverlaySettings] = None):
        self.client = client
        self.settings = settings or OverlaySettings()
        self.scene_name: Optional[str] = None
        self.overlay: Optional[SceneItem] = None

    @property
    def name(self) -> str:
        return self.settings.overlay_name

    async def find_overlay(self) -> Optional[SceneItem]:
        """현재 씬 이름 조회 → 씬 아이템 목록에서 오버레이 이름과 같은 첫 항목."""
        self.scene_name = await self.client.get_current_program_scene()
        print(f"Current scene: {self.scene_name}")
        items = await self.client.get_scene_items(self.scene_name)
        self.overlay = next((i for i in items if i.source_name == self.name), None)
        logger.debug(
            "씬 '%s' 아이템 %d개, 오버레이 %s",
            self.scene_name, len(items), "있음" if self.overlay else "없음",
        )
        return self.overlay

    def _require_overlay(self, hint: str = "") -> SceneItem:
        if self.overlay is None:
            raise OverlayNotFoundError(f"{self.name} not found{hint}")
        return self.overlay

    async def run(self, action: str) -> None:
        if action not in ACTIONS:
            raise ValueError(f"알 수 없는 액션: {action}")
        await self.find_overlay()
        await getattr(self, action)()

    async def create(self) -> None:
        if self.overlay is not None:
            print(f'{self.name} already exists. Use "refresh" to reload.')
            logger.info("오버레이 이미 존재: %s (id=%s)", self.name, self.overlay.scene_item_id)
            return

        video = await self.client.get_video_settings()
        height = int(video["baseHeight"])
        width = self.settings.overlay_width

        html = self.settings.overlay_html
        if not html.exists():
            logger.warning("오버레이 HTML 파일 없음 (URL은 그대로 생성): %s", html)
        url = self.settings.overlay_url
        print(f"Creating browser source: {url}")

        scene_item_id = await self.client.create_input(
            self.scene_name,
            self.name,
            BROWSER_SOURCE_KIND,
            {
                "url": url,
                "width": width,
                "height": height,
                "css": "",
                "shutdown": False,
                "restart_when_active": False,
            },
        )
        await self.client.set_scene_item_transform(
            self.scene_name, scene_item_id, dict(LEFT_COLUMN_TRANSFORM)
        )
        logger.info("오버레이 생성: %s id=%s %dx%d", self.name, scene_item_id, width, height)
        print(f'Created "{self.name}" ({width}x{height})')
        print("Position: Left side (0,0)")
        print('\nClick "Start Lofi Session" in OBS to begin!')

    async def _set_enabled(self, enabled: bool, hint: str = "") -> None:
        item = self._require_overlay(hint)
        await self.client.set_scene_item_enabled(self.scene_name, item.scene_item_id, enabled)
        logger.info("오버레이 %s: %s", "표시" if enabled else "숨김", self.name)

    async def show(self) -> None:
        await self._set_enabled(True, hint=". Run: obs-overlay create")
        print("DJ Overlay shown")

    async def hide(self) -> None:
        await self._set_enabled(False)
        print("DJ Overlay hidden")

    async def refresh(self) -> None:
        self._require_overlay()
        await self.client.press_input_properties_button(self.name, REFRESH_PROPERTY)
        logger.info("오버레이 새로고침(캐시 무시): %s", self.name)
        print("DJ Overlay refreshed")

    async def remove(self) -> None:
        self._require_overlay()
        await self.client.remove_input(self.name)
        logger.info("오버레이 삭제: %s", self.name)
        print("DJ Overlay removed")
