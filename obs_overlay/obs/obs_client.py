"""
OBS WebSocket(v5) 클라이언트. simpleobsws로 연결·인증 후 요청 전송.

OBS 28 이상은 obs-websocket이 내장되어 있음. 도구 → WebSocket 서버 설정에서
서버 활성화 후 포트(기본 4455)와 비밀번호를 .env에 맞춰 두어야 합니다.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Optional

import simpleobsws

logger = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 4455


class OBSError(RuntimeError):
    """OBS 연동 오류 공통 기본 클래스"""


class OBSConnectionError(OBSError):
    """연결 또는 인증(Identify) 실패"""


class OBSRequestError(OBSError):
    """OBS가 요청을 실패 상태로 응답한 경우"""

    def __init__(self, request_type: str, code: Optional[int] = None, comment: Optional[str] = None):
        self.request_type = request_type
        self.code = code
        self.comment = comment
        detail = f" - {comment}" if comment else ""
        super().__init__(f"{request_type} 실패 (code={code}){detail}")


@dataclass
class SceneItem:
    """씬 아이템 (GetSceneItemList 응답 항목)"""
    source_name: str
    scene_item_id: int
    enabled: bool = True
    input_kind: Optional[str] = None

    @classmethod
    def from_response(cls, item: dict[str, Any]) -> "SceneItem":
        return cls(
            source_name=item.get("sourceName", ""),
            scene_item_id=int(item.get("sceneItemId", 0)),
            enabled=bool(item.get("sceneItemEnabled", True)),
            input_kind=item.get("inputKind"),
        )


class OBSClient:
    """
    OBS WebSocket 연결 및 씬/입력 조작.
    요청은 하나씩 순서대로 보내고 응답을 기다림 (병렬 요청 없음).
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        password: Optional[str] = None,
        identify_timeout: int = 10,
    ):
        self.host = host
        self.port = int(port)
        self.password = password or None
        self.identify_timeout = identify_timeout
        self._ws = None
        self._lock = asyncio.Lock()

    @property
    def url(self) -> str:
        return f"ws://{self.host}:{self.port}"

    @property
    def is_connected(self) -> bool:
        return self._ws is not None

    async def connect(self) -> None:
        """OBS에 연결 후 Identify 완료까지 대기. 이미 연결돼 있으면 무시."""
        async with self._lock:
            if self._ws is not None:
                return

            params = simpleobsws.IdentificationParameters(ignoreNonFatalRequestChecks=False)
            ws = simpleobsws.WebSocketClient(
                url=self.url,
                password=self.password,
                identification_parameters=params,
            )
            logger.debug("OBS 연결 시도: %s", self.url)
            await ws.connect()
            if not await ws.wait_until_identified(timeout=self.identify_timeout):
                await ws.disconnect()
                raise OBSConnectionError(
                    f"OBS WebSocket 인증 실패: {self.url} (비밀번호/포트 확인)"
                )
            self._ws = ws
            logger.info("OBS WebSocket 연결됨: %s", self.url)

    async def disconnect(self) -> None:
        async with self._lock:
            if self._ws is not None:
                await self._ws.disconnect()
                self._ws = None
                logger.info("OBS WebSocket 연결 해제.")

    async def __aenter__(self) -> "OBSClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.disconnect()

    async def call(self, request_type: str, data: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """요청 1건 전송 후 responseData 반환. 실패 상태면 OBSRequestError."""
        if self._ws is None:
            raise OBSConnectionError("OBS에 연결되지 않았습니다. connect()를 먼저 호출하세요.")
        logger.debug("OBS 요청: %s %s", request_type, data or {})
        ret = await self._ws.call(simpleobsws.Request(request_type, data))
        if not ret.ok():
            status = ret.requestStatus
            raise OBSRequestError(
                request_type,
                code=getattr(status, "code", None),
                comment=getattr(status, "comment", None),
            )
        return ret.responseData or {}

    async def get_current_program_scene(self) -> str:
        data = await self.call("GetCurrentProgramScene")
        return data["currentProgramSceneName"]

    async def get_scene_items(self, scene_name: str) -> list[SceneItem]:
        data = await self.call("GetSceneItemList", {"sceneName": scene_name})
        return [SceneItem.from_response(i) for i in data.get("sceneItems") or []]

    async def get_video_settings(self) -> dict[str, Any]:
        """baseWidth/baseHeight(캔버스), outputWidth/outputHeight 등"""
        return await self.call("GetVideoSettings")

    async def create_input(
        self,
        scene_name: str,
        input_name: str,
        input_kind: str,
        input_settings: dict[str, Any],
        enabled: bool = True,
    ) -> int:
        """입력 생성 + 씬에 추가. 생성된 sceneItemId 반환."""
        data = await self.call("CreateInput", {
            "sceneName": scene_name,
            "inputName": input_name,
            "inputKind": input_kind,
            "inputSettings": input_settings,
            "sceneItemEnabled": enabled,
        })
        return int(data["sceneItemId"])

    async def set_scene_item_transform(
        self, scene_name: str, scene_item_id: int, transform: dict[str, Any]
    ) -> None:
        await self.call("SetSceneItemTransform", {
            "sceneName": scene_name,
            "sceneItemId": scene_item_id,
            "sceneItemTransform": transform,
        })

    async def set_scene_item_enabled(self, scene_name: str, scene_item_id: int, enabled: bool) -> None:
        await self.call("SetSceneItemEnabled", {
            "sceneName": scene_name,
            "sceneItemId": scene_item_id,
            "sceneItemEnabled": enabled,
        })

    async def press_input_properties_button(self, input_name: str, property_name: str) -> None:
        """입력 속성의 버튼 누르기 (브라우저 소스 'refreshnocache' 등)"""
        await self.call("PressInputPropertiesButton", {
            "inputName": input_name,
            "propertyName": property_name,
        })

    async def remove_input(self, input_name: str) -> None:
        """입력 삭제 (모든 씬에서 해당 입력의 씬 아이템도 함께 삭제됨)"""
        await self.call("RemoveInput", {"inputName": input_name})
