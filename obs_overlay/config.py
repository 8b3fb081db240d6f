"""
설정 로드. ~/obs-twitch/.env 를 읽어 환경변수로 올린 뒤 OverlaySettings 생성.

.env 예시:
  OBS_WEBSOCKET_PORT=4455
  OBS_WEBSOCKET_PASSWORD=xxxx
  # OBS_WEBSOCKET_HOST=localhost
  # OVERLAY_HTML_PATH=/path/to/index.html
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import load_dotenv

from obs_overlay.obs.obs_client import DEFAULT_HOST, DEFAULT_PORT

DOTENV_PATH = Path.home() / "obs-twitch" / ".env"

OVERLAY_NAME = "Lofi DJ Overlay"
OVERLAY_WIDTH = 480
DEFAULT_OVERLAY_HTML = Path(__file__).resolve().parent / "overlay" / "index.html"


def load_env(path: Optional[Union[Path, str]] = None) -> bool:
    """dotenv 파일 로드. 이미 설정된 환경변수는 덮어쓰지 않음. 파일 없으면 False."""
    p = Path(path) if path else DOTENV_PATH
    return load_dotenv(p, override=False)


def overlay_url(path: Union[Path, str]) -> str:
    """HTML 파일 경로 → file:// URL (파일 존재 여부는 확인하지 않음)"""
    return Path(path).expanduser().resolve().as_uri()


@dataclass
class OverlaySettings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    password: Optional[str] = None
    overlay_name: str = OVERLAY_NAME
    overlay_width: int = OVERLAY_WIDTH
    overlay_html: Path = DEFAULT_OVERLAY_HTML

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "OverlaySettings":
        env = os.environ if env is None else env
        port_raw = (env.get("OBS_WEBSOCKET_PORT") or "").strip()
        try:
            port = int(port_raw) if port_raw else DEFAULT_PORT
        except ValueError:
            raise ValueError(f"OBS_WEBSOCKET_PORT가 숫자가 아닙니다: {port_raw!r}") from None
        html = (env.get("OVERLAY_HTML_PATH") or "").strip()
        return cls(
            host=(env.get("OBS_WEBSOCKET_HOST") or "").strip() or DEFAULT_HOST,
            port=port,
            password=env.get("OBS_WEBSOCKET_PASSWORD") or None,
            overlay_html=Path(html).expanduser() if html else DEFAULT_OVERLAY_HTML,
        )

    @property
    def overlay_url(self) -> str:
        return overlay_url(self.overlay_html)
