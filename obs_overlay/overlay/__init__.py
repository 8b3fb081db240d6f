"""
OBS 브라우저 소스 오버레이 관리.

- OverlayManager: 현재 씬에서 오버레이를 찾아 생성/표시/숨김/새로고침/삭제.
- index.html: 브라우저 소스가 file:// 로 여는 오버레이 화면.
"""

from obs_overlay.overlay.manager import ACTIONS, OverlayManager, OverlayNotFoundError

__all__ = ["ACTIONS", "OverlayManager", "OverlayNotFoundError"]
