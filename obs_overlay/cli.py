"""
명령행 진입점.

사용법:
  obs-overlay [create|show|hide|refresh|remove]   (생략 시 create)
  python examples/add_to_obs.py show
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional, Sequence

from obs_overlay.config import OverlaySettings, load_env
from obs_overlay.obs.obs_client import OBSClient
from obs_overlay.overlay.manager import ACTIONS, OverlayManager
from obs_overlay.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

USAGE = f"Usage: obs-overlay [{'|'.join(ACTIONS)}]"


async def run(action: str, settings: OverlaySettings, client: Optional[OBSClient] = None) -> None:
    """연결 → 액션 실행 → 연결 해제. 예외가 나면 연결은 닫지 않고 그대로 전파."""
    client = client or OBSClient(settings.host, settings.port, settings.password)
    await client.connect()
    print("Connected to OBS WebSocket")
    await OverlayManager(client, settings).run(action)
    await client.disconnect()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    action = (args[0].strip().lower() if args else "") or "create"

    if action not in ACTIONS:
        print(USAGE)
        return 0

    try:
        load_env()
        setup_logging()
        settings = OverlaySettings.from_env()
        logger.info("액션 시작: %s (%s:%s)", action, settings.host, settings.port)
        asyncio.run(run(action, settings))
    except Exception as e:
        logger.error("액션 실패: %s: %s", action, e, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
