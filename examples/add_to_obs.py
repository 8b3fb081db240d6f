"""
DJ 오버레이를 OBS 브라우저 소스로 추가/관리하는 스크립트.

- 현재 프로그램 씬 왼쪽에 480px 폭 컬럼으로 배치 (높이는 OBS 캔버스 높이).
- ~/obs-twitch/.env 의 OBS_WEBSOCKET_PORT, OBS_WEBSOCKET_PASSWORD 사용.

사용법 (프로젝트 루트에서):
  python examples/add_to_obs.py            # create
  python examples/add_to_obs.py show
  python examples/add_to_obs.py hide
  python examples/add_to_obs.py refresh
  python examples/add_to_obs.py remove
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from obs_overlay.cli import main

if __name__ == "__main__":
    sys.exit(main())
