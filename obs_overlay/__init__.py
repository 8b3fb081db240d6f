"""OBS 브라우저 소스 오버레이 자동화 (Lofi DJ Overlay)"""

__version__ = "0.1.0"
